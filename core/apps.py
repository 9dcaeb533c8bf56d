"""App configuration for the core Django app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app (radar chart builder and demo)."""

    name = "core"
    verbose_name = "Radar charts"
