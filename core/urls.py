"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.radar_demo, name="radar_demo"),
    path("api/radar/", views.radar_config_api, name="radar_config_api"),
]
