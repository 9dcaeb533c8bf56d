"""Template context processors for the radar chart site."""

from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest


def chart_js(request: HttpRequest) -> dict[str, str]:
    """Expose the Chart.js script URL to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with `chart_js_url`.
    """

    return {"chart_js_url": settings.RADAR_CHART_JS_URL}
