"""Template tags for embedding radar chart widgets."""

from __future__ import annotations

from django import template
from django.utils.safestring import SafeString

from core.charting.schema import RadarWidget
from core.charting.widget import DEFAULT_CANVAS_CLASS, radar_canvas_html, radar_widget_html

register = template.Library()


@register.simple_tag
def radar_chart(widget: RadarWidget, css_class: str = DEFAULT_CANVAS_CLASS) -> SafeString:
    """Render a widget's canvas and configuration payload.

    Usage: `{% radar_chart widget %}`
    """

    return radar_widget_html(widget, css_class=css_class)


@register.simple_tag
def radar_canvas(
    element_id: str,
    css_class: str = DEFAULT_CANVAS_CLASS,
    width: int | str | None = None,
    height: int | str | None = None,
) -> SafeString:
    """Render only the `<canvas>` placeholder for a chart drawn elsewhere."""

    return radar_canvas_html(element_id, css_class=css_class, width=width, height=height)
