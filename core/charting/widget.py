"""Radar chart widgets and their HTML embedding.

`chart_js_radar` is the keyword-style entry point: it builds the configuration
and binds it to a canvas element id and size. The HTML helpers emit the
`<canvas>` placeholder and a `json_script` payload that the page script hands
to Chart.js.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from hashlib import sha256

from django.forms.utils import flatatt
from django.utils.html import format_html, json_script
from django.utils.safestring import SafeString

from .builder import build_radar_config
from .inputs import RawLabels, RawScores
from .palette import resolve_colour_matrix
from .schema import RGB, ColourMatrix, JSONValue, RadarChartConfig, RadarOptions, RadarWidget

DEFAULT_CANVAS_CLASS = "chartjs-radar"


def chart_js_radar(
    scores: RawScores,
    labels: RawLabels = None,
    *,
    width: int | str | None = None,
    height: int | str | None = None,
    title: str | None = None,
    max_scale: float | None = None,
    scale_step_width: float | None = None,
    scale_start_value: float | None = 0,
    responsive: bool = True,
    label_size: float = 18,
    show_legend: bool = True,
    add_dots: bool = True,
    colour_matrix: ColourMatrix | Sequence[RGB | str] | None = None,
    polygon_alpha: float = 0.2,
    line_alpha: float = 0.8,
    show_tooltip_label: bool = True,
    element_id: str | None = None,
    **pass_through: JSONValue,
) -> RadarWidget:
    """Make a Chart.js radar widget.

    Args:
        scores: Mapping (or sequence) of scores for each axis. If `labels` is
            omitted the labels are taken from the first series.
        labels: Labels for each axis; a sequence of None leaves them blank.
        width: Canvas width attribute.
        height: Canvas height attribute.
        title: Title displayed above the chart.
        max_scale: Max value on each axis.
        scale_step_width: Spacing between rings on the radar.
        scale_start_value: Value at the centre of the radar.
        responsive: Whether the chart resizes when the browser does.
        label_size: Point label font size in pixels.
        show_legend: Whether to show the legend.
        add_dots: Whether to show a dot for each point.
        colour_matrix: Dataset colours; the default palette when None. A plain
            sequence is read as columns (`(r, g, b)` triples or `#RRGGBB`
            strings). For a 3 x N matrix of red, green and blue rows pass
            `ColourMatrix.from_rows(rows)` instead.
        polygon_alpha: Alpha value for polygon fills.
        line_alpha: Alpha value for outlines.
        show_tooltip_label: Whether dataset labels are shown on hover.
        element_id: Canvas id; derived from the configuration when omitted.
        **pass_through: Extra Chart.js options forwarded verbatim. Names must
            match Chart.js option names.

    Returns:
        RadarWidget ready to embed with `radar_widget_html`.

    Raises:
        InvalidInputError: Propagated from the configuration builder.
    """

    options = RadarOptions(
        title=title,
        max_scale=max_scale,
        scale_step_width=scale_step_width,
        scale_start_value=scale_start_value,
        responsive=responsive,
        label_size=label_size,
        show_legend=show_legend,
        add_dots=add_dots,
        colour_matrix=None if colour_matrix is None else resolve_colour_matrix(colour_matrix),
        polygon_alpha=polygon_alpha,
        line_alpha=line_alpha,
        show_tooltip_label=show_tooltip_label,
        pass_through=pass_through,
    )
    config = build_radar_config(scores, labels, options=options)
    return RadarWidget(
        config=config,
        element_id=element_id or default_element_id(config),
        width=width,
        height=height,
    )


def default_element_id(config: RadarChartConfig) -> str:
    """Return a stable canvas id derived from the configuration content."""

    dumped = json.dumps(config, sort_keys=True, default=str)
    return f"radar-{sha256(dumped.encode('utf-8')).hexdigest()[:12]}"


def radar_canvas_html(
    element_id: str,
    *,
    css_class: str = DEFAULT_CANVAS_CLASS,
    width: int | str | None = None,
    height: int | str | None = None,
) -> SafeString:
    """Return the `<canvas>` placeholder Chart.js draws into.

    Args:
        element_id: DOM id of the canvas.
        css_class: CSS class for the canvas.
        width: Optional width attribute.
        height: Optional height attribute.

    Returns:
        Escaped canvas markup.
    """

    attrs: dict[str, object] = {"id": element_id, "class": css_class}
    if width is not None:
        attrs["width"] = width
    if height is not None:
        attrs["height"] = height
    return format_html("<canvas{}></canvas>", flatatt(attrs))


def config_script_id(element_id: str) -> str:
    """Return the id of the `json_script` element holding a widget's config."""

    return f"{element_id}-config"


def radar_widget_html(widget: RadarWidget, *, css_class: str = DEFAULT_CANVAS_CLASS) -> SafeString:
    """Return canvas markup plus the widget's configuration as `json_script`."""

    canvas = radar_canvas_html(
        widget.element_id,
        css_class=css_class,
        width=widget.width,
        height=widget.height,
    )
    payload = json_script(widget.config, config_script_id(widget.element_id))
    return format_html("{}\n{}", canvas, payload)
