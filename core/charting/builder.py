"""Radar chart configuration builder.

Translates score series and axis labels into the declarative configuration
consumed by the Chart.js radar chart: a `data` block (labels + one dataset per
series) and an `options` block merged from the recognized settings and any
pass-through Chart.js options.
"""

from __future__ import annotations

import copy
import logging

from .inputs import RawLabels, RawScores, coerce_labels, coerce_scores, normalize_scores
from .palette import POINT_BORDER_COLOUR, POINT_HOVER_BACKGROUND_COLOUR, resolve_colour_matrix, rgba
from .scale import derive_scale_ticks
from .schema import (
    ColourMatrix,
    InvalidInputError,
    JSONValue,
    RadarChartConfig,
    RadarDataset,
    RadarOptions,
    SeriesSet,
)

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = RadarOptions()


def build_radar_config(
    scores: RawScores,
    labels: RawLabels = None,
    *,
    options: RadarOptions | None = None,
) -> RadarChartConfig:
    """Build a Chart.js radar configuration from score series.

    Args:
        scores: Score series; see `coerce_scores` for accepted shapes. When
            `labels` is omitted the first series must be textual and is used
            as the axis labels.
        labels: Axis labels, None to derive them, or `BLANK_LABELS` (or a
            sequence of None) for empty labels.
        options: Recognized options and pass-through settings.

    Returns:
        RadarChartConfig with `data` and `options` sections.

    Raises:
        InvalidInputError: When labels cannot be resolved, series lengths do
            not match the labels, or scores/options are invalid.
    """

    options = options or DEFAULT_OPTIONS
    axis_labels, series_set = normalize_scores(coerce_scores(scores), coerce_labels(labels))
    colour_matrix = resolve_colour_matrix(options.colour_matrix)
    _check_alpha("polygon_alpha", options.polygon_alpha)
    _check_alpha("line_alpha", options.line_alpha)

    config: RadarChartConfig = {
        "data": {
            "labels": list(axis_labels),
            "datasets": build_datasets(series_set, colour_matrix=colour_matrix, options=options),
        },
        "options": build_chart_options(options),
    }
    logger.debug(
        "Built radar config with %d datasets over %d axes.",
        len(config["data"]["datasets"]),
        len(axis_labels),
    )
    return config


def build_datasets(
    series_set: SeriesSet,
    *,
    colour_matrix: ColourMatrix,
    options: RadarOptions,
) -> list[RadarDataset]:
    """Build one dataset per series, colouring them cyclically."""

    datasets: list[RadarDataset] = []
    for idx, series in enumerate(series_set.series):
        colour = colour_matrix.column_for(idx)
        fill_colour = rgba(colour, options.polygon_alpha)
        line_colour = rgba(colour, options.line_alpha)
        dataset: RadarDataset = {
            "label": series.name,
            "data": list(series.values),  # type: ignore[arg-type]
            "backgroundColor": fill_colour,
            "borderColor": line_colour,
            "pointBackgroundColor": line_colour,
            "pointBorderColor": POINT_BORDER_COLOUR,
            "pointHoverBackgroundColor": POINT_HOVER_BACKGROUND_COLOUR,
            "pointHoverBorderColor": line_colour,
        }
        if not options.add_dots:
            dataset["pointRadius"] = 0
        datasets.append(dataset)
    return datasets


def build_chart_options(options: RadarOptions) -> dict[str, JSONValue]:
    """Merge the chart-wide options; pass-through keys override on collision."""

    merged: dict[str, JSONValue] = {"responsive": options.responsive}
    merged["title"] = {"display": options.title is not None, "text": options.title}
    merged["scale"] = {
        "ticks": dict(
            derive_scale_ticks(
                options.max_scale,
                options.scale_step_width,
                options.scale_start_value,
            )
        ),
        "pointLabels": {"fontSize": options.label_size},
    }
    merged["tooltips"] = {"enabled": options.show_tooltip_label, "mode": "label"}
    merged["legend"] = {"display": options.show_legend}
    for key, value in options.pass_through.items():
        merged[str(key)] = copy.deepcopy(value)
    return merged


def _check_alpha(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value <= 1:
        raise InvalidInputError(f"{name} must be a number between 0 and 1; got {value!r}.")
