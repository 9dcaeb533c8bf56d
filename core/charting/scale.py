"""Radial scale options for radar charts."""

from __future__ import annotations

from .schema import ScaleTicks

# Keeps Chart.js from thinning ticks when the caller fixed the step size.
MAX_TICKS_LIMIT = 1000


def derive_scale_ticks(
    max_scale: float | None = None,
    step_width: float | None = None,
    start_value: float | None = 0,
) -> ScaleTicks:
    """Return the `scale.ticks` options for a radar chart.

    Args:
        max_scale: Desired max value on each axis.
        step_width: Spacing between rings; ignored unless `max_scale` is set.
        start_value: Value at the centre of the radar.

    Returns:
        Tick options with absent fields omitted, so Chart.js falls back to
        its own defaults for anything not specified.
    """

    ticks: ScaleTicks = {}
    if max_scale is not None:
        ticks["max"] = max_scale
        if start_value is not None:
            ticks["min"] = start_value
        if step_width is not None:
            ticks["stepSize"] = step_width
            ticks["maxTicksLimit"] = MAX_TICKS_LIMIT
        return ticks

    if start_value is not None:
        ticks["min"] = start_value
    return ticks
