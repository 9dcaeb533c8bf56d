"""Dataset colours for radar charts."""

from __future__ import annotations

import numbers
import re
from collections.abc import Sequence

from .schema import RGB, ColourMatrix, InvalidInputError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

# Same hue order as the dashboard palette: blue, red, orange, green, purple, teal.
DEFAULT_COLOUR_MATRIX = ColourMatrix(
    columns=(
        (51, 102, 204),
        (220, 57, 18),
        (255, 153, 0),
        (16, 150, 24),
        (153, 0, 153),
        (0, 153, 198),
    )
)

POINT_BORDER_COLOUR = "#fff"
POINT_HOVER_BACKGROUND_COLOUR = "#fff"


def resolve_colour_matrix(raw: ColourMatrix | Sequence[RGB | str] | None) -> ColourMatrix:
    """Return a validated ColourMatrix for the builder.

    Args:
        raw: None for the default palette, an existing ColourMatrix, or a
            sequence of columns given as `(r, g, b)` triples or `#RRGGBB` strings.

    Returns:
        ColourMatrix with at least one column and channels in 0..255.

    Raises:
        InvalidInputError: When the matrix is empty or a column is malformed.
    """

    if raw is None:
        return DEFAULT_COLOUR_MATRIX

    if isinstance(raw, ColourMatrix):
        columns = raw.columns
    elif isinstance(raw, str):
        columns = (_parse_column(raw, index=0),)
    else:
        columns = tuple(_parse_column(column, index=idx) for idx, column in enumerate(raw))

    if not columns:
        raise InvalidInputError("Colour matrix must contain at least one colour column.")
    for idx, column in enumerate(columns):
        _check_channels(column, index=idx)
    return ColourMatrix(columns=tuple(tuple(int(c) for c in column) for column in columns))  # type: ignore[misc]


def rgba(colour: RGB, alpha: float) -> str:
    """Format an RGB triple and alpha as a CSS `rgba(...)` string."""

    r, g, b = colour
    return f"rgba({r},{g},{b},{_format_alpha(alpha)})"


def _format_alpha(alpha: float) -> str:
    """Format alpha without a trailing `.0` for whole numbers."""

    value = float(alpha)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _parse_column(column: RGB | str, *, index: int) -> RGB:
    """Parse one colour column from a triple or a hex string."""

    if isinstance(column, str):
        match = _HEX_RE.match(column.strip())
        if match is None:
            raise InvalidInputError(f"Colour column {index} is not a #RRGGBB hex string: {column!r}.")
        digits = match.group(1)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    values = tuple(column)
    if len(values) != 3:
        raise InvalidInputError(f"Colour column {index} must have exactly 3 channels (r, g, b); got {len(values)}.")
    return values  # type: ignore[return-value]


def _check_channels(column: Sequence[object], *, index: int) -> None:
    """Validate that a column holds three whole-number channels within 0..255.

    Integral floats such as `255.0` and NumPy integers are accepted.
    """

    if len(column) != 3:
        raise InvalidInputError(f"Colour column {index} must have exactly 3 channels (r, g, b); got {len(column)}.")
    for channel in column:
        whole = isinstance(channel, numbers.Integral) or (isinstance(channel, float) and channel.is_integer())
        if isinstance(channel, bool) or not whole or not 0 <= channel <= 255:  # type: ignore[operator]
            raise InvalidInputError(f"Colour column {index} has an invalid channel value: {channel!r}.")
