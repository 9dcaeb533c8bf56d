"""Tests for radar dataset colours."""

from __future__ import annotations

import pytest

from core.charting.palette import DEFAULT_COLOUR_MATRIX, resolve_colour_matrix, rgba
from core.charting.schema import ColourMatrix, InvalidInputError

pytestmark = pytest.mark.unit


def test_default_palette_is_used_when_none() -> None:
    """No colour matrix means the built-in palette."""

    assert resolve_colour_matrix(None) is DEFAULT_COLOUR_MATRIX
    assert DEFAULT_COLOUR_MATRIX.columns[0] == (51, 102, 204)


def test_column_selection_is_cyclic() -> None:
    """Series index i maps to column i mod column count."""

    count = len(DEFAULT_COLOUR_MATRIX.columns)

    assert DEFAULT_COLOUR_MATRIX.column_for(count) == DEFAULT_COLOUR_MATRIX.column_for(0)
    assert DEFAULT_COLOUR_MATRIX.column_for(count + 2) == DEFAULT_COLOUR_MATRIX.column_for(2)


def test_rows_layout_is_transposed_into_columns() -> None:
    """A 3 x N matrix (red, green, blue rows) yields N colour columns."""

    matrix = ColourMatrix.from_rows([[255, 0], [0, 0], [0, 255]])

    assert matrix.columns == ((255, 0, 0), (0, 0, 255))


def test_rows_layout_requires_three_rows() -> None:
    """Anything other than red/green/blue rows is rejected."""

    with pytest.raises(InvalidInputError, match="exactly 3 rows"):
        ColourMatrix.from_rows([[255, 0], [0, 0]])


def test_hex_and_triple_columns_are_accepted() -> None:
    """Columns may be given as hex strings or RGB triples."""

    matrix = resolve_colour_matrix(["#FF0000", "00ff00", (0, 0, 255)])

    assert matrix.columns == ((255, 0, 0), (0, 255, 0), (0, 0, 255))


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ([], "at least one colour column"),
        (["red"], "not a #RRGGBB hex string"),
        ([(1, 2)], "exactly 3 channels"),
        ([(0, 0, 256)], "invalid channel value"),
        ([(0, 0.5, 0)], "invalid channel value"),
    ],
)
def test_malformed_colour_matrices_are_rejected(raw: list[object], message: str) -> None:
    """Colour matrices must hold integer RGB channels within 0..255."""

    with pytest.raises(InvalidInputError, match=message):
        resolve_colour_matrix(raw)  # type: ignore[arg-type]


def test_rgba_formats_alpha_compactly() -> None:
    """Alpha values are written without redundant trailing zeros."""

    assert rgba((51, 102, 204), 0.2) == "rgba(51,102,204,0.2)"
    assert rgba((1, 2, 3), 1.0) == "rgba(1,2,3,1)"
    assert rgba((1, 2, 3), 0) == "rgba(1,2,3,0)"


def test_rgba_keeps_full_alpha_precision() -> None:
    """Alpha values are written without rounding."""

    assert rgba((1, 2, 3), 0.1234567) == "rgba(1,2,3,0.1234567)"


def test_integral_float_channels_are_accepted() -> None:
    """Whole-number floats are valid channels and are written as integers."""

    matrix = resolve_colour_matrix([(255.0, 0.0, 128.0)])

    assert matrix.columns == ((255, 0, 128),)
    assert rgba(matrix.columns[0], 0.5) == "rgba(255,0,128,0.5)"


def test_rows_layout_with_float_channels() -> None:
    """A 3 x N matrix of whole-number floats resolves to integer columns."""

    matrix = resolve_colour_matrix(ColourMatrix.from_rows([[255.0, 0.0], [0.0, 0.0], [0.0, 255.0]]))

    assert matrix.columns == ((255, 0, 0), (0, 0, 255))
