"""Schema types for radar chart configuration.

Inputs are resolved once into explicit variants (`Series | SeriesSet` for
scores, `Labeled | Unlabeled | BlankLabels` for axis labels) so the builder
never has to guess what a caller meant. Outputs are TypedDicts that mirror
the Chart.js 2.x radar configuration schema.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias, TypedDict, Union

ScoreValue: TypeAlias = int | float | None

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = Union[JSONScalar, list["JSONValue"], dict[str, "JSONValue"]]

RGB: TypeAlias = tuple[int, int, int]


class InvalidInputError(ValueError):
    """Raised when score data or options cannot produce a radar chart."""


@dataclass(frozen=True, slots=True)
class Series:
    """A single named sequence of values, one per chart axis.

    Args:
        name: Dataset label shown in the legend.
        values: Values in axis order. Textual values are only meaningful for
            the first series of an unlabeled set, where they become labels.
    """

    name: str
    values: tuple[ScoreValue | str, ...]

    @property
    def is_textual(self) -> bool:
        """Return True when the series holds axis names rather than scores.

        Missing (None) entries are allowed; at least one value must be a string.
        """

        has_text = any(isinstance(value, str) for value in self.values)
        return has_text and all(value is None or isinstance(value, str) for value in self.values)


@dataclass(frozen=True, slots=True)
class SeriesSet:
    """An ordered collection of series (the ScoreSet)."""

    series: tuple[Series, ...]

    def names(self) -> tuple[str, ...]:
        """Return series names in order."""

        return tuple(s.name for s in self.series)


ScoreInput: TypeAlias = Series | SeriesSet


@dataclass(frozen=True, slots=True)
class Labeled:
    """Axis labels supplied explicitly by the caller."""

    labels: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Unlabeled:
    """No labels supplied; derive them from a textual first series."""


@dataclass(frozen=True, slots=True)
class BlankLabels:
    """Labels explicitly suppressed; every axis gets an empty string."""


LabelSpec: TypeAlias = Labeled | Unlabeled | BlankLabels

BLANK_LABELS = BlankLabels()
UNLABELED = Unlabeled()


@dataclass(frozen=True, slots=True)
class ColourMatrix:
    """Fixed-width table of RGB columns used to colour datasets.

    Each column is one `(r, g, b)` triple. Series `i` is drawn with column
    `i % len(columns)`.
    """

    columns: tuple[RGB, ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> ColourMatrix:
        """Build a matrix from a 3 x N layout (red, green and blue rows).

        Raises:
            InvalidInputError: If there are not exactly three equal-length rows.
        """

        if len(rows) != 3:
            raise InvalidInputError(f"Colour matrix must have exactly 3 rows (red, green, blue); got {len(rows)}.")
        red, green, blue = (tuple(row) for row in rows)
        if not (len(red) == len(green) == len(blue)):
            raise InvalidInputError("Colour matrix rows must all have the same number of columns.")
        return cls(columns=tuple(zip(red, green, blue)))

    def column_for(self, index: int) -> RGB:
        """Return the colour column for a zero-based series index (cyclic)."""

        return self.columns[index % len(self.columns)]


@dataclass(frozen=True, slots=True)
class RadarOptions:
    """Recognized radar chart options plus a pass-through bag.

    Args:
        title: Chart title; the title block is hidden when None.
        max_scale: Max value on each axis.
        scale_step_width: Spacing between rings; only used with `max_scale`.
        scale_start_value: Value at the centre of the radar.
        responsive: Whether the chart resizes with the browser.
        label_size: Point label font size in pixels.
        show_legend: Whether to show the legend.
        add_dots: Whether to draw a marker at each point.
        colour_matrix: Colours for the datasets; the default palette when None.
        polygon_alpha: Alpha used for polygon fills.
        line_alpha: Alpha used for outlines and points.
        show_tooltip_label: Whether dataset labels are shown on hover.
        pass_through: Extra Chart.js options merged last, unvalidated.
    """

    title: str | None = None
    max_scale: float | None = None
    scale_step_width: float | None = None
    scale_start_value: float | None = 0
    responsive: bool = True
    label_size: float = 18
    show_legend: bool = True
    add_dots: bool = True
    colour_matrix: ColourMatrix | None = None
    polygon_alpha: float = 0.2
    line_alpha: float = 0.8
    show_tooltip_label: bool = True
    pass_through: Mapping[str, JSONValue] = field(default_factory=dict)


class ScaleTicks(TypedDict, total=False):
    """Radial axis tick bounds; missing keys fall back to Chart.js defaults."""

    max: float
    min: float
    stepSize: float
    maxTicksLimit: int


class RadarDataset(TypedDict, total=False):
    """A Chart.js radar dataset payload."""

    label: str
    data: list[ScoreValue]
    backgroundColor: str
    borderColor: str
    pointBackgroundColor: str
    pointBorderColor: str
    pointHoverBackgroundColor: str
    pointHoverBorderColor: str
    pointRadius: int


class RadarData(TypedDict):
    """Labels plus datasets for a radar chart."""

    labels: list[str]
    datasets: list[RadarDataset]


class RadarChartConfig(TypedDict):
    """The full configuration handed to Chart.js."""

    data: RadarData
    options: dict[str, JSONValue]


@dataclass(frozen=True, slots=True)
class RadarWidget:
    """A radar configuration bound to the element that will display it.

    Args:
        config: Configuration passed to Chart.js.
        element_id: DOM id for the `<canvas>` element.
        width: Optional canvas width attribute.
        height: Optional canvas height attribute.
    """

    config: RadarChartConfig
    element_id: str
    width: int | str | None = None
    height: int | str | None = None
