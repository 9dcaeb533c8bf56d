"""Input boundary for radar chart score data.

Callers may hand over scores as a mapping, a list of lists, a single flat list,
or the explicit `Series`/`SeriesSet` types; labels may be a list, omitted, or
suppressed. These helpers resolve that loose input once into the explicit
variants from `schema`, then normalize and validate it so the builder works on
a consistent shape.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from decimal import Decimal

from .schema import (
    BLANK_LABELS,
    UNLABELED,
    BlankLabels,
    InvalidInputError,
    Labeled,
    LabelSpec,
    ScoreInput,
    ScoreValue,
    Series,
    SeriesSet,
    Unlabeled,
)

DUMMY_SERIES_NAME = "null"

RawScores = ScoreInput | Mapping[str, Sequence[object]] | Sequence[object]
RawLabels = LabelSpec | Sequence[str | None] | None


def coerce_scores(raw: RawScores) -> ScoreInput:
    """Resolve caller score input into a `Series` or `SeriesSet`.

    Args:
        raw: A mapping of series name to values, a sequence of value
            sequences, a single flat sequence of values, or an explicit
            `Series`/`SeriesSet`.

    Returns:
        A `SeriesSet` for collections of series, or a `Series` for a flat sequence.

    Raises:
        InvalidInputError: When the input shape is not recognized.
    """

    if isinstance(raw, (Series, SeriesSet)):
        return raw

    if isinstance(raw, Mapping):
        return SeriesSet(
            series=tuple(
                Series(name=str(name), values=_as_values(values, name=str(name))) for name, values in raw.items()
            )
        )

    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise InvalidInputError(f"Scores must be a mapping or a sequence; got {type(raw).__name__}.")

    nested = [_is_sequence(item) for item in raw]
    if raw and all(nested):
        return SeriesSet(
            series=tuple(
                Series(name=f"Series {idx + 1}", values=_as_values(values, name=f"Series {idx + 1}"))
                for idx, values in enumerate(raw)
            )
        )
    if any(nested):
        raise InvalidInputError("Scores must be either a flat sequence of values or a sequence of sequences, not a mix.")
    return Series(name="Series 1", values=tuple(raw))  # type: ignore[arg-type]


def coerce_labels(raw: RawLabels) -> LabelSpec:
    """Resolve caller label input into `Labeled`, `Unlabeled` or `BlankLabels`.

    An omitted value means "derive from the first series". A sequence whose
    entries are all None (including an empty sequence) means "no labels wanted".
    """

    if raw is None:
        return UNLABELED
    if isinstance(raw, (Labeled, Unlabeled, BlankLabels)):
        return raw
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise InvalidInputError(f"Labels must be a sequence of strings; got {type(raw).__name__}.")
    if all(label is None for label in raw):
        return BLANK_LABELS
    return Labeled(labels=tuple("" if label is None else str(label) for label in raw))


def normalize_scores(scores: ScoreInput, labels: LabelSpec) -> tuple[tuple[str, ...], SeriesSet]:
    """Resolve axis labels and validate every series against them.

    Args:
        scores: Explicit score input.
        labels: Explicit label variant.

    Returns:
        Tuple of (axis labels, series set with numeric values only).

    Raises:
        InvalidInputError: When labels cannot be resolved, a series length does
            not match the label count, or a score is not numeric.
    """

    series = list(scores.series) if isinstance(scores, SeriesSet) else [scores]
    if not series:
        raise InvalidInputError("Scores must contain at least one series.")

    if isinstance(labels, Unlabeled):
        first = series[0]
        if not first.is_textual:
            raise InvalidInputError(
                "Labels must be specified or derivable from a textual first series; "
                f"series {first.name!r} is not textual."
            )
        axis_labels = tuple("" if value is None else str(value) for value in first.values)
        if len(series) > 1:
            series = series[1:]
        else:
            series = [Series(name=DUMMY_SERIES_NAME, values=(None,) * len(axis_labels))]
    elif isinstance(labels, BlankLabels):
        axis_labels = ("",) * len(series[0].values)
    else:
        axis_labels = labels.labels

    for s in series:
        if len(s.values) != len(axis_labels):
            raise InvalidInputError(
                f"Each score series must be the same length as the labels: series {s.name!r} "
                f"has {len(s.values)} values but there are {len(axis_labels)} labels."
            )

    numeric = tuple(
        Series(name=s.name, values=tuple(_coerce_score(v, series_name=s.name, position=i) for i, v in enumerate(s.values)))
        for s in series
    )
    return axis_labels, SeriesSet(series=numeric)


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _as_values(values: object, *, name: str) -> tuple[ScoreValue | str, ...]:
    """Return a series' values as a tuple, rejecting scalars."""

    if not _is_sequence(values):
        raise InvalidInputError(f"Series {name!r} must be a sequence of values; got {type(values).__name__}.")
    return tuple(values)  # type: ignore[arg-type]


def _coerce_score(value: object, *, series_name: str, position: int) -> ScoreValue:
    """Coerce a single score to int/float, mapping NaN and infinities to a missing value."""

    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidInputError(f"Series {series_name!r} has a boolean at position {position}; scores must be numeric.")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, (numbers.Real, Decimal)):
        number = float(value)
        return number if math.isfinite(number) else None
    raise InvalidInputError(
        f"Series {series_name!r} has a non-numeric value at position {position}: {value!r}."
    )
