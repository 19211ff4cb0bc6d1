"""Series variants and their point-array serialization."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from ..errors import SeriesShapeError
from .registry import ValueTypeRegistry
from .types import AxisCategory, WireValue
from .values import TypedValue


@dataclass(frozen=True, slots=True)
class DataPoint:
    """A plain (x, y) point."""

    x: TypedValue[Any]
    y: TypedValue[Any]

    def to_wire(self) -> dict[str, WireValue]:
        return {"x": self.x.serialize(), "y": self.y.serialize()}


@dataclass(frozen=True, slots=True)
class RadiusPoint:
    """A bubble point with an unsigned integer radius."""

    x: TypedValue[Any]
    y: TypedValue[Any]
    r: int

    def to_wire(self) -> dict[str, WireValue]:
        return {"x": self.x.serialize(), "y": self.y.serialize(), "r": self.r}


@dataclass(frozen=True, slots=True)
class TooltipPoint:
    """A point carrying its own tooltip text."""

    x: TypedValue[Any]
    y: TypedValue[Any]
    tooltip: str

    def to_wire(self) -> dict[str, WireValue]:
        return {"x": self.x.serialize(), "y": self.y.serialize(), "tooltip": self.tooltip}


Point = Union[DataPoint, RadiusPoint, TooltipPoint]


@dataclass(frozen=True)
class _SeriesBase:
    points: tuple[Any, ...] = ()

    kind: ClassVar[str] = ""

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.points)

    def to_wire(self) -> list[dict[str, WireValue]]:
        """
        Serialize to the Chart.js point array.

        Returns:
            One object per point, in insertion order, with keys x and y
            followed by the variant's extra key.

        Raises:
            FormatError: If any value fails to render.
        """
        return [point.to_wire() for point in self.points]

    def to_pairs(self) -> list[tuple[Any, Any]]:
        """
        Return the raw (x, y) values in order, dropping radius and tooltip.

        ``PairSeries.from_pairs(series.to_pairs())`` reproduces the x/y values
        and order exactly.
        """
        return [(point.x.value, point.y.value) for point in self.points]

    @property
    def x_category(self) -> AxisCategory | None:
        """Axis category of the first x value, None for an empty series."""
        return self.points[0].x.category if self.points else None

    @property
    def y_category(self) -> AxisCategory | None:
        """Axis category of the first y value, None for an empty series."""
        return self.points[0].y.category if self.points else None


@dataclass(frozen=True)
class PairSeries(_SeriesBase):
    """Series of plain (x, y) points."""

    points: tuple[DataPoint, ...] = ()

    kind: ClassVar[str] = "pairs"

    @classmethod
    def from_pairs(cls, pairs: Iterable[Any], registry: ValueTypeRegistry | None = None) -> PairSeries:
        """Build a PairSeries from (x, y) rows."""
        points = []
        for index, row in enumerate(pairs):
            x, y = _unpack(row, index, 2)
            points.append(DataPoint(TypedValue.wrap(x, registry), TypedValue.wrap(y, registry)))
        return cls(tuple(points))


@dataclass(frozen=True)
class RadiusSeries(_SeriesBase):
    """Series of (x, y, r) bubble points."""

    points: tuple[RadiusPoint, ...] = ()

    kind: ClassVar[str] = "radius"

    @classmethod
    def from_triples(cls, triples: Iterable[Any], registry: ValueTypeRegistry | None = None) -> RadiusSeries:
        """Build a RadiusSeries from (x, y, r) rows."""
        points = []
        for index, row in enumerate(triples):
            x, y, r = _unpack(row, index, 3)
            if not _is_radius(r):
                raise SeriesShapeError(f"Point {index}: radius must be a non-negative integer, got {r!r}")
            points.append(RadiusPoint(TypedValue.wrap(x, registry), TypedValue.wrap(y, registry), int(r)))
        return cls(tuple(points))


@dataclass(frozen=True)
class TooltipSeries(_SeriesBase):
    """Series of (x, y, tooltip) points."""

    points: tuple[TooltipPoint, ...] = ()

    kind: ClassVar[str] = "tooltip"

    @classmethod
    def from_triples(cls, triples: Iterable[Any], registry: ValueTypeRegistry | None = None) -> TooltipSeries:
        """Build a TooltipSeries from (x, y, tooltip) rows."""
        points = []
        for index, row in enumerate(triples):
            x, y, tooltip = _unpack(row, index, 3)
            if not isinstance(tooltip, str):
                raise SeriesShapeError(f"Point {index}: tooltip must be a string, got {tooltip!r}")
            points.append(TooltipPoint(TypedValue.wrap(x, registry), TypedValue.wrap(y, registry), tooltip))
        return cls(tuple(points))


Series = Union[PairSeries, RadiusSeries, TooltipSeries]
SERIES_TYPES = (PairSeries, RadiusSeries, TooltipSeries)


def to_series(data: Series | Iterable[Any], registry: ValueTypeRegistry | None = None) -> Series:
    """
    Convert raw rows into the matching series variant.

    Rows of two elements produce a PairSeries; rows of three produce a
    RadiusSeries when the third element is an integer and a TooltipSeries
    when it is a string. Every row must have the same shape.

    Args:
        data: A Series (returned unchanged) or an iterable of tuples, lists
            or other fixed-size sequences.
        registry: Registry used to wrap values; the default when None.

    Returns:
        The constructed series.

    Raises:
        SeriesShapeError: If rows are mixed, of unsupported arity, or carry an
            invalid radius/tooltip.
        RegistrationError: If a value's type is not registered.
    """
    if isinstance(data, SERIES_TYPES):
        return data
    if isinstance(data, (str, bytes)):
        raise SeriesShapeError("Expected a collection of points, got a string")
    rows = [_as_row(row, index) for index, row in enumerate(data)]
    if not rows:
        return PairSeries()
    arity = len(rows[0])
    mismatched = [index for index, row in enumerate(rows) if len(row) != arity]
    if mismatched:
        raise SeriesShapeError(f"Points have mixed arity; first mismatch at index {mismatched[0]}")
    if arity == 2:
        return PairSeries.from_pairs(rows, registry)
    if arity == 3:
        if isinstance(rows[0][2], str):
            return TooltipSeries.from_triples(rows, registry)
        return RadiusSeries.from_triples(rows, registry)
    raise SeriesShapeError(f"Points must have 2 or 3 elements, got {arity}")


def _as_row(row: Any, index: int) -> tuple[Any, ...]:
    if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
        raise SeriesShapeError(f"Point {index} is not a tuple or sequence: {row!r}")
    return tuple(row)


def _unpack(row: Any, index: int, arity: int) -> tuple[Any, ...]:
    values = _as_row(row, index)
    if len(values) != arity:
        raise SeriesShapeError(f"Point {index}: expected {arity} elements, got {len(values)}")
    return values


def _is_radius(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value >= 0
