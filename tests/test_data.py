"""Tests for series variants and their point-array wire shape."""

from __future__ import annotations

import json

import numpy as np
import pytest

from chartjs_wrapper.charts import (
    AxisCategory,
    PairSeries,
    RadiusSeries,
    TooltipSeries,
    ValueTypeRegistry,
    to_series,
)
from chartjs_wrapper.errors import RegistrationError, SeriesShapeError

pytestmark = pytest.mark.unit


def test_pairs_serialize_as_objects_in_order(registry: ValueTypeRegistry) -> None:
    """Pairs become {x, y} objects, never two-element arrays."""

    series = to_series([(12.5, "First"), (14.0, "Second")], registry)

    assert isinstance(series, PairSeries)
    assert json.dumps(series.to_wire(), separators=(",", ":")) == '[{"x":12.5,"y":"First"},{"x":14.0,"y":"Second"}]'


def test_radius_rows_build_a_bubble_series(registry: ValueTypeRegistry) -> None:
    """Integer third elements are radii."""

    series = to_series([(1, 2.0, 5), (3, 4.0, 0)], registry)

    assert isinstance(series, RadiusSeries)
    assert series.to_wire() == [{"x": 1, "y": 2.0, "r": 5}, {"x": 3, "y": 4.0, "r": 0}]
    assert list(series.to_wire()[0]) == ["x", "y", "r"]


def test_tooltip_rows_build_a_tooltip_series(registry: ValueTypeRegistry) -> None:
    """String third elements are tooltip text."""

    series = to_series([[12.5, 12.5, "tooltip1"], [14.0, 14.0, "tooltip2"]], registry)

    assert isinstance(series, TooltipSeries)
    assert series.to_wire() == [
        {"x": 12.5, "y": 12.5, "tooltip": "tooltip1"},
        {"x": 14.0, "y": 14.0, "tooltip": "tooltip2"},
    ]


@pytest.mark.parametrize(
    "rows",
    [
        [(1, 2, 3), (4, 5, "text")],
        [(1, 2, "text"), (4, 5, 6)],
    ],
)
def test_third_elements_must_agree(registry: ValueTypeRegistry, rows: list[tuple]) -> None:
    """A series cannot mix radius and tooltip points."""

    with pytest.raises(SeriesShapeError):
        to_series(rows, registry)


@pytest.mark.parametrize(
    "rows, message",
    [
        ([(1, 2), (3, 4, 5)], "mixed arity"),
        ([(1,), (2,)], "2 or 3 elements"),
        ([(1, 2, -1)], "non-negative integer"),
        ([(1, 2, 1.5)], "non-negative integer"),
        ([(1, 2, True)], "non-negative integer"),
        (["ab", "cd"], "not a tuple"),
    ],
)
def test_malformed_rows_raise_shape_errors(registry: ValueTypeRegistry, rows: list, message: str) -> None:
    """Invalid input shapes are rejected with a descriptive error."""

    with pytest.raises(SeriesShapeError, match=message):
        to_series(rows, registry)


def test_unregistered_values_fail_at_conversion(registry: ValueTypeRegistry) -> None:
    """Values are wrapped, and their types resolved, when points are created."""

    with pytest.raises(RegistrationError):
        to_series([(1, b"bytes")], registry)


def test_empty_input_is_an_empty_pair_series(registry: ValueTypeRegistry) -> None:
    """No points yields an empty PairSeries with unknown categories."""

    series = to_series([], registry)

    assert isinstance(series, PairSeries)
    assert len(series) == 0
    assert series.to_wire() == []
    assert series.x_category is None


def test_existing_series_passes_through(registry: ValueTypeRegistry) -> None:
    """Converting a Series returns the same object."""

    series = to_series([(1, 2)], registry)
    assert to_series(series, registry) is series


def test_numpy_rows_are_accepted(registry: ValueTypeRegistry) -> None:
    """Fixed-size array rows convert like tuples."""

    series = to_series(np.array([[1.0, 2.0], [3.0, 4.0]]), registry)

    assert series.to_wire() == [{"x": 1.0, "y": 2.0}, {"x": 3.0, "y": 4.0}]
    assert series.x_category is AxisCategory.LINEAR


@pytest.mark.parametrize(
    "rows",
    [
        [(3, "c"), (1, "a"), (2, "b")],
        [(3, "c", 9), (1, "a", 8)],
        [(3.5, 1.0, "first"), (1.0, 2.0, "second"), (3.5, 1.0, "third")],
    ],
)
def test_to_pairs_round_trips_through_pair_series(registry: ValueTypeRegistry, rows: list[tuple]) -> None:
    """Dropping radius/tooltip keeps x/y values and order exactly."""

    series = to_series(rows, registry)
    pairs = series.to_pairs()

    assert pairs == [(row[0], row[1]) for row in rows]
    rebuilt = PairSeries.from_pairs(pairs, registry)
    assert rebuilt.to_pairs() == pairs
    assert [point.to_wire() for point in rebuilt] == [
        {"x": wire["x"], "y": wire["y"]} for wire in series.to_wire()
    ]


def test_categories_come_from_the_first_point(registry: ValueTypeRegistry) -> None:
    """Series report the axis categories of their values."""

    series = to_series([("Mon", 1.5)], registry)

    assert series.x_category is AxisCategory.CATEGORY
    assert series.y_category is AxisCategory.LINEAR
