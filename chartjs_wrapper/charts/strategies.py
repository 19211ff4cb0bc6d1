"""Serialization strategies and the built-in value type registrations."""

from __future__ import annotations

import calendar
import math
import numbers
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from .types import AxisCategory, WireValue

if TYPE_CHECKING:
    from .registry import ValueTypeRegistry

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def numeric(value: numbers.Real | Decimal) -> WireValue:
    """Write a number as-is, coercing numpy and Decimal scalars to builtins."""
    if isinstance(value, numbers.Integral):
        return int(value)
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"non-finite number {value!r} has no JSON representation")
    return result


def text(value: str) -> WireValue:
    """Write a string as-is."""
    return str(value)


def rfc3339_datetime(value: datetime) -> WireValue:
    """
    Render a datetime as RFC-3339 text.

    Aware values carry their UTC offset; naive values are read as UTC, as in
    the epoch-milliseconds rendering.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def rfc3339_date(value: date) -> WireValue:
    """Render a calendar date as an RFC-3339 full-date."""
    return value.isoformat()


def epoch_millis_datetime(value: datetime) -> WireValue:
    """Render a datetime as integer milliseconds since the Unix epoch (naive means UTC)."""
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // _ONE_MILLISECOND


def epoch_millis_date(value: date) -> WireValue:
    """Render a calendar date as the epoch milliseconds of its UTC midnight."""
    return epoch_millis_datetime(datetime.combine(value, time(), tzinfo=timezone.utc))


def _as_millis(value: np.datetime64) -> np.datetime64:
    if np.isnat(value):
        raise ValueError("NaT has no wire representation")
    return value.astype("datetime64[ms]")


def rfc3339_datetime64(value: np.datetime64) -> WireValue:
    """Render a numpy datetime64 as RFC-3339 text in UTC, millisecond precision."""
    return str(np.datetime_as_string(_as_millis(value), unit="ms", timezone="UTC"))


def epoch_millis_datetime64(value: np.datetime64) -> WireValue:
    """Render a numpy datetime64 as integer epoch milliseconds."""
    return int(_as_millis(value).astype(np.int64))


def clock_string(value: time) -> WireValue:
    """Render a time of day as HH:MM:SS."""
    return value.strftime("%H:%M:%S")


def ordinal_name(value: Enum) -> WireValue:
    """Render a weekday or month member as its name, e.g. "Monday"."""
    return value.name.capitalize()


def register_builtin_types(registry: ValueTypeRegistry) -> None:
    """
    Register the value types supported out of the box.

    Each type gets its own registration call; third-party types are added the
    same way through ``registry.register``.

    Args:
        registry: Registry to populate. Its time policy selects which of the
            two temporal renderings is bound.
    """
    registry.register(int, AxisCategory.LINEAR, numeric)
    registry.register(float, AxisCategory.LINEAR, numeric)
    registry.register(Decimal, AxisCategory.LINEAR, numeric)
    registry.register(np.integer, AxisCategory.LINEAR, numeric)
    registry.register(np.floating, AxisCategory.LINEAR, numeric)
    registry.register(str, AxisCategory.CATEGORY, text)
    registry.register_temporal(datetime, rfc3339=rfc3339_datetime, epoch_millis=epoch_millis_datetime)
    registry.register_temporal(date, rfc3339=rfc3339_date, epoch_millis=epoch_millis_date)
    registry.register_temporal(np.datetime64, rfc3339=rfc3339_datetime64, epoch_millis=epoch_millis_datetime64)
    registry.register(calendar.Day, AxisCategory.CATEGORY, ordinal_name)
    registry.register(calendar.Month, AxisCategory.CATEGORY, ordinal_name)
    registry.register(time, AxisCategory.CATEGORY, clock_string)
