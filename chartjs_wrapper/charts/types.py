"""Shared types for the chart configuration package."""

from enum import Enum
from typing import Union

# Anything json.dumps can write for a single axis value
WireValue = Union[int, float, str]


class AxisCategory(Enum):
    """Semantic scale kinds; values are the Chart.js scale ids."""

    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"
    CATEGORY = "category"
    TIME = "time"
    TIMESERIES = "timeseries"
    RADIAL_LINEAR = "radialLinear"


class TimePolicy(Enum):
    """Wire format used for every date/time value type of a registry."""

    RFC3339 = "rfc3339"
    EPOCH_MILLIS = "epoch_millis"


class ChartType(Enum):
    """Enumeration of supported dataset types."""

    BUBBLE = "bubble"
    BAR = "bar"
    LINE = "line"
    DOUGHNUT = "doughnut"
    PIE = "pie"
    RADAR = "radar"
    POLAR_AREA = "polarArea"
    SCATTER = "scatter"


class Position(Enum):
    """Placement of a title or legend box."""

    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"


class Alignment(Enum):
    """Alignment of a legend or axis title."""

    START = "start"
    CENTER = "center"
    END = "end"


class Boundary(Enum):
    """Named fill boundaries."""

    START = "start"
    END = "end"
    ORIGIN = "origin"
    STACK = "stack"
    SHAPE = "shape"
