"""Typed Chart.js configuration package with pluggable value types."""

from .types import Alignment, AxisCategory, Boundary, ChartType, Position, TimePolicy, WireValue
from .protocol import AxisValue, SerializationStrategy
from .registry import (
    ValueType,
    ValueTypeRegistry,
    classify,
    default_registry,
    get_value_type,
    list_value_types,
    register_value_type,
)
from .values import TypedValue
from .data import DataPoint, PairSeries, RadiusPoint, RadiusSeries, Series, TooltipPoint, TooltipSeries, to_series
from .regression import RegressionResult, fit, r_squared
from .common import Padding, Rgb, Size, SizeUnit
from .render import Chart, ChartRenderer
from .options import (
    AxisTitle,
    ChartConfig,
    ChartOptions,
    Dataset,
    Fill,
    FillValue,
    Legend,
    Plugins,
    ScaleConfig,
    ScalingConfig,
    Title,
    to_wire,
)

__all__ = [
    "Alignment",
    "AxisCategory",
    "AxisTitle",
    "AxisValue",
    "Boundary",
    "Chart",
    "ChartConfig",
    "ChartOptions",
    "ChartRenderer",
    "ChartType",
    "DataPoint",
    "Dataset",
    "Fill",
    "FillValue",
    "Legend",
    "Padding",
    "PairSeries",
    "Plugins",
    "Position",
    "RadiusPoint",
    "RadiusSeries",
    "RegressionResult",
    "Rgb",
    "ScaleConfig",
    "ScalingConfig",
    "SerializationStrategy",
    "Series",
    "Size",
    "SizeUnit",
    "TimePolicy",
    "Title",
    "TooltipPoint",
    "TooltipSeries",
    "TypedValue",
    "ValueType",
    "ValueTypeRegistry",
    "WireValue",
    "classify",
    "default_registry",
    "fit",
    "get_value_type",
    "list_value_types",
    "r_squared",
    "register_value_type",
    "to_series",
    "to_wire",
]
