"""Typed builder for Chart.js configuration documents."""

from .charts import *  # noqa: F401,F403
from .charts import __all__ as _charts_all
from .errors import (
    ChartError,
    ConfigurationError,
    FormatError,
    NumericError,
    ParseError,
    RegistrationError,
    SeriesShapeError,
)

__all__ = [
    *_charts_all,
    "ChartError",
    "ConfigurationError",
    "FormatError",
    "NumericError",
    "ParseError",
    "RegistrationError",
    "SeriesShapeError",
]
