"""Exception hierarchy shared by the chart builder."""


class ChartError(Exception):
    """Base class for every error raised by chartjs_wrapper."""


class RegistrationError(ChartError, LookupError):
    """A value type has no registered axis category or serialization strategy."""


class FormatError(ChartError):
    """A value could not be rendered by its bound serialization strategy."""


class ParseError(ChartError, ValueError):
    """A persisted colour or size string does not match its textual grammar."""


class NumericError(ChartError, ArithmeticError):
    """The least-squares solve failed or received unusable input."""


class SeriesShapeError(ChartError, ValueError):
    """Raw points could not be converted into a single series variant."""


class ConfigurationError(ChartError, ValueError):
    """An environment-provided setting holds an unsupported value."""
