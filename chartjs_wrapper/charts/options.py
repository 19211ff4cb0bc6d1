"""Chart.js configuration model and its fluent builder."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, fields, is_dataclass, replace
from enum import Enum
from typing import Any, Union
from uuid import uuid4

from ..config import DEFAULT_HEIGHT_PX, DEFAULT_WIDTH_PX, R_SQUARED_PRECISION
from ..errors import FormatError, SeriesShapeError
from .common import Padding, Rgb, Size
from .data import Series, to_series
from .regression import RegressionResult, fit
from .registry import ValueType, ValueTypeRegistry, default_registry
from .render import Chart
from .types import Alignment, AxisCategory, Boundary, ChartType, Position

logger = logging.getLogger(__name__)


def _wire_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_wire(value: Any) -> Any:
    """
    Convert a configuration object into JSON-ready data.

    Dataclass fields become camelCase keys (or the field's ``wire_name``
    metadata), None fields are omitted, enums collapse to their values and
    objects with a ``to_wire`` method serialize themselves.
    """
    if hasattr(value, "to_wire"):
        return value.to_wire()
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        result = {}
        for item in fields(value):
            attr = getattr(value, item.name)
            if attr is None:
                continue
            result[item.metadata.get("wire_name", _wire_name(item.name))] = to_wire(attr)
        return result
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items()}
    return value


@dataclass(frozen=True, slots=True)
class FillValue:
    """Fill up to a value on the axis."""

    value: str | float


FillTarget = Union[bool, int, str, Boundary, FillValue]


@dataclass(frozen=True, slots=True)
class Fill:
    """
    Area fill of a dataset.

    Args:
        target: Absolute dataset index (int), relative index ("+1"/"-1"),
            named Boundary, FillValue, or a plain bool.
        above: Colour above the target.
        below: Colour below the target.
    """

    target: FillTarget
    above: Rgb | None = None
    below: Rgb | None = None


@dataclass(frozen=True, slots=True)
class AxisTitle:
    text: str
    display: bool = True
    align: Alignment = Alignment.CENTER


@dataclass(frozen=True, slots=True)
class ScaleConfig:
    """
    One axis of the chart.

    A None ``scale_type`` leaves the axis type to Chart.js.
    """

    scale_type: AxisCategory | None = field(default=None, metadata={"wire_name": "type"})
    align_to_pixels: bool | None = None
    reverse: bool | None = None
    max_value: float | None = field(default=None, metadata={"wire_name": "max"})
    min_value: float | None = field(default=None, metadata={"wire_name": "min"})
    title: AxisTitle | None = None
    labels: tuple[str, ...] | None = None

    @classmethod
    def for_category(cls, category: AxisCategory) -> ScaleConfig:
        """Axis with only its type set."""
        return cls(scale_type=category)

    @classmethod
    def new_category(cls, reverse: bool, labels: Iterable[str]) -> ScaleConfig:
        """
        Category axis with an explicit label order.

        Chart.js draws y category labels bottom-up, so y axes usually want
        ``reverse=True`` to read top-down.
        """
        return cls(scale_type=AxisCategory.CATEGORY, reverse=reverse, labels=tuple(labels))

    def with_title(self, text: str, align: Alignment = Alignment.CENTER) -> ScaleConfig:
        return replace(self, title=AxisTitle(text=text, align=align))


@dataclass(frozen=True, slots=True)
class ScalingConfig:
    x: ScaleConfig | None = None
    y: ScaleConfig | None = None


@dataclass(frozen=True, slots=True)
class Title:
    """Chart title plugin; each text entry is rendered on its own line."""

    text: tuple[str, ...]
    display: bool = True
    full_size: bool = False
    padding: Padding | None = None
    position: Position | None = None


@dataclass(frozen=True, slots=True)
class Legend:
    display: bool = True
    full_size: bool = False
    position: Position | None = None
    align: Alignment | None = None


@dataclass(frozen=True, slots=True)
class Plugins:
    title: Title | None = None
    legend: Legend | None = None


@dataclass(frozen=True, slots=True)
class ChartOptions:
    scales: ScalingConfig | None = None
    aspect_ratio: float | None = None
    plugins: Plugins | None = None


@dataclass(frozen=True, slots=True)
class Dataset:
    """One plotted dataset."""

    chart_type: ChartType = field(metadata={"wire_name": "type"})
    label: str
    data: Series
    fill: Fill | None = None
    border_color: Rgb | None = None
    background_color: Rgb | None = None


class ChartConfig:
    """
    Fluent builder for a Chart.js configuration.

    Declaring ``x_type``/``y_type`` resolves them against the registry at
    construction, so an unsupported value type fails before any data is
    added. Undeclared axes take their category from the first non-empty
    dataset. A ChartConfig is meant for a single owner; methods mutate it
    and return it for chaining.
    """

    def __init__(
        self,
        x_type: type | None = None,
        y_type: type | None = None,
        *,
        registry: ValueTypeRegistry | None = None,
        options: ChartOptions | None = None,
    ) -> None:
        """
        Create an empty configuration.

        Args:
            x_type: Value type plotted on the x axis.
            y_type: Value type plotted on the y axis.
            registry: Registry resolving value types; the default when None.
            options: Initial chart options.

        Raises:
            RegistrationError: If a declared type is not registered.
        """
        self.registry = registry if registry is not None else default_registry()
        self.x_type: ValueType | None = self.registry.get(x_type) if x_type is not None else None
        self.y_type: ValueType | None = self.registry.get(y_type) if y_type is not None else None
        self.labels: tuple[str, ...] | None = None
        self.datasets: list[Dataset] = []
        self.options = options
        self.last_regression: RegressionResult | None = None

    def __repr__(self) -> str:
        return f"ChartConfig(datasets={[dataset.label for dataset in self.datasets]!r})"

    def _update_options(self, **changes: Any) -> None:
        self.options = replace(self.options or ChartOptions(), **changes)

    def _update_plugins(self, **changes: Any) -> None:
        plugins = (self.options.plugins if self.options else None) or Plugins()
        self._update_options(plugins=replace(plugins, **changes))

    def _update_scales(self, **changes: Any) -> None:
        scales = (self.options.scales if self.options else None) or ScalingConfig()
        self._update_options(scales=replace(scales, **changes))

    def with_title(self, text: str | Iterable[str]) -> ChartConfig:
        """Set the chart title; an iterable renders one line per entry."""
        lines = (text,) if isinstance(text, str) else tuple(text)
        self._update_plugins(title=Title(text=lines))
        return self

    def enable_legend(self, position: Position | None = None, align: Alignment | None = None) -> ChartConfig:
        self._update_plugins(legend=Legend(position=position, align=align))
        return self

    def set_x_axis(self, scale: ScaleConfig) -> ChartConfig:
        self._update_scales(x=scale)
        return self

    def set_y_axis(self, scale: ScaleConfig) -> ChartConfig:
        self._update_scales(y=scale)
        return self

    def set_labels(self, labels: Iterable[str]) -> ChartConfig:
        self.labels = tuple(labels)
        return self

    def set_aspect_ratio(self, ratio: float) -> ChartConfig:
        self._update_options(aspect_ratio=ratio)
        return self

    def add_series(
        self,
        chart_type: ChartType | str,
        label: str,
        data: Series | Iterable[Any],
        *,
        fill: Fill | None = None,
        border_color: Rgb | None = None,
        background_color: Rgb | None = None,
    ) -> ChartConfig:
        """
        Append a dataset.

        Args:
            chart_type: Dataset type, as a ChartType or its Chart.js name.
            label: Legend label.
            data: A Series or raw rows accepted by ``to_series``.
            fill: Optional area fill.
            border_color: Optional line/border colour.
            background_color: Optional fill colour.

        Returns:
            This configuration.

        Raises:
            SeriesShapeError: If the rows have no single series shape, or
                their axis categories disagree with each other or with the
                declared axis types.
            RegistrationError: If a value type is not registered.
        """
        series = to_series(data, self.registry)
        self._check_axis(series, "x", self.x_type)
        self._check_axis(series, "y", self.y_type)
        dataset = Dataset(
            chart_type=ChartType(chart_type),
            label=label,
            data=series,
            fill=fill,
            border_color=border_color,
            background_color=background_color,
        )
        self.datasets.append(dataset)
        logger.debug("Added %s dataset %r with %d points", dataset.chart_type.value, label, len(series))
        return self

    def add_linear_regression_series(self, title: str, data: Series | Iterable[Any]) -> ChartConfig:
        """
        Append a scatter dataset and its least-squares line.

        The line dataset is labelled ``"<title> regression(R^2 = 0.1234)"``;
        the full result is kept on ``last_regression``.

        Raises:
            NumericError: If the points cannot be fitted.
        """
        series = to_series(data, self.registry)
        result = fit(series, self.registry)
        self.add_series(ChartType.SCATTER, title, series)
        self.add_series(
            ChartType.LINE,
            f"{title} regression(R^2 = {result.r_squared:.{R_SQUARED_PRECISION}f})",
            result.fitted,
        )
        self.last_regression = result
        return self

    def _check_axis(self, series: Series, axis: str, declared: ValueType | None) -> None:
        categories = {getattr(point, axis).category for point in series.points}
        if len(categories) > 1:
            names = sorted(category.value for category in categories)
            raise SeriesShapeError(f"{axis} values mix axis categories: {', '.join(names)}")
        if declared is not None and categories and categories != {declared.category}:
            (found,) = categories
            raise SeriesShapeError(
                f"{axis} values are {found.value} but the chart declares {declared.name} ({declared.category.value})"
            )

    def axis_category(self, axis: str) -> AxisCategory | None:
        """
        Category used to default an axis.

        Args:
            axis: "x" or "y".

        Returns:
            The declared type's category, else that of the first non-empty
            dataset, else None.
        """
        declared = self.x_type if axis == "x" else self.y_type
        if declared is not None:
            return declared.category
        for dataset in self.datasets:
            category = dataset.data.x_category if axis == "x" else dataset.data.y_category
            if category is not None:
                return category
        return None

    def resolved_options(self) -> ChartOptions | None:
        """Options with undeclared axes filled in from their value categories."""
        options = self.options
        scales = (options.scales if options else None) or ScalingConfig()
        defaults = {}
        for axis in ("x", "y"):
            category = self.axis_category(axis)
            if getattr(scales, axis) is None and category is not None:
                defaults[axis] = ScaleConfig.for_category(category)
        if not defaults:
            return options
        return replace(options or ChartOptions(), scales=replace(scales, **defaults))

    def to_wire(self) -> dict[str, Any]:
        """
        Build the JSON-ready configuration document.

        Raises:
            FormatError: If any value fails to render.
        """
        data: dict[str, Any] = {}
        if self.labels is not None:
            data["labels"] = list(self.labels)
        data["datasets"] = [to_wire(dataset) for dataset in self.datasets]
        document: dict[str, Any] = {"data": data}
        options = self.resolved_options()
        if options is not None:
            document["options"] = to_wire(options)
        return document

    def to_json(self, indent: int | None = None) -> str:
        """
        Serialize the configuration.

        Args:
            indent: Pretty-print indentation; compact separators when None.

        Raises:
            FormatError: If a value fails to render or is not valid JSON.
        """
        document = self.to_wire()
        separators = (",", ":") if indent is None else None
        try:
            return json.dumps(document, indent=indent, separators=separators, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise FormatError(f"Chart configuration is not JSON serializable: {exc}") from exc

    def build(self, width: Size | None = None, height: Size | None = None) -> Chart:
        """
        Bind the configuration to a canvas with a fresh target id.

        Args:
            width: Canvas width, 600px when None.
            height: Canvas height, 400px when None.
        """
        return Chart(
            target_id=f"chart-{uuid4()}",
            width=width if width is not None else Size.pixels(DEFAULT_WIDTH_PX),
            height=height if height is not None else Size.pixels(DEFAULT_HEIGHT_PX),
            config=self,
        )
