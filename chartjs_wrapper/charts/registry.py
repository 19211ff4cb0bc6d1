"""Registry mapping value types to axis categories and serialization strategies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..config import time_policy_from_env
from ..errors import RegistrationError
from .protocol import AxisValue, SerializationStrategy
from .strategies import register_builtin_types
from .types import AxisCategory, TimePolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValueType:
    """
    A resolved registry entry.

    Args:
        value_type: The Python type the entry was registered for.
        category: Axis category used when an axis is defaulted.
        strategy: Function converting a value of the type into its wire form.
    """

    value_type: type
    category: AxisCategory
    strategy: SerializationStrategy[Any]

    @property
    def name(self) -> str:
        """Dotted name of the registered type, for listings and messages."""
        module = self.value_type.__module__
        qualname = self.value_type.__qualname__
        return qualname if module == "builtins" else f"{module}.{qualname}"


def _protocol_strategy(value: AxisValue) -> Any:
    return value.to_chart_value()


class ValueTypeRegistry:
    """
    Capability table keyed by type identity.

    Entries are added one type at a time, so types from independent libraries
    plug in without touching the registry itself. Lookup walks the value's
    MRO, which lets subclasses (``bool`` via ``int``, pandas timestamps via
    ``datetime``) reuse their nearest registered ancestor.
    """

    def __init__(self, time_policy: TimePolicy | None = None, *, builtins: bool = True) -> None:
        """
        Create a registry bound to one date/time policy.

        Args:
            time_policy: Wire format for temporal types. Defaults to the
                CHARTJS_WRAPPER_TIME_POLICY setting.
            builtins: Whether to register the out-of-the-box value types.
        """
        self._time_policy = time_policy if time_policy is not None else time_policy_from_env()
        self._entries: dict[type, ValueType] = {}
        if builtins:
            register_builtin_types(self)

    @property
    def time_policy(self) -> TimePolicy:
        """The temporal wire format fixed at construction."""
        return self._time_policy

    def register(
        self,
        value_type: type,
        category: AxisCategory,
        strategy: SerializationStrategy[Any],
        *,
        replace: bool = False,
    ) -> ValueType:
        """
        Register a value type.

        Args:
            value_type: Type whose instances will be plotted.
            category: Axis category for the type.
            strategy: Function converting one value into its wire form.
            replace: Allow overwriting an existing entry for the same type.

        Returns:
            The stored entry.

        Raises:
            RegistrationError: If the type is already registered and replace
                is False, or if the arguments are not a type, a category and
                a callable.
        """
        if not isinstance(value_type, type):
            raise RegistrationError(f"Expected a type, got {value_type!r}")
        if not isinstance(category, AxisCategory):
            raise RegistrationError(f"Expected an AxisCategory for {value_type.__qualname__}, got {category!r}")
        if not callable(strategy):
            raise RegistrationError(f"Strategy for {value_type.__qualname__} is not callable")
        if value_type in self._entries and not replace:
            raise RegistrationError(f"Value type already registered: {self._entries[value_type].name}")
        entry = ValueType(value_type=value_type, category=category, strategy=strategy)
        self._entries[value_type] = entry
        logger.debug("Registered %s as %s", entry.name, category.value)
        return entry

    def register_temporal(
        self,
        value_type: type,
        *,
        rfc3339: SerializationStrategy[Any],
        epoch_millis: SerializationStrategy[Any],
        category: AxisCategory = AxisCategory.TIME,
        replace: bool = False,
    ) -> ValueType:
        """
        Register a date/time type with both renderings, binding the one
        selected by this registry's time policy.

        Args:
            value_type: Temporal type to register.
            rfc3339: Strategy producing RFC-3339 text.
            epoch_millis: Strategy producing epoch milliseconds.
            category: Axis category, TIME unless overridden.
            replace: Allow overwriting an existing entry.

        Returns:
            The stored entry.
        """
        strategy = rfc3339 if self._time_policy is TimePolicy.RFC3339 else epoch_millis
        return self.register(value_type, category, strategy, replace=replace)

    def get(self, value_type: type) -> ValueType:
        """
        Resolve the entry for a type.

        Args:
            value_type: Type to resolve.

        Returns:
            The entry registered for the type or its nearest registered
            ancestor, or one derived from the AxisValue protocol.

        Raises:
            RegistrationError: If no entry can be resolved.
        """
        for candidate in getattr(value_type, "__mro__", (value_type,)):
            entry = self._entries.get(candidate)
            if entry is not None:
                return entry
        if isinstance(value_type, type) and _implements_axis_value(value_type):
            return self.register(value_type, value_type.axis_category(), _protocol_strategy)
        available = ", ".join(self.names())
        raise RegistrationError(
            f"No axis category or serialization strategy registered for {value_type!r}. Available: {available}"
        )

    def classify(self, value_type: type) -> AxisCategory:
        """
        Return the axis category for a type.

        Raises:
            RegistrationError: If the type is not registered.
        """
        return self.get(value_type).category

    def require(self, *value_types: type) -> tuple[ValueType, ...]:
        """
        Resolve several types at once so that missing registrations surface
        before any data is converted.
        """
        return tuple(self.get(value_type) for value_type in value_types)

    def __contains__(self, value_type: object) -> bool:
        if not isinstance(value_type, type):
            return False
        try:
            self.get(value_type)
        except RegistrationError:
            return False
        return True

    def entries(self) -> list[ValueType]:
        """Return the registered entries in registration order."""
        return list(self._entries.values())

    def names(self) -> list[str]:
        """Return the dotted names of the registered types."""
        return [entry.name for entry in self._entries.values()]


def _implements_axis_value(value_type: type) -> bool:
    return callable(getattr(value_type, "axis_category", None)) and callable(
        getattr(value_type, "to_chart_value", None)
    )


_DEFAULT_REGISTRY: ValueTypeRegistry | None = None


def default_registry() -> ValueTypeRegistry:
    """
    Return the process-wide registry, creating it on first use.

    Its time policy comes from the CHARTJS_WRAPPER_TIME_POLICY setting.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = ValueTypeRegistry()
    return _DEFAULT_REGISTRY


def register_value_type(
    value_type: type,
    category: AxisCategory,
    strategy: SerializationStrategy[Any],
    *,
    replace: bool = False,
) -> ValueType:
    """
    Register a new value type on the default registry.

    Use this function to make types from other libraries plottable.

    Args:
        value_type: Type whose instances will be plotted.
        category: Axis category for the type.
        strategy: Function converting one value into its wire form.
        replace: Allow overwriting an existing entry.

    Returns:
        The stored entry.
    """
    return default_registry().register(value_type, category, strategy, replace=replace)


def get_value_type(value_type: type) -> ValueType:
    """
    Resolve a type against the default registry.

    Raises:
        RegistrationError: If the type is not registered.
    """
    return default_registry().get(value_type)


def classify(value_type: type) -> AxisCategory:
    """Return the axis category of a type from the default registry."""
    return default_registry().classify(value_type)


def list_value_types() -> list[str]:
    """
    List all value types registered on the default registry.

    Returns:
        Dotted type names in registration order.
    """
    return default_registry().names()
