"""Typed value wrapper binding a raw value to its serialization strategy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from ..errors import FormatError
from .registry import ValueType, ValueTypeRegistry, default_registry
from .types import AxisCategory, WireValue

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class TypedValue(Generic[T]):
    """
    A raw value together with the registry entry resolved for its type.

    The entry is resolved once in :meth:`wrap`, so aggregate serialization
    never needs to know the concrete value type.
    """

    value: T
    value_type: ValueType

    @classmethod
    def wrap(cls, value: T, registry: ValueTypeRegistry | None = None) -> TypedValue[T]:
        """
        Wrap a raw value.

        Args:
            value: Value to wrap. An existing TypedValue is returned as-is.
            registry: Registry used to resolve the strategy; the default
                registry when None.

        Returns:
            The wrapped value.

        Raises:
            RegistrationError: If the value's type is not registered.
        """
        if isinstance(value, TypedValue):
            return value
        registry = registry if registry is not None else default_registry()
        return cls(value=value, value_type=registry.get(type(value)))

    @property
    def category(self) -> AxisCategory:
        """Axis category of the wrapped value's type."""
        return self.value_type.category

    def serialize(self) -> WireValue:
        """
        Convert the wrapped value with its bound strategy.

        Returns:
            The wire representation.

        Raises:
            FormatError: If the strategy cannot render the value.
        """
        try:
            return self.value_type.strategy(self.value)
        except (ValueError, TypeError, OverflowError, ArithmeticError) as exc:
            raise FormatError(f"Cannot serialize {self.value!r} as {self.value_type.name}: {exc}") from exc

    def __repr__(self) -> str:
        return f"TypedValue({self.value!r})"
