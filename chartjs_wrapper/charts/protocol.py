"""Protocol definitions for pluggable axis value types."""

from typing import Protocol, TypeVar, runtime_checkable

from .types import AxisCategory, WireValue

T_contra = TypeVar("T_contra", contravariant=True)


class SerializationStrategy(Protocol[T_contra]):
    """
    Protocol for the per-type rule converting a raw value into its wire form.

    Strategies are pure: they return a JSON primitive and write nothing else.
    """

    def __call__(self, value: T_contra) -> WireValue:
        """
        Convert one value.

        Args:
            value: Raw value of the type the strategy was registered for.

        Returns:
            An int, float or str ready for json.dumps.
        """
        ...


@runtime_checkable
class AxisValue(Protocol):
    """
    Capability interface for value types that describe themselves.

    A class implementing both methods can be plotted without an explicit
    registry entry; the registry derives one the first time it is resolved.
    """

    @classmethod
    def axis_category(cls) -> AxisCategory:
        """
        Return the axis category shared by every instance of the type.

        Returns:
            The AxisCategory used when an axis is defaulted.
        """
        ...

    def to_chart_value(self) -> WireValue:
        """
        Convert this instance to its wire representation.

        Returns:
            An int, float or str ready for json.dumps.
        """
        ...
