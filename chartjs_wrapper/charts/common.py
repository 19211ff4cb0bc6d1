"""Small value objects with their own textual wire formats."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from ..errors import ParseError

_RGB_GRAMMAR = 'a string in the format "rgb(r, g, b)" with components 0-255'
_SIZE_GRAMMAR = 'a string in the format "<number>%" or "<integer>px"'
_COMPONENT = re.compile(r"[0-9]{1,3}")
_PERCENT = re.compile(r"[0-9]+(\.[0-9]+)?%")
_PIXELS = re.compile(r"[0-9]+px")


@dataclass(frozen=True, slots=True)
class Rgb:
    """An RGB colour triple serialized as ``rgb(r, g, b)``."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if isinstance(component, bool) or not isinstance(component, int) or not 0 <= component <= 255:
                raise ValueError(f"RGB components must be integers in 0-255, got {component!r}")

    def to_wire(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def __str__(self) -> str:
        return self.to_wire()

    @classmethod
    def parse(cls, text: str) -> Rgb:
        """
        Parse the ``rgb(r, g, b)`` format.

        Args:
            text: Colour text; surrounding whitespace and whitespace around
                components are ignored.

        Returns:
            The parsed colour.

        Raises:
            ParseError: If the text does not match the format.
        """
        if not isinstance(text, str):
            raise ParseError(f"Invalid colour {text!r}: expected {_RGB_GRAMMAR}")
        value = text.strip()
        if not value.startswith("rgb(") or not value.endswith(")"):
            raise ParseError(f"Invalid colour {text!r}: expected {_RGB_GRAMMAR}")
        parts = [part.strip() for part in value[4:-1].split(",")]
        if len(parts) != 3:
            raise ParseError(f"Invalid colour {text!r}: expected three components, {_RGB_GRAMMAR}")
        components = []
        for part in parts:
            if not _COMPONENT.fullmatch(part) or int(part) > 255:
                raise ParseError(f"Invalid colour component {part!r} in {text!r}: expected {_RGB_GRAMMAR}")
            components.append(int(part))
        return cls(*components)


class SizeUnit(Enum):
    """Unit of a Size; exactly one applies per value."""

    PERCENT = "%"
    PIXELS = "px"


@dataclass(frozen=True, slots=True)
class Size:
    """A width or height, either a percentage or a pixel count."""

    value: float
    unit: SizeUnit

    @classmethod
    def percent(cls, value: float) -> Size:
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"Percent size must be a non-negative finite number, got {value!r}")
        return cls(float(value), SizeUnit.PERCENT)

    @classmethod
    def pixels(cls, value: int) -> Size:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"Pixel size must be a non-negative integer, got {value!r}")
        return cls(value, SizeUnit.PIXELS)

    def to_wire(self) -> str:
        if self.unit is SizeUnit.PIXELS:
            return f"{int(self.value)}px"
        number = float(self.value)
        return f"{int(number)}%" if number.is_integer() else f"{number!r}%"

    def __str__(self) -> str:
        return self.to_wire()

    @classmethod
    def parse(cls, text: str) -> Size:
        """
        Parse ``<number>%`` or ``<integer>px``.

        Raises:
            ParseError: If the text matches neither form.
        """
        value = text.strip() if isinstance(text, str) else ""
        if _PERCENT.fullmatch(value):
            return cls.percent(float(value[:-1]))
        if _PIXELS.fullmatch(value):
            return cls.pixels(int(value[:-2]))
        raise ParseError(f"Invalid size {text!r}: expected {_SIZE_GRAMMAR}")


@dataclass(frozen=True, slots=True)
class Padding:
    """Box padding; only set sides are written."""

    top: float | None = None
    bottom: float | None = None
    left: float | None = None
    right: float | None = None
