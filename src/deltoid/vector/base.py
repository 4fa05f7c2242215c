"""Base vector models for deltoid.

Vectors are immutable Pydantic models holding a fixed number of float
components. There are two construction paths:

- the model constructor (``Vec2(x=1, y=2)``) and ``from_tuple`` are strict
  and raise ``ValidationError`` when a component is NaN or not a number
  (strings and bools are rejected, ints are widened);
- ``of`` is permissive and returns the class's shared ``INVALID`` sentinel
  instead of raising.

``Vector`` carries the capabilities every vector type shares.
``ArithmeticVector`` adds component-wise arithmetic and is only implemented
by types for which that arithmetic is meaningful.

Equality and hashing compare the IEEE-754 bits of the components, so
``0.0`` and ``-0.0`` differ and two NaN components are equal.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable
from typing import Any, ClassVar, Self, cast

from pydantic import BaseModel, PrivateAttr, ValidationInfo, field_validator


def float_bits(value: float) -> bytes:
    """Return the IEEE-754 encoding of ``value``, with every NaN mapped to one pattern."""
    return struct.pack("<d", math.nan if math.isnan(value) else value)


# math.floor/ceil return ints, so the sign of a zero result is restored from the input
def _floor(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(float(math.floor(value)), value)


def _ceil(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(float(math.ceil(value)), value)


class Vector(BaseModel, frozen=True):
    """Immutable tuple of float components.

    Subclasses declare their components as float fields; field declaration
    order is the component order.
    """

    INVALID: ClassVar[Vector]

    _length: float = PrivateAttr(default=0.0)

    @field_validator("*")
    @classmethod
    def _reject_nan(cls, value: float, info: ValidationInfo) -> float:
        if math.isnan(value):
            raise ValueError(f"{info.field_name} shall not be NaN!")
        return value

    def model_post_init(self, context: Any, /) -> None:
        self._length = math.sqrt(sum(c * c for c in self.components()))

    @classmethod
    def of(cls, *components: float) -> Self:
        """Create a vector, substituting ``INVALID`` for NaN input.

        Args:
            *components: Component values in field order.

        Returns:
            A new vector, or the shared ``INVALID`` sentinel if any
            component is NaN.
        """
        if any(math.isnan(c) for c in components):
            return cast(Self, cls.INVALID)
        return cls.from_tuple(components)

    @classmethod
    def from_tuple(cls, components: Iterable[float]) -> Self:
        """Create a vector from components in field order.

        Raises:
            ValueError: If the number of components does not match the
                vector type, or any component is NaN.
        """
        values = tuple(components)
        names = tuple(cls.model_fields)
        if len(values) != len(names):
            raise ValueError(
                f"{cls.__name__} takes {len(names)} components, got {len(values)}"
            )
        return cls(**dict(zip(names, values, strict=True)))

    @classmethod
    def _sentinel(cls) -> Self:
        """Build the all-NaN instance, bypassing validation."""
        return cls.model_construct(**{name: math.nan for name in cls.model_fields})

    def components(self) -> tuple[float, ...]:
        """Return the components in field order."""
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def length(self) -> float:
        """Return the Euclidean norm."""
        return self._length

    def manhattan(self) -> float:
        """Return the sum of absolute component values."""
        return sum(abs(c) for c in self.components())

    def reverse(self) -> Self:
        """Return the vector pointing the opposite way."""
        return type(self).from_tuple(-c for c in self.components())

    def is_valid(self) -> bool:
        """Return False for the invalid sentinel (all components NaN)."""
        return not all(math.isnan(c) for c in self.components())

    def to_simple_string(self) -> str:
        """Render components rounded to 2 decimals, space separated."""
        return " ".join(f"{c:.2f}" for c in self.components())

    def _bits(self) -> bytes:
        return b"".join(float_bits(c) for c in self.components())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return type(self) is type(other) and self._bits() == other._bits()

    def __hash__(self) -> int:
        return hash((type(self), self._bits()))


class ArithmeticVector(Vector, frozen=True):
    """A vector supporting component-wise arithmetic.

    All results go through the strict constructor, so arithmetic on the
    ``INVALID`` sentinel raises ``ValidationError``.
    """

    ZERO: ClassVar[ArithmeticVector]
    CENTRE: ClassVar[ArithmeticVector]

    def _pairwise(self, other: Vector, operation: str) -> zip[tuple[float, float]]:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot {operation} {type(other).__name__} and {type(self).__name__}"
            )
        return zip(self.components(), other.components(), strict=True)

    def normalize(self, length: float | None = None) -> Self:
        """Return a vector parallel to this one.

        Args:
            length: Length of the result. Defaults to 1.

        Returns:
            The scaled unit vector, or ``ZERO`` if this vector has no length.
        """
        if length is not None:
            return self.normalize().scale(length)
        if self._length == 0:
            return cast(Self, type(self).ZERO)
        return type(self).from_tuple(c / self._length for c in self.components())

    def scale(self, factor: float) -> Self:
        return type(self).from_tuple(c * factor for c in self.components())

    def add(self, other: Self) -> Self:
        return type(self).from_tuple(a + b for a, b in self._pairwise(other, "add"))

    def subtract(self, other: Self) -> Self:
        return type(self).from_tuple(
            a - b for a, b in self._pairwise(other, "subtract")
        )

    def floor(self) -> Self:
        return type(self).from_tuple(_floor(c) for c in self.components())

    def ceil(self) -> Self:
        return type(self).from_tuple(_ceil(c) for c in self.components())

    def __add__(self, other: object) -> Self:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Self:
        return self.reverse()

    def __mul__(self, factor: object) -> Self:
        if not isinstance(factor, int | float):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__
