"""Two-dimensional vector."""

from __future__ import annotations

from typing import ClassVar

from pydantic import StrictFloat

from deltoid.vector.base import ArithmeticVector


class Vec2(ArithmeticVector, frozen=True):
    """A 2D vector.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """

    INVALID: ClassVar[Vec2]
    ORIGIN: ClassVar[Vec2]
    ONE: ClassVar[Vec2]
    X_AXIS: ClassVar[Vec2]
    Y_AXIS: ClassVar[Vec2]
    ZERO: ClassVar[Vec2]
    I_HAT: ClassVar[Vec2]
    J_HAT: ClassVar[Vec2]
    CENTRE: ClassVar[Vec2]

    x: StrictFloat
    y: StrictFloat


Vec2.INVALID = Vec2._sentinel()
Vec2.ORIGIN = Vec2(x=0, y=0)
Vec2.ONE = Vec2(x=1, y=1)
Vec2.X_AXIS = Vec2(x=1, y=0)
Vec2.Y_AXIS = Vec2(x=0, y=1)
Vec2.ZERO = Vec2.ORIGIN
Vec2.I_HAT = Vec2.X_AXIS
Vec2.J_HAT = Vec2.Y_AXIS
# Offset from a grid point to the middle of its unit cell
Vec2.CENTRE = Vec2(x=0.5, y=0.5)
