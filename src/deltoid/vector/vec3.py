"""Three-dimensional vector."""

from __future__ import annotations

from typing import ClassVar

from pydantic import StrictFloat

from deltoid.vector.base import ArithmeticVector


class Vec3(ArithmeticVector, frozen=True):
    """A 3D vector with components ``x``, ``y`` and ``z``."""

    INVALID: ClassVar[Vec3]
    ORIGIN: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    X_AXIS: ClassVar[Vec3]
    Y_AXIS: ClassVar[Vec3]
    Z_AXIS: ClassVar[Vec3]
    ZERO: ClassVar[Vec3]
    I_HAT: ClassVar[Vec3]
    J_HAT: ClassVar[Vec3]
    K_HAT: ClassVar[Vec3]
    CENTRE: ClassVar[Vec3]

    x: StrictFloat
    y: StrictFloat
    z: StrictFloat


Vec3.INVALID = Vec3._sentinel()
Vec3.ORIGIN = Vec3(x=0, y=0, z=0)
Vec3.ONE = Vec3(x=1, y=1, z=1)
Vec3.X_AXIS = Vec3(x=1, y=0, z=0)
Vec3.Y_AXIS = Vec3(x=0, y=1, z=0)
Vec3.Z_AXIS = Vec3(x=0, y=0, z=1)
Vec3.ZERO = Vec3.ORIGIN
Vec3.I_HAT = Vec3.X_AXIS
Vec3.J_HAT = Vec3.Y_AXIS
Vec3.K_HAT = Vec3.Z_AXIS
Vec3.CENTRE = Vec3(x=0.5, y=0.5, z=0.5)
