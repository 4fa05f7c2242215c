"""Vector value types for deltoid.

Key Components:
    - Vector: common capabilities (length, manhattan, components, reverse)
    - ArithmeticVector: component-wise arithmetic on top of Vector
    - Vec2, Vec3: arithmetic vectors
    - Direction: direction cosines, no arithmetic

Example:
    from deltoid.vector import Vec2

    v = Vec2(x=3, y=4)
    v.length()  # 5.0
    Vec2.of(float("nan"), 1.0).is_valid()  # False
"""

from deltoid.vector.base import ArithmeticVector, Vector
from deltoid.vector.direction import Direction
from deltoid.vector.vec2 import Vec2
from deltoid.vector.vec3 import Vec3

__all__ = [
    "ArithmeticVector",
    "Direction",
    "Vec2",
    "Vec3",
    "Vector",
]
