"""deltoid: immutable geometric value types.

This package provides vectors and regions for grid-based geometry: area
and volume queries, containment tests, enumeration of enclosed grid points,
and smallest-enclosing unions.

Key Components:
    - Vectors: Vec2, Vec3 (arithmetic) and Direction (direction cosines)
    - Regions: CircleRegion, RectangleRegion, SphereRegion, CuboidRegion
    - Utilities: union and overlap in deltoid.utils.union

Example:
    from deltoid import CircleRegion, Vec2

    a = CircleRegion(centre=Vec2(x=0, y=0), radius=1)
    b = CircleRegion(centre=Vec2(x=4, y=0), radius=1)
    a.union(b)  # centre (2, 0), radius 3
"""

from deltoid.exceptions import (
    DeltoidError,
    RegionMismatchError,
    RegionTooLargeError,
    UnsupportedOperationError,
)
from deltoid.region import (
    BoxRegion,
    CircleRegion,
    CuboidRegion,
    RectangleRegion,
    Region,
    RoundRegion,
    SphereRegion,
)
from deltoid.vector import ArithmeticVector, Direction, Vec2, Vec3, Vector

__all__ = [
    "ArithmeticVector",
    "BoxRegion",
    "CircleRegion",
    "CuboidRegion",
    "DeltoidError",
    "Direction",
    "RectangleRegion",
    "Region",
    "RegionMismatchError",
    "RegionTooLargeError",
    "RoundRegion",
    "SphereRegion",
    "UnsupportedOperationError",
    "Vec2",
    "Vec3",
    "Vector",
]
