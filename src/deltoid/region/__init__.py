"""Region value types for deltoid.

Key Components:
    - Region: shared area, containment, enumeration and union contract
    - RoundRegion: CircleRegion (Vec2), SphereRegion (Vec3)
    - BoxRegion: RectangleRegion (Vec2), CuboidRegion (Vec3)

Example:
    from deltoid.region import CircleRegion
    from deltoid.vector import Vec2

    circle = CircleRegion(centre=Vec2.ORIGIN, radius=1)
    circle.surface_area()  # math.pi
    circle.enclosed_points()  # the four cells around the origin
"""

from deltoid.region.base import BoxRegion, Region, RoundRegion
from deltoid.region.circle import CircleRegion
from deltoid.region.cuboid import CuboidRegion
from deltoid.region.rectangle import RectangleRegion
from deltoid.region.sphere import SphereRegion

__all__ = [
    "BoxRegion",
    "CircleRegion",
    "CuboidRegion",
    "RectangleRegion",
    "Region",
    "RoundRegion",
    "SphereRegion",
]
