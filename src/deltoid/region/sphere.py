"""Spherical region."""

from __future__ import annotations

import math
from typing import ClassVar

from deltoid.region.base import RoundRegion
from deltoid.region.cuboid import CuboidRegion
from deltoid.vector.vec3 import Vec3


class SphereRegion(RoundRegion, frozen=True):
    """A ball in space, centred on a ``Vec3``."""

    INVALID: ClassVar[SphereRegion]
    ORIGIN: ClassVar[SphereRegion]

    centre: Vec3

    def _compute_surface_area(self) -> float:
        return 4 * math.pi * self.radius * self.radius

    def _compute_volume(self) -> float:
        return 4 / 3 * math.pi * self.radius**3

    def bounds(self) -> CuboidRegion:
        if not self.is_anchored():
            return CuboidRegion.INVALID
        minimum, maximum = self._bounding_corners()
        return CuboidRegion(minimum=minimum, maximum=maximum)


SphereRegion.ORIGIN = SphereRegion(centre=Vec3.ORIGIN, radius=0)
SphereRegion.INVALID = SphereRegion(centre=Vec3.INVALID, radius=0)
