"""Circular region."""

from __future__ import annotations

import math
from typing import ClassVar

from deltoid.region.base import RoundRegion
from deltoid.region.rectangle import RectangleRegion
from deltoid.vector.vec2 import Vec2


class CircleRegion(RoundRegion, frozen=True):
    """A circle on the plane.

    Serializes as ``{"centre": {"x": ..., "y": ...}, "radius": ..., "area": ...}``.

    Attributes:
        centre: Location of the centre of the circle.
        radius: Radius of the circle (>= 0).
    """

    INVALID: ClassVar[CircleRegion]
    ORIGIN: ClassVar[CircleRegion]

    centre: Vec2

    def _compute_surface_area(self) -> float:
        return math.pi * self.radius * self.radius

    def bounds(self) -> RectangleRegion:
        """Return the square from ``centre - (r, r)`` to ``centre + (r, r)``."""
        if not self.is_anchored():
            return RectangleRegion.INVALID
        minimum, maximum = self._bounding_corners()
        return RectangleRegion(minimum=minimum, maximum=maximum)


CircleRegion.ORIGIN = CircleRegion(centre=Vec2.ORIGIN, radius=0)
CircleRegion.INVALID = CircleRegion(centre=Vec2.INVALID, radius=0)
