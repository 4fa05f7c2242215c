"""Axis-aligned rectangle."""

from __future__ import annotations

from typing import ClassVar

from deltoid.region.base import BoxRegion
from deltoid.vector.vec2 import Vec2


class RectangleRegion(BoxRegion, frozen=True):
    """A planar box between two ``Vec2`` corners.

    Also serves as the bounding box of a ``CircleRegion``.
    """

    INVALID: ClassVar[RectangleRegion]
    ORIGIN: ClassVar[RectangleRegion]

    minimum: Vec2
    maximum: Vec2

    def _compute_surface_area(self) -> float:
        width, height = self.extents()
        return width * height


RectangleRegion.ORIGIN = RectangleRegion(minimum=Vec2.ORIGIN, maximum=Vec2.ORIGIN)
RectangleRegion.INVALID = RectangleRegion(minimum=Vec2.INVALID, maximum=Vec2.INVALID)
