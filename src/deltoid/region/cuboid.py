"""Axis-aligned cuboid."""

from __future__ import annotations

from typing import ClassVar

from deltoid.region.base import BoxRegion
from deltoid.vector.vec3 import Vec3


class CuboidRegion(BoxRegion, frozen=True):
    """A box between two ``Vec3`` corners."""

    INVALID: ClassVar[CuboidRegion]
    ORIGIN: ClassVar[CuboidRegion]

    minimum: Vec3
    maximum: Vec3

    def _compute_surface_area(self) -> float:
        width, height, depth = self.extents()
        return 2 * (width * height + height * depth + width * depth)

    def _compute_volume(self) -> float:
        width, height, depth = self.extents()
        return width * height * depth


CuboidRegion.ORIGIN = CuboidRegion(minimum=Vec3.ORIGIN, maximum=Vec3.ORIGIN)
CuboidRegion.INVALID = CuboidRegion(minimum=Vec3.INVALID, maximum=Vec3.INVALID)
