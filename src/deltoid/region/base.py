"""Base region models for deltoid.

Regions are immutable Pydantic models built from vectors. Surface area and
volume are computed once at construction; a region whose anchoring vectors
are invalid gets zero area and does not exist.

Two families share the enumeration and union plumbing:

- ``RoundRegion``: a centre and a radius (circles, spheres)
- ``BoxRegion``: axis-aligned boxes from a minimum and maximum corner
  (rectangles, cuboids), also used as bounding boxes

Points are integer grid cells: a point ``p`` stands for the unit cell whose
middle is ``p + CENTRE``.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Self, cast

from pydantic import (
    BaseModel,
    Field,
    PrivateAttr,
    computed_field,
    field_validator,
    model_validator,
)

from deltoid.exceptions import RegionMismatchError
from deltoid.utils import union as union_utils
from deltoid.vector.base import ArithmeticVector, float_bits


class Region(BaseModel, ABC, frozen=True):
    """Immutable shape with precomputed surface area and volume."""

    INVALID: ClassVar[Region]
    ORIGIN: ClassVar[Region]

    _surface_area: float = PrivateAttr(default=0.0)
    _volume: float = PrivateAttr(default=0.0)

    def model_post_init(self, context: Any, /) -> None:
        if self.is_anchored():
            self._surface_area = self._compute_surface_area()
            self._volume = self._compute_volume()

    @abstractmethod
    def is_anchored(self) -> bool:
        """Return True if every position-defining vector is valid."""

    @abstractmethod
    def _compute_surface_area(self) -> float: ...

    def _compute_volume(self) -> float:
        return 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def area(self) -> float:
        """Surface area, as serialized under the ``area`` key."""
        return self._surface_area

    def surface_area(self) -> float:
        return self._surface_area

    def volume(self) -> float:
        """Return the enclosed volume (0.0 for planar shapes)."""
        return self._volume

    def exists(self) -> bool:
        """Return True if the region has a non-zero surface area."""
        return self._surface_area != 0

    def _key(self) -> tuple[Any, ...]:
        """Field values, with floats replaced by their IEEE-754 bits."""
        values = (getattr(self, name) for name in type(self).model_fields)
        return tuple(
            float_bits(value) if isinstance(value, float) else value
            for value in values
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    @abstractmethod
    def contains(self, point: Any) -> bool:
        """Check whether the grid cell at ``point`` lies inside the region."""

    @abstractmethod
    def bounds(self) -> BoxRegion:
        """Return the axis-aligned box enclosing the region."""

    @abstractmethod
    def offset(self, offset: Any) -> Self:
        """Return the region translated by ``offset``."""

    @abstractmethod
    def _enclose(self, other: Self) -> Self:
        """Smallest region of this kind enclosing both anchored regions."""

    def enclosed_points(self) -> list[Any]:
        """List the grid points inside this region.

        Scans the bounding box and keeps the points this region contains,
        in row-major order.

        Returns:
            The enclosed points; empty for an unanchored region.

        Raises:
            RegionTooLargeError: If the bounding box is unbounded or holds
                more cells than ``settings.MAX_ENCLOSED_POINTS``.
        """
        if not self.is_anchored():
            return []
        return union_utils.overlap(self.bounds(), self)

    def union(self, other: Self) -> Self:
        """Return the smallest region of this kind enclosing both regions.

        An unanchored operand is ignored, so the union of an invalid region
        with a valid one is the valid one.

        Raises:
            RegionMismatchError: If ``other`` is a different region type.
        """
        if type(other) is not type(self):
            raise RegionMismatchError(type(self).__name__, type(other).__name__)
        if not other.is_anchored():
            return self
        if not self.is_anchored():
            return other
        return self._enclose(other)


class RoundRegion(Region, frozen=True):
    """Region made of all cells within ``radius`` of ``centre``.

    Attributes:
        centre: Location of the centre.
        radius: Distance from the centre to the boundary (>= 0).
    """

    centre: ArithmeticVector
    radius: float = Field(
        ..., ge=0, strict=True, description="Distance from centre to boundary"
    )

    @field_validator("radius")
    @classmethod
    def _reject_nan_radius(cls, value: float) -> float:
        if math.isnan(value):
            raise ValueError("radius shall not be NaN!")
        return value

    @classmethod
    def of(cls, centre: ArithmeticVector, radius: float) -> Self:
        """Create a region, substituting ``INVALID`` for NaN input."""
        if not centre.is_valid() or math.isnan(radius):
            return cast(Self, cls.INVALID)
        return cls(centre=centre, radius=radius)

    def is_anchored(self) -> bool:
        return self.centre.is_valid()

    def _bounding_corners(self) -> tuple[ArithmeticVector, ArithmeticVector]:
        vector_type = type(self.centre)
        if math.isinf(self.radius):
            # Unbounded on every axis, whatever the centre
            return (
                vector_type.from_tuple(-math.inf for _ in self.centre.components()),
                vector_type.from_tuple(math.inf for _ in self.centre.components()),
            )
        extent = vector_type.from_tuple(self.radius for _ in self.centre.components())
        return self.centre.subtract(extent), self.centre.add(extent)

    def contains(self, point: ArithmeticVector) -> bool:
        """Check the distance from the centre to the middle of the cell.

        The boundary is inclusive.
        """
        if not self.is_anchored():
            return False
        cell_centre = point.add(type(point).CENTRE)
        return self.centre.subtract(cell_centre).length() <= self.radius

    def offset(self, offset: ArithmeticVector) -> Self:
        if not self.is_anchored():
            return self
        return type(self)(centre=self.centre.add(offset), radius=self.radius)

    def _enclose(self, other: Self) -> Self:
        centre, radius = union_utils.enclose_spheres(
            self.centre, self.radius, other.centre, other.radius
        )
        return type(self)(centre=centre, radius=radius)


class BoxRegion(Region, frozen=True):
    """Axis-aligned box between two corners.

    Attributes:
        minimum: Corner with the smallest component on every axis.
        maximum: Corner with the largest component on every axis.
    """

    minimum: ArithmeticVector
    maximum: ArithmeticVector

    @model_validator(mode="after")
    def _validate_corners(self) -> Self:
        if not self.is_anchored():
            return self
        for axis, low, high in zip(
            type(self.minimum).model_fields,
            self.minimum.components(),
            self.maximum.components(),
            strict=True,
        ):
            if low > high:
                raise ValueError(f"minimum {axis} ({low}) exceeds maximum ({high})")
        return self

    @classmethod
    def from_corners(cls, first: ArithmeticVector, second: ArithmeticVector) -> Self:
        """Create a box from any two opposite corners.

        Args:
            first: One corner.
            second: The opposite corner.

        Returns:
            Box spanning the corners, with components ordered per axis.

        Raises:
            ValueError: If either corner is invalid.
        """
        vector_type = type(first)
        pairs = list(zip(first.components(), second.components(), strict=True))
        return cls(
            minimum=vector_type.from_tuple(min(pair) for pair in pairs),
            maximum=vector_type.from_tuple(max(pair) for pair in pairs),
        )

    @classmethod
    def of(cls, first: ArithmeticVector, second: ArithmeticVector) -> Self:
        """Create a box, substituting ``INVALID`` for invalid corners."""
        if not (first.is_valid() and second.is_valid()):
            return cast(Self, cls.INVALID)
        return cls.from_corners(first, second)

    def is_anchored(self) -> bool:
        return self.minimum.is_valid() and self.maximum.is_valid()

    def extents(self) -> tuple[float, ...]:
        """Return the box size along each axis."""
        return tuple(
            high - low
            for low, high in zip(
                self.minimum.components(), self.maximum.components(), strict=True
            )
        )

    def contains(self, point: ArithmeticVector) -> bool:
        """Check that the middle of the cell lies within the box on every axis."""
        if not self.is_anchored():
            return False
        cell_centre = point.add(type(point).CENTRE)
        return all(
            low <= value <= high
            for low, value, high in zip(
                self.minimum.components(),
                cell_centre.components(),
                self.maximum.components(),
                strict=True,
            )
        )

    def bounds(self) -> Self:
        return self

    def offset(self, offset: ArithmeticVector) -> Self:
        if not self.is_anchored():
            return self
        return type(self)(
            minimum=self.minimum.add(offset), maximum=self.maximum.add(offset)
        )

    def _enclose(self, other: Self) -> Self:
        minimum, maximum = union_utils.enclose_boxes(
            self.minimum, self.maximum, other.minimum, other.maximum
        )
        return type(self)(minimum=minimum, maximum=maximum)
