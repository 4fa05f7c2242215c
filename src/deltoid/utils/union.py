"""Union and overlap geometry for deltoid regions.

This module holds the shape algorithms regions delegate to:

- ``enclose_spheres``: smallest ball enclosing two balls
- ``enclose_boxes``: axis-aligned hull of two boxes
- ``overlap``: grid points of a bounding box that a region contains

The functions work on vectors of any arity, so the same code serves circles
and spheres, rectangles and cuboids.
"""

from __future__ import annotations

import itertools
import logging
import math
from typing import TYPE_CHECKING, Any, TypeVar

from deltoid.config import settings
from deltoid.exceptions import RegionTooLargeError

if TYPE_CHECKING:
    from deltoid.region.base import BoxRegion, Region
    from deltoid.vector.base import ArithmeticVector

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Region")
V = TypeVar("V", bound="ArithmeticVector")


def union(first: R, second: R) -> R:
    """Return the smallest region enclosing both regions.

    Dispatches to the shape-specific algorithm of ``first``. The result does
    not depend on argument order, and ``union(a, a) == a``.

    Args:
        first: A region.
        second: A region of the same type.

    Returns:
        The enclosing region.

    Raises:
        RegionMismatchError: If the regions have different types.
    """
    result = first.union(second)
    logger.debug("Union of %r and %r is %r", first, second, result)
    return result


def enclose_spheres(
    centre_a: V,
    radius_a: float,
    centre_b: V,
    radius_b: float,
) -> tuple[V, float]:
    """Compute the smallest ball enclosing two balls.

    The new boundary passes through the two points of the inputs that lie
    farthest apart along the line through both centres. If one ball already
    contains the other, the container is returned unchanged.

    Inputs are ordered canonically first so swapping the arguments yields a
    bit-identical result.

    Args:
        centre_a: Centre of the first ball.
        radius_a: Radius of the first ball.
        centre_b: Centre of the second ball.
        radius_b: Radius of the second ball.

    Returns:
        (centre, radius) of the enclosing ball.
    """
    if (centre_b.components(), radius_b) < (centre_a.components(), radius_a):
        centre_a, radius_a, centre_b, radius_b = centre_b, radius_b, centre_a, radius_a

    offset = centre_b.subtract(centre_a)
    distance = offset.length()

    if distance + radius_b <= radius_a:
        return centre_a, radius_a
    if distance + radius_a <= radius_b:
        return centre_b, radius_b

    # distance > 0 here, otherwise one ball would contain the other
    radius = (distance + radius_a + radius_b) / 2
    centre = centre_a.add(offset.scale((radius - radius_a) / distance))
    return centre, radius


def enclose_boxes(min_a: V, max_a: V, min_b: V, max_b: V) -> tuple[V, V]:
    """Compute the axis-aligned hull of two boxes.

    Returns:
        (minimum, maximum) corners of the hull.
    """
    vector_type = type(min_a)
    minimum = vector_type.from_tuple(
        min(a, b) for a, b in zip(min_a.components(), min_b.components(), strict=True)
    )
    maximum = vector_type.from_tuple(
        max(a, b) for a, b in zip(max_a.components(), max_b.components(), strict=True)
    )
    return minimum, maximum


def overlap(
    bounds: BoxRegion,
    target: Region,
    limit: int | None = None,
) -> list[Any]:
    """Enumerate the grid points of ``bounds`` that ``target`` contains.

    A point ``p`` is in the box when ``minimum <= p + CENTRE <= maximum`` on
    every axis. Points are produced in row-major order: the first axis varies
    fastest.

    Args:
        bounds: Box to scan.
        target: Region whose ``contains`` filters the scanned points.
        limit: Maximum number of cells to scan. Defaults to
            ``settings.MAX_ENCLOSED_POINTS``.

    Returns:
        The matching points, as vectors of the box's corner type.

    Raises:
        RegionTooLargeError: If the box is unbounded or holds more than
            ``limit`` cells.
    """
    if limit is None:
        limit = settings.MAX_ENCLOSED_POINTS
    if not bounds.is_anchored():
        return []

    lows = bounds.minimum.components()
    highs = bounds.maximum.components()
    if not all(math.isfinite(c) for c in (*lows, *highs)):
        logger.warning("Refusing to enumerate unbounded box %r", bounds)
        raise RegionTooLargeError(
            "Cannot enumerate an unbounded region", cell_count=math.inf, limit=limit
        )

    spans = [
        (math.ceil(low - 0.5), math.floor(high - 0.5))
        for low, high in zip(lows, highs, strict=True)
    ]
    cell_count = math.prod(max(0, last - first + 1) for first, last in spans)
    if cell_count > limit:
        logger.warning(
            "Refusing to enumerate %d cells (limit %d) in %r", cell_count, limit, bounds
        )
        raise RegionTooLargeError(
            "Too many cells to enumerate", cell_count=cell_count, limit=limit
        )

    axes = [range(first, last + 1) for first, last in spans]
    vector_type = type(bounds.minimum)
    points = []
    for cell in itertools.product(*reversed(axes)):
        point = vector_type.from_tuple(reversed(cell))
        if target.contains(point):
            points.append(point)

    logger.debug(
        "Enumerated %d of %d cells of %s", len(points), cell_count, type(target).__name__
    )
    return points
