"""Unit tests for deltoid.utils.union.

Tests cover:
- union() dispatch, commutativity and idempotence
- enclose_spheres and enclose_boxes directly
- overlap enumeration, ordering and the enumeration limit
"""

from __future__ import annotations

import logging
import math

import pytest

from deltoid.config import settings
from deltoid.exceptions import RegionMismatchError, RegionTooLargeError
from deltoid.region import CircleRegion, RectangleRegion, SphereRegion
from deltoid.utils.union import enclose_boxes, enclose_spheres, overlap, union
from deltoid.vector import Vec2, Vec3


class TestUnion:
    """Tests for the union() entry point."""

    def test_dispatches_to_circle(self) -> None:
        a = CircleRegion(centre=Vec2(x=-2, y=0), radius=1)
        b = CircleRegion(centre=Vec2(x=2, y=0), radius=1)
        assert union(a, b) == CircleRegion(centre=Vec2(x=0, y=0), radius=3)

    def test_dispatches_to_rectangle(self) -> None:
        a = RectangleRegion(minimum=Vec2.ORIGIN, maximum=Vec2.ONE)
        b = RectangleRegion(minimum=Vec2(x=-1, y=-1), maximum=Vec2.ORIGIN)
        assert union(a, b) == RectangleRegion(minimum=Vec2(x=-1, y=-1), maximum=Vec2.ONE)

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (
                CircleRegion(centre=Vec2(x=0.1, y=0.2), radius=0.3),
                CircleRegion(centre=Vec2(x=-7.7, y=3.3), radius=1.9),
            ),
            (
                SphereRegion(centre=Vec3(x=0.1, y=0.2, z=0.3), radius=1.1),
                SphereRegion(centre=Vec3(x=5.5, y=-2.2, z=9.9), radius=0.4),
            ),
            (
                RectangleRegion(minimum=Vec2(x=0.1, y=0.2), maximum=Vec2(x=0.3, y=0.4)),
                RectangleRegion(minimum=Vec2(x=-1, y=0.3), maximum=Vec2(x=0.2, y=9)),
            ),
        ],
    )
    def test_commutative(self, a: CircleRegion, b: CircleRegion) -> None:
        """Test argument order does not change the result."""
        assert union(a, b) == union(b, a)

    def test_idempotent(self) -> None:
        circle = CircleRegion(centre=Vec2(x=0.1, y=0.2), radius=0.3)
        assert union(circle, circle) == circle

    def test_mismatched_types_raise(self) -> None:
        with pytest.raises(RegionMismatchError) as exc_info:
            union(CircleRegion.ORIGIN, RectangleRegion.ORIGIN)  # type: ignore[type-var]
        assert exc_info.value.first == "CircleRegion"
        assert exc_info.value.second == "RectangleRegion"

    def test_logs_result(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="deltoid.utils.union")
        circle = CircleRegion(centre=Vec2.ORIGIN, radius=1)
        union(circle, circle)
        assert "Union of" in caplog.text


class TestEncloseSpheres:
    """Tests for the smallest enclosing ball."""

    def test_far_points_define_the_result(self) -> None:
        centre, radius = enclose_spheres(Vec2(x=0, y=0), 1.0, Vec2(x=8, y=0), 3.0)
        assert radius == 6.0
        assert centre == Vec2(x=5, y=0)

    def test_containment_returns_container(self) -> None:
        outer = (Vec2(x=1, y=1), 10.0)
        inner = (Vec2(x=2, y=2), 1.0)
        assert enclose_spheres(*outer, *inner) == outer
        assert enclose_spheres(*inner, *outer) == outer

    def test_identical_balls(self) -> None:
        assert enclose_spheres(Vec2.ONE, 2.0, Vec2.ONE, 2.0) == (Vec2.ONE, 2.0)

    def test_concentric_balls(self) -> None:
        assert enclose_spheres(Vec2.ONE, 1.0, Vec2.ONE, 3.0) == (Vec2.ONE, 3.0)

    def test_result_encloses_inputs(self) -> None:
        """Test both inputs lie inside the result, touching its boundary."""
        a, ra = Vec3(x=1, y=-2, z=0.5), 1.5
        b, rb = Vec3(x=-3, y=4, z=2), 0.75
        centre, radius = enclose_spheres(a, ra, b, rb)
        assert centre.subtract(a).length() + ra == pytest.approx(radius)
        assert centre.subtract(b).length() + rb == pytest.approx(radius)


class TestEncloseBoxes:
    """Tests for the axis-aligned hull."""

    def test_hull(self) -> None:
        minimum, maximum = enclose_boxes(
            Vec2(x=0, y=0), Vec2(x=1, y=5), Vec2(x=-2, y=1), Vec2(x=0.5, y=6)
        )
        assert minimum == Vec2(x=-2, y=0)
        assert maximum == Vec2(x=1, y=6)


class TestOverlap:
    """Tests for grid point enumeration."""

    def test_filters_by_target(self) -> None:
        """Test only the points the target contains are kept."""
        bounds = RectangleRegion(minimum=Vec2(x=-2, y=-2), maximum=Vec2(x=2, y=2))
        target = CircleRegion(centre=Vec2.ORIGIN, radius=1)
        assert overlap(bounds, target) == [
            Vec2(x=-1, y=-1),
            Vec2(x=0, y=-1),
            Vec2(x=-1, y=0),
            Vec2(x=0, y=0),
        ]

    def test_bounds_clip_target(self) -> None:
        """Test points outside the box are skipped even if the target has them."""
        bounds = RectangleRegion(minimum=Vec2.ORIGIN, maximum=Vec2(x=1, y=1))
        target = CircleRegion(centre=Vec2.ORIGIN, radius=5)
        assert overlap(bounds, target) == [Vec2(x=0, y=0)]

    def test_empty_box(self) -> None:
        """Test a box narrower than a cell centre spacing holds no points."""
        bounds = RectangleRegion(minimum=Vec2(x=0.6, y=0), maximum=Vec2(x=1.4, y=3))
        assert overlap(bounds, bounds) == []

    def test_invalid_bounds(self) -> None:
        assert overlap(RectangleRegion.INVALID, CircleRegion.ORIGIN) == []

    def test_limit_exceeded(self) -> None:
        bounds = RectangleRegion(minimum=Vec2.ORIGIN, maximum=Vec2(x=2, y=2))
        with pytest.raises(RegionTooLargeError) as exc_info:
            overlap(bounds, bounds, limit=3)
        assert exc_info.value.cell_count == 4
        assert exc_info.value.limit == 3

    def test_limit_reached_exactly(self) -> None:
        bounds = RectangleRegion(minimum=Vec2.ORIGIN, maximum=Vec2(x=2, y=2))
        assert len(overlap(bounds, bounds, limit=4)) == 4

    def test_huge_finite_box_is_refused(self) -> None:
        """Test the cell count is computed without materializing the axes."""
        bounds = RectangleRegion(
            minimum=Vec2(x=0, y=0), maximum=Vec2(x=1e19, y=1e19)
        )
        with pytest.raises(RegionTooLargeError) as exc_info:
            overlap(bounds, bounds, limit=10)
        assert exc_info.value.cell_count > 10**38

    def test_unbounded(self) -> None:
        bounds = RectangleRegion(
            minimum=Vec2(x=-math.inf, y=0), maximum=Vec2(x=0, y=1)
        )
        with pytest.raises(RegionTooLargeError) as exc_info:
            overlap(bounds, bounds)
        assert exc_info.value.cell_count == math.inf

    def test_default_limit_from_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the limit falls back to settings.MAX_ENCLOSED_POINTS."""
        monkeypatch.setattr(settings, "MAX_ENCLOSED_POINTS", 2)
        bounds = RectangleRegion(minimum=Vec2.ORIGIN, maximum=Vec2(x=2, y=2))
        with pytest.raises(RegionTooLargeError):
            overlap(bounds, bounds)

    def test_refusal_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        bounds = RectangleRegion(minimum=Vec2.ORIGIN, maximum=Vec2(x=2, y=2))
        with caplog.at_level(logging.WARNING, logger="deltoid.utils.union"):
            with pytest.raises(RegionTooLargeError):
                overlap(bounds, bounds, limit=1)
        assert "Refusing to enumerate 4 cells" in caplog.text
