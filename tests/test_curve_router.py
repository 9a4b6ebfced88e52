"""
Curve routing tests: curvature tiers, collision escalation and bend direction.
"""

import math

import pytest
from PyQt5.QtCore import QPointF

from config import CurveConfig
from curve_router import CurveRouter, QuadCurve, base_curvature
from errors import MissingEntityError
from network import EdgeView
from utils_geom import v_dist, v_mid


def offset_of(curve: QuadCurve) -> float:
    return v_dist(curve.control, v_mid(curve.start, curve.end))


def edge_view(source, target, curvature=0.5, total=1):
    return EdgeView(source, target, total, 0, total, curvature, "#000000")


class TestBaseCurvature:

    @pytest.mark.parametrize("a, b, expected", [
        (0.0, 0.0, 0.5),
        (0.0, 59.9, 0.5),
        (0.0, 60.0, 0.3),
        (0.0, 119.9, 0.3),
        (0.0, 120.0, 0.1),
        (0.0, 180.0, 0.1),
        (180.0, 120.0, 0.3),
    ])
    def test_tier_boundaries(self, a, b, expected):
        assert base_curvature(a, b) == expected

    @pytest.mark.parametrize("a, b, expected", [
        (10.0, 350.0, 0.5),     # 340 reflects to 20
        (180.0, -150.0, 0.5),   # 330 reflects to 30
        (0.0, 240.0, 0.1),      # 240 reflects to 120
        (170.0, -80.0, 0.3),    # 250 reflects to 110
    ])
    def test_differences_over_180_are_reflected(self, a, b, expected):
        assert base_curvature(a, b) == expected

    def test_symmetric(self):
        assert base_curvature(30.0, 140.0) == base_curvature(140.0, 30.0)

    def test_custom_tiers(self):
        cfg = CurveConfig(tiers=((90.0, 0.7),), fallback_curvature=0.2)
        assert base_curvature(0.0, 45.0, cfg) == 0.7
        assert base_curvature(0.0, 90.0, cfg) == 0.2


class TestCollisionEscalation:

    def _pair(self, extra=None):
        positions = {"A": QPointF(0.0, -100.0), "B": QPointF(0.0, 100.0)}
        if extra is not None:
            positions["C"] = extra
        return CurveRouter(positions, radius=250.0)

    def test_entity_at_midpoint_gives_exactly_1_8x_offset(self):
        plain = self._pair().route("A", "B", 0.5)
        crowded = self._pair(QPointF(0.0, 0.0)).route("A", "B", 0.5)
        assert offset_of(plain) == pytest.approx(100.0)
        assert offset_of(crowded) == pytest.approx(1.8 * offset_of(plain))

    def test_collision_keeps_direction(self):
        plain = self._pair().route("A", "B", 0.5)
        crowded = self._pair(QPointF(0.0, 0.0)).route("A", "B", 0.5)
        assert plain.control.x() > 0 and crowded.control.x() > 0
        assert crowded.control.y() == pytest.approx(plain.control.y(), abs=1e-9)

    def test_threshold_is_strict(self):
        router = self._pair(QPointF(40.0, 0.0))
        assert not router.hasCollision("A", "B", QPointF(0.0, 0.0))
        router = self._pair(QPointF(39.9, 0.0))
        assert router.hasCollision("A", "B", QPointF(0.0, 0.0))

    def test_endpoints_never_count_as_collisions(self):
        router = CurveRouter({"A": QPointF(0.0, 0.0), "B": QPointF(10.0, 0.0)}, radius=250.0)
        assert not router.hasCollision("A", "B", QPointF(5.0, 0.0))

    def test_threshold_scales_with_radius(self):
        assert CurveRouter({}, radius=250.0).getThreshold() == pytest.approx(40.0)
        assert CurveRouter({}, radius=500.0).getThreshold() == pytest.approx(80.0)


class TestDirection:

    @pytest.mark.parametrize("x0, inward", [
        (0.0, True),
        (100.0, True),
        (249.0, True),
        (250.0, False),
        (300.0, False),
        (-400.0, False),
    ])
    def test_direction_flips_at_ring(self, x0, inward):
        """Vertical chord at x=x0: -90deg puts the control at +x, +90deg at -x."""
        router = CurveRouter({"A": QPointF(x0, -50.0), "B": QPointF(x0, 50.0)}, radius=250.0)
        curve = router.route("A", "B", 0.3)
        assert router.curvesInward(v_mid(curve.start, curve.end)) is inward
        dx = curve.control.x() - x0
        assert dx == pytest.approx(30.0 if inward else -30.0)
        assert curve.control.y() == pytest.approx(0.0, abs=1e-9)

    def test_control_point_formula(self):
        p1, p2 = QPointF(-250.0, 0.0), QPointF(0.0, 250.0)
        router = CurveRouter({"A": p1, "B": p2}, radius=250.0)
        curve = router.route("A", "B", 0.3)

        mid = v_mid(p1, p2)
        dist = v_dist(p1, p2)
        angle = math.atan2(p2.y() - p1.y(), p2.x() - p1.x())
        perp = angle - math.pi / 2   # midpoint inside ring
        assert curve.control.x() == pytest.approx(mid.x() + dist * 0.3 * math.cos(perp))
        assert curve.control.y() == pytest.approx(mid.y() + dist * 0.3 * math.sin(perp))
        assert (curve.start, curve.end) == (p1, p2)


class TestEdgePath:

    def test_unknown_endpoint_raises(self):
        router = CurveRouter({"A": QPointF(0.0, 0.0)}, radius=250.0)
        with pytest.raises(MissingEntityError):
            router.edgePath(edge_view("A", "Z"))

    def test_results_are_cached_by_pair(self):
        router = CurveRouter({"A": QPointF(-250.0, 0.0), "B": QPointF(250.0, 0.0)}, radius=250.0)
        first = router.edgePath(edge_view("A", "B", 0.1))
        second = router.edgePath(edge_view("B", "A", 0.1))
        assert second.toSvgPath() == first.toSvgPath()
        assert len(router._cache) == 1
        router.clearCache()
        assert not router._cache

    def test_cached_curve_cannot_be_changed_by_callers(self):
        router = CurveRouter({"A": QPointF(-250.0, 0.0), "B": QPointF(250.0, 0.0)}, radius=250.0)
        first = router.edgePath(edge_view("A", "B", 0.1))
        expected = first.toSvgPath()
        first.control.setX(999.0)
        first.start.setY(-7.0)
        again = router.edgePath(edge_view("A", "B", 0.1))
        assert again.toSvgPath() == expected
        assert again.control is not first.control

    def test_router_does_not_share_positions(self):
        p = QPointF(-250.0, 0.0)
        router = CurveRouter({"A": p, "B": QPointF(250.0, 0.0)}, radius=250.0)
        before = router.route("A", "B", 0.1)
        p.setX(0.0)
        after = router.route("A", "B", 0.1)
        assert before.start.x() == after.start.x() == -250.0

    def test_svg_path(self):
        curve = QuadCurve(QPointF(-250.0, 0.0), QPointF(0.0, -50.0), QPointF(250.0, 0.0))
        assert curve.toSvgPath() == "M -250,0 Q 0,-50 250,0"

    def test_sample_hits_endpoints(self):
        curve = QuadCurve(QPointF(0.0, 0.0), QPointF(5.0, 5.0), QPointF(10.0, 0.0))
        xs, ys = curve.sample(10)
        assert len(xs) == len(ys) == 11
        assert (xs[0], ys[0]) == (0.0, 0.0)
        assert (xs[-1], ys[-1]) == pytest.approx((10.0, 0.0))
        assert ys[5] == pytest.approx(2.5)
