"""
Geometry helpers, entities and config validation.
"""

import math

import pytest
from PyQt5.QtCore import QPointF

from config import CurveConfig, LayoutConfig, NetworkConfig
from entity import Entity
from errors import InvalidInputError
from utils_geom import angular_distance, as_point, median_angle, polar_point, v_dist


class TestAngles:

    @pytest.mark.parametrize("a, b, expected", [
        (0.0, 90.0, 90.0),
        (90.0, 0.0, 90.0),
        (10.0, 350.0, 20.0),
        (180.0, -167.0, 13.0),
        (0.0, 180.0, 180.0),
        (45.0, 45.0, 0.0),
    ])
    def test_angular_distance(self, a, b, expected):
        assert angular_distance(a, b) == pytest.approx(expected)

    def test_median_odd_and_even(self):
        assert median_angle([180.0, 120.0, 150.0]) == 150.0
        assert median_angle([180.0, 90.0]) == 135.0
        assert median_angle([42.0]) == 42.0

    def test_median_empty(self):
        with pytest.raises(ValueError):
            median_angle([])

    def test_polar_point(self):
        p = polar_point(180.0, 250.0)
        assert p.x() == pytest.approx(-250.0)
        assert p.y() == pytest.approx(0.0, abs=1e-9)
        q = polar_point(90.0, 10.0, QPointF(5.0, 5.0))
        assert v_dist(q, QPointF(5.0, 15.0)) == pytest.approx(0.0, abs=1e-9)

    def test_as_point_copies(self):
        p = QPointF(1.0, 2.0)
        q = as_point(p)
        p.setX(9.0)
        assert q.x() == 1.0
        assert as_point((3, 4)) == QPointF(3.0, 4.0)


class TestEntity:

    def test_placed_at_returns_new_entity(self):
        e = Entity("PSYC", "SOC", 12, "Psychology")
        placed = e.placedAt(180.0, QPointF(-250.0, 0.0))
        assert not e.isPlaced()
        assert placed.isPlaced()
        assert placed.getAngle() == 180.0
        assert placed.getName() == "Psychology"
        assert placed.pos_tuple() == (-250.0, 0.0)

    def test_position_cannot_be_moved_from_outside(self):
        placed = Entity("A", "SOC").placedAt(0.0, QPointF(250.0, 0.0))
        placed.getPosition().setX(0.0)
        assert placed.pos_tuple() == (250.0, 0.0)

    def test_name_defaults_to_id(self):
        assert Entity("HIST", "SOC").getName() == "HIST"

    @pytest.mark.parametrize("eid, weight", [("", 1), ("   ", 1), ("A", -1)])
    def test_invalid(self, eid, weight):
        with pytest.raises(InvalidInputError):
            Entity(eid, "SOC", weight)

    def test_unplaced_has_no_tuple(self):
        with pytest.raises(InvalidInputError):
            Entity("A", "SOC").pos_tuple()


class TestConfig:

    def test_defaults(self):
        cfg = NetworkConfig()
        assert cfg.category_order() == ("SOC", "APP", "HUM", "NAT")
        assert cfg.layout.radius == 250.0
        assert cfg.color_for("APP") == "#E69F00"
        assert cfg.color_for("XYZ") == cfg.fallback_color
        assert cfg.name_for("NAT") == "Natural Sciences"

    def test_with_radius_keeps_original(self):
        cfg = NetworkConfig()
        big = cfg.with_radius(400.0, label_radius=450.0)
        assert cfg.layout.radius == 250.0
        assert (big.layout.radius, big.layout.label_radius) == (400.0, 450.0)

    def test_threshold_for_radius(self):
        assert CurveConfig().thresholdFor(125.0) == pytest.approx(20.0)

    @pytest.mark.parametrize("kwargs", [
        dict(radius=0.0), dict(label_radius=-1.0), dict(direction=0), dict(direction=2),
    ])
    def test_invalid_layout(self, kwargs):
        with pytest.raises(InvalidInputError):
            LayoutConfig(**kwargs)

    def test_unsorted_tiers_rejected(self):
        with pytest.raises(InvalidInputError):
            CurveConfig(tiers=((120.0, 0.3), (60.0, 0.5)))

    def test_duplicate_category_codes_rejected(self):
        cats = NetworkConfig().categories
        with pytest.raises(InvalidInputError):
            NetworkConfig(categories=cats + cats[:1])

    def test_circle_stays_round(self):
        # Every layout point lies on the ring
        for deg in range(0, 360, 15):
            p = polar_point(float(deg), 250.0)
            assert math.hypot(p.x(), p.y()) == pytest.approx(250.0)
