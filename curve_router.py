# curve_router.py

from typing import Dict, List, Mapping, NamedTuple, Tuple
import math

from PyQt5.QtCore import QPointF

from config import CurveConfig
from errors import MissingEntityError
from utils_geom import (
    angular_distance, as_point, quad_bezier_points, v_add, v_dist, v_from_angle, v_len, v_mid, v_sub
)

HALF_PI = math.pi / 2


class QuadCurve(NamedTuple):
    start: QPointF
    control: QPointF
    end: QPointF

    def toSvgPath(self) -> str:
        s, c, e = self.start, self.control, self.end
        return f"M {s.x():g},{s.y():g} Q {c.x():g},{c.y():g} {e.x():g},{e.y():g}"

    def sample(self, steps: int = 24) -> Tuple[List[float], List[float]]:
        return quad_bezier_points(self.start, self.control, self.end, steps)

    def copy(self) -> "QuadCurve":
        return QuadCurve(as_point(self.start), as_point(self.control), as_point(self.end))


def base_curvature(angle_a: float, angle_b: float, config: CurveConfig = None) -> float:
    """
    Tiered curvature from the angular distance between two ring positions:
    near neighbours bow strongly, opposite nodes get a gentle curve.
    """
    cfg = config or CurveConfig()
    diff = angular_distance(angle_a, angle_b)
    for bound, curvature in cfg.tiers:
        if diff < bound:
            return curvature
    return cfg.fallback_curvature


class CurveRouter:
    """
    Computes the quadratic control point for an edge between two placed
    entities.

    - the offset is perpendicular to the chord, dist * curvature long;
    - curvature is escalated once (x multiplier) when any other entity lies
      within the collision threshold of the chord midpoint;
    - the curve bends toward the center when the midpoint is inside the ring,
      away from it otherwise.

    Positions are fixed for the router's lifetime, so routed edges are cached
    by edge key.
    """

    def __init__(self, positions: Mapping[str, QPointF], radius: float,
                 center: QPointF = QPointF(0.0, 0.0), config: CurveConfig = None):
        self.config = config or CurveConfig()
        self._positions: Dict[str, QPointF] = {k: as_point(p) for k, p in positions.items()}
        self._radius = float(radius)
        self._center = as_point(center)
        self._threshold = self.config.thresholdFor(self._radius)
        self._cache: Dict[Tuple[str, str], QuadCurve] = {}

    def getThreshold(self) -> float:
        return self._threshold

    def positionOf(self, entityId: str) -> QPointF:
        try:
            return as_point(self._positions[entityId])
        except KeyError:
            raise MissingEntityError(entityId, "no layout position") from None

    def hasCollision(self, sourceId: str, targetId: str, mid: QPointF) -> bool:
        for eid, p in self._positions.items():
            if eid == sourceId or eid == targetId:
                continue
            if v_dist(p, mid) < self._threshold:
                return True
        return False

    def curvesInward(self, mid: QPointF) -> bool:
        return v_len(v_sub(mid, self._center)) < self._radius

    def route(self, sourceId: str, targetId: str, curvature: float) -> QuadCurve:
        p1 = self.positionOf(sourceId)
        p2 = self.positionOf(targetId)

        mid = v_mid(p1, p2)
        dist = v_dist(p1, p2)
        angle = math.atan2(p2.y() - p1.y(), p2.x() - p1.x())

        multiplier = self.config.collision_multiplier if self.hasCollision(sourceId, targetId, mid) else 1.0
        offset = dist * curvature * multiplier
        perp = angle - HALF_PI if self.curvesInward(mid) else angle + HALF_PI

        control = v_add(mid, v_from_angle(perp, offset))
        return QuadCurve(p1, control, p2)

    def edgePath(self, edge) -> QuadCurve:
        """Route an EdgeView; results are cached by the edge's pair key and handed out as copies."""
        key = edge.key()
        cached = self._cache.get(key)
        if cached is None:
            cached = self.route(edge.sourceId, edge.targetId, edge.curvatureBase)
            self._cache[key] = cached
        return cached.copy()

    def clearCache(self):
        self._cache.clear()
