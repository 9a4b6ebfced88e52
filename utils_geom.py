# utils_geom.py

from PyQt5.QtCore import QPointF
from typing import List, Sequence, Tuple
import math

def v_add(a: QPointF, b: QPointF) -> QPointF:
    return QPointF(a.x() + b.x(), a.y() + b.y())

def v_sub(a: QPointF, b: QPointF) -> QPointF:
    return QPointF(a.x() - b.x(), a.y() - b.y())

def v_mid(a: QPointF, b: QPointF) -> QPointF:
    return QPointF((a.x() + b.x()) * 0.5, (a.y() + b.y()) * 0.5)

def v_len(a: QPointF) -> float:
    return math.hypot(a.x(), a.y())

def v_dist(a: QPointF, b: QPointF) -> float:
    return math.hypot(a.x() - b.x(), a.y() - b.y())

def v_from_angle(theta_rad: float, length: float = 1.0) -> QPointF:
    return QPointF(length * math.cos(theta_rad), length * math.sin(theta_rad))

def as_point(p) -> QPointF:
    # Always a fresh point: callers may keep it
    if isinstance(p, QPointF):
        return QPointF(p.x(), p.y())
    x, y = p
    return QPointF(float(x), float(y))

def polar_point(angle_deg: float, radius: float, center: QPointF = QPointF(0.0, 0.0)) -> QPointF:
    return v_add(center, v_from_angle(math.radians(angle_deg), radius))

def angular_distance(a_deg: float, b_deg: float) -> float:
    """
    Smaller arc between two angles, in [0, 180].
    Inputs are expected within one turn of each other (layout angles are).
    """
    d = abs(b_deg - a_deg) % 360.0
    return 360.0 - d if d > 180.0 else d

def median_angle(angles: Sequence[float]) -> float:
    """
    Median of a group's angles: middle value for odd sizes,
    mean of the two middle values for even sizes.
    """
    if not angles:
        raise ValueError("median_angle() needs at least one angle")
    s = sorted(angles)
    n = len(s)
    if n % 2 == 1:
        return s[n // 2]
    return (s[n // 2 - 1] + s[n // 2]) / 2.0

def quad_bezier_points(p0: QPointF, c: QPointF, p1: QPointF, steps: int = 20) -> Tuple[List[float], List[float]]:
    ptsx = []; ptsy = []
    for i in range(steps + 1):
        t = i / steps
        # Quadratic Bezier: B(t)= (1-t)^2 P0 + 2(1-t)t C + t^2 P1
        x = (1 - t) * (1 - t) * p0.x() + 2 * (1 - t) * t * c.x() + t * t * p1.x()
        y = (1 - t) * (1 - t) * p0.y() + 2 * (1 - t) * t * c.y() + t * t * p1.y()
        ptsx.append(x); ptsy.append(y)
    return ptsx, ptsy
