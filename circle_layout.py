# circle_layout.py

from dataclasses import dataclass
from typing import Dict, Iterable, List

from PyQt5.QtCore import QPointF

from config import NetworkConfig
from entity import Entity
from errors import DuplicateEntityError, InvalidInputError
from utils_geom import median_angle, polar_point


@dataclass(frozen=True)
class CategoryLabel:
    category: str
    text: str
    position: QPointF
    color: str


class CircleLayout:
    """
    Places entities on a ring, one contiguous arc per category.

    Ring order is the configured category order, then entity id
    (lexicographic) inside each category. The i-th entity gets
    angle = start_angle + direction * i * (360 / n).
    """

    def __init__(self, config: NetworkConfig = None):
        self.config = config or NetworkConfig()
        lc = self.config.layout
        self._center = QPointF(lc.center[0], lc.center[1])

    def getCenter(self) -> QPointF:
        return QPointF(self._center)

    def orderEntities(self, entities: Iterable[Entity]) -> List[Entity]:
        order = self.config.category_order()
        buckets: Dict[str, List[Entity]] = {code: [] for code in order}
        seen = set()
        for e in entities:
            eid = e.getId()
            if eid in seen:
                raise DuplicateEntityError(eid)
            seen.add(eid)
            if e.getCategory() not in buckets:
                raise InvalidInputError(
                    f"Entity {eid!r} has category {e.getCategory()!r}, expected one of {order}."
                )
            buckets[e.getCategory()].append(e)
        if not seen:
            raise InvalidInputError("Cannot lay out an empty entity set.")

        ordered: List[Entity] = []
        for code in order:
            ordered.extend(sorted(buckets[code], key=lambda ent: ent.getId()))
        return ordered

    def angleFor(self, index: int, total: int) -> float:
        lc = self.config.layout
        step = 360.0 / total
        return lc.start_angle + lc.direction * index * step

    def layout(self, entities: Iterable[Entity]) -> Dict[str, Entity]:
        ordered = self.orderEntities(entities)
        n = len(ordered)
        radius = self.config.layout.radius
        placed: Dict[str, Entity] = {}
        for i, e in enumerate(ordered):
            angle = self.angleFor(i, n)
            placed[e.getId()] = e.placedAt(angle, polar_point(angle, radius, self._center))
        return placed

    def categoryLabels(self, placed: Dict[str, Entity]) -> List[CategoryLabel]:
        label_radius = self.config.layout.label_radius
        labels: List[CategoryLabel] = []
        for spec in self.config.categories:
            angles = [e.getAngle() for e in placed.values() if e.getCategory() == spec.code]
            if not angles:
                continue
            angle = median_angle(angles)
            labels.append(CategoryLabel(
                category=spec.code,
                text=spec.name,
                position=polar_point(angle, label_radius, self._center),
                color=spec.color,
            ))
        return labels
