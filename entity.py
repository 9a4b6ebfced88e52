# entity.py

from PyQt5.QtCore import QPointF
from typing import Optional, Tuple, Union

from errors import InvalidInputError
from utils_geom import as_point

class Entity:
    __slots__ = ("_id", "_category", "_weight", "_name", "_angle", "_position")

    def __init__(self, entity_id: str, category: str, weight: float = 0.0,
                 name: Optional[str] = None, angle: Optional[float] = None,
                 position: Optional[Union[QPointF, Tuple[float, float]]] = None):
        entity_id = str(entity_id).strip()
        if not entity_id:
            raise InvalidInputError("Entity id must be a non-empty string.")
        if weight < 0:
            raise InvalidInputError(f"Entity {entity_id!r} has negative weight {weight}.")
        self._id = entity_id
        self._category = str(category)
        self._weight = weight
        self._name = name or entity_id
        self._angle = None if angle is None else float(angle)
        self._position = None if position is None else as_point(position)

    # --- Getters (no setters: entities are immutable once placed) ---
    def getId(self) -> str:
        return self._id

    def getCategory(self) -> str:
        return self._category

    def getWeight(self) -> float:
        return self._weight

    def getName(self) -> str:
        return self._name

    def getAngle(self) -> Optional[float]:
        return self._angle

    def getPosition(self) -> Optional[QPointF]:
        # Copy so callers can't move a placed entity
        p = self._position
        return None if p is None else QPointF(p.x(), p.y())

    def isPlaced(self) -> bool:
        return self._position is not None

    def pos_tuple(self) -> Tuple[float, float]:
        if self._position is None:
            raise InvalidInputError(f"Entity {self._id!r} has not been placed.")
        return (self._position.x(), self._position.y())

    def placedAt(self, angle: float, position: QPointF) -> "Entity":
        return Entity(self._id, self._category, self._weight, self._name, angle, position)

    def __repr__(self) -> str:
        if self._angle is None:
            return f"Entity({self._id}:{self._category})"
        return f"Entity({self._id}:{self._category} @ {self._angle:.2f}°)"
