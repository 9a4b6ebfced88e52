# edge.py
from __future__ import annotations
from typing import Tuple

class FlowEdge:
    """
    Undirected edge between two entities carrying both directional counts.
    Orientation (source/target) is fixed by the aggregator; identity is the
    unordered pair, so key() is always sorted.
    """
    __slots__ = ("_source", "_target", "_flow_st", "_flow_ts")

    def __init__(self, sourceEntity, targetEntity, flowSourceToTarget: int = 0, flowTargetToSource: int = 0):
        # Prevent loops
        if sourceEntity.getId() == targetEntity.getId():
            raise ValueError(f"Edge endpoints must be distinct (no self-flow on {sourceEntity.getId()!r}).")
        if flowSourceToTarget < 0 or flowTargetToSource < 0:
            raise ValueError("Directional flow counts must be non-negative.")

        self._source = sourceEntity
        self._target = targetEntity
        self._flow_st = int(flowSourceToTarget)
        self._flow_ts = int(flowTargetToSource)

    # --- Getters ---
    def getSource(self): return self._source
    def getTarget(self): return self._target
    def getSourceId(self) -> str: return self._source.getId()
    def getTargetId(self) -> str: return self._target.getId()
    def flowSourceToTarget(self) -> int: return self._flow_st
    def flowTargetToSource(self) -> int: return self._flow_ts
    def totalFlow(self) -> int: return self._flow_st + self._flow_ts

    def directionalCount(self, fromId: str, toId: str) -> int:
        if (fromId, toId) == (self.getSourceId(), self.getTargetId()):
            return self._flow_st
        if (fromId, toId) == (self.getTargetId(), self.getSourceId()):
            return self._flow_ts
        raise KeyError(f"{fromId}->{toId} is not a direction of {self!r}")

    def dominantCategory(self) -> str:
        # Receiving side of the larger flow; ties go to the target
        if self._flow_st >= self._flow_ts:
            return self._target.getCategory()
        return self._source.getCategory()

    def touches(self, entityId: str) -> bool:
        return entityId == self.getSourceId() or entityId == self.getTargetId()

    def other(self, entityId: str) -> str:
        if entityId == self.getSourceId():
            return self.getTargetId()
        if entityId == self.getTargetId():
            return self.getSourceId()
        raise KeyError(f"{entityId!r} is not an endpoint of {self!r}")

    # Convenience: unordered-pair key
    def key(self) -> Tuple[str, str]:
        a, b = self.getSourceId(), self.getTargetId()
        return (a, b) if a <= b else (b, a)

    def __eq__(self, other) -> bool:
        return isinstance(other, FlowEdge) and self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self):
        return f"E({self.getSourceId()} -{self._flow_st}/{self._flow_ts}- {self.getTargetId()})"
