# flows.py
"""
Flow aggregation: directed (source, target, count) records collapse into
one undirected FlowEdge per pair of entities.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from edge import FlowEdge
from entity import Entity
from errors import DuplicateEntityError, InvalidInputError, MissingEntityError


@dataclass(frozen=True)
class FlowRecord:
    source: str
    target: str
    count: int = 1

    def __post_init__(self):
        if self.count < 0:
            raise InvalidInputError(f"Flow {self.source}->{self.target} has negative count {self.count}.")

    def isSelfFlow(self) -> bool:
        return self.source == self.target


@dataclass(frozen=True)
class FlowTotals:
    starting: int = 0
    ending: int = 0

    @property
    def net(self) -> int:
        return self.ending - self.starting


def index_entities(entities: Iterable[Entity]) -> Dict[str, Entity]:
    by_id: Dict[str, Entity] = {}
    for e in entities:
        if e.getId() in by_id:
            raise DuplicateEntityError(e.getId())
        by_id[e.getId()] = e
    return by_id


def _check_refs(record: FlowRecord, by_id: Dict[str, Entity]):
    for eid in (record.source, record.target):
        if eid not in by_id:
            raise MissingEntityError(eid, f"flow {record.source}->{record.target}")


def aggregate_flows(entities: Iterable[Entity], records: Iterable[FlowRecord]) -> List[FlowEdge]:
    """
    Group directed records by unordered endpoint pair and sum each direction.

    Self-flows are validated, then discarded. Zero-count records never
    create an edge, so every edge has totalFlow >= 1. An edge is oriented
    like the first of its records in (source, target) order, so a pair that
    only flows one way keeps that direction as source->target. Output is
    sorted by pair key.
    """
    by_id = index_entities(entities)

    # pair key -> {(src, tgt): count}
    groups: Dict[Tuple[str, str], Dict[Tuple[str, str], int]] = {}
    for rec in records:
        _check_refs(rec, by_id)
        if rec.isSelfFlow() or rec.count == 0:
            continue
        key = (rec.source, rec.target) if rec.source <= rec.target else (rec.target, rec.source)
        directed = groups.setdefault(key, {})
        directed[(rec.source, rec.target)] = directed.get((rec.source, rec.target), 0) + rec.count

    edges: List[FlowEdge] = []
    for key in sorted(groups):
        directed = groups[key]
        src, tgt = min(directed)
        forward = directed.get((src, tgt), 0)
        backward = directed.get((tgt, src), 0)
        edges.append(FlowEdge(by_id[src], by_id[tgt], forward, backward))
    return edges


def entity_flow_totals(entities: Iterable[Entity], records: Iterable[FlowRecord]) -> Dict[str, FlowTotals]:
    """Students starting/ending in each entity (self-flows count: those stayed)."""
    by_id = index_entities(entities)
    starting = {eid: 0 for eid in by_id}
    ending = {eid: 0 for eid in by_id}
    for rec in records:
        _check_refs(rec, by_id)
        starting[rec.source] += rec.count
        ending[rec.target] += rec.count
    return {eid: FlowTotals(starting[eid], ending[eid]) for eid in by_id}
