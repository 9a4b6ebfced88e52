# network.py

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional, Tuple
import math

from circle_layout import CategoryLabel, CircleLayout
from config import NetworkConfig
from curve_router import CurveRouter, QuadCurve, base_curvature
from edge import FlowEdge
from entity import Entity
from flows import FlowRecord, FlowTotals, aggregate_flows, entity_flow_totals


@dataclass(frozen=True)
class NodeView:
    id: str
    label: str
    name: str
    x: float
    y: float
    weight: float
    net: int
    category: str
    color: str
    radiusSize: float


@dataclass(frozen=True)
class EdgeView:
    sourceId: str
    targetId: str
    flowSourceToTarget: int
    flowTargetToSource: int
    totalFlow: int
    curvatureBase: float
    color: str

    def key(self) -> Tuple[str, str]:
        a, b = self.sourceId, self.targetId
        return (a, b) if a <= b else (b, a)

    def touches(self, entityId: str) -> bool:
        return entityId == self.sourceId or entityId == self.targetId


@dataclass(frozen=True)
class LabelView:
    category: str
    text: str
    x: float
    y: float
    color: str


def radius_size(weight: float, max_weight: float, min_size: float = 5.0, size_range: float = 25.0) -> float:
    # sqrt keeps circle area roughly proportional to weight
    if max_weight <= 0:
        return min_size
    return min_size + size_range * math.sqrt(weight / max_weight)


class MigrationNetwork:
    """
    Static node/edge/label datasets for one load of entities and flows.

    Built once by build(); nothing here changes afterwards. Interaction state
    (hover, selection, filter) lives in interaction.py and only selects
    which of these records a renderer emphasises.
    """

    def __init__(self, config: NetworkConfig, placed: Dict[str, Entity], flowEdges: List[FlowEdge],
                 labels: List[CategoryLabel], totals: Dict[str, FlowTotals]):
        self.config = config
        self._placed = placed
        self._flowEdges = flowEdges
        self._categoryLabels = labels
        self._totals = totals

        self._nodes = self._build_nodes()
        self._edges = self._build_edges()
        self._labels = [
            LabelView(l.category, l.text, l.position.x(), l.position.y(), l.color)
            for l in labels
        ]
        self._adjacency: Dict[str, set] = {eid: set() for eid in placed}
        for e in self._edges:
            self._adjacency[e.sourceId].add(e.targetId)
            self._adjacency[e.targetId].add(e.sourceId)

        lc = config.layout
        self.router = CurveRouter(
            {eid: ent.getPosition() for eid, ent in placed.items()},
            radius=lc.radius,
            center=CircleLayout(config).getCenter(),
            config=config.curves,
        )

    @classmethod
    def build(cls, entities: Iterable[Entity], records: Iterable[FlowRecord],
              config: Optional[NetworkConfig] = None) -> "MigrationNetwork":
        config = config or NetworkConfig()
        entities = list(entities)
        records = list(records)

        layout = CircleLayout(config)
        placed = layout.layout(entities)
        flowEdges = aggregate_flows(placed.values(), records)
        totals = entity_flow_totals(placed.values(), records)
        return cls(config, placed, flowEdges, layout.categoryLabels(placed), totals)

    # --------------------------
    # Dataset construction
    # --------------------------
    def _build_nodes(self) -> List[NodeView]:
        ns = self.config.node_size
        max_weight = max((e.getWeight() for e in self._placed.values()), default=0.0)
        nodes = []
        for eid, ent in self._placed.items():
            x, y = ent.pos_tuple()
            nodes.append(NodeView(
                id=eid,
                label=eid,
                name=ent.getName(),
                x=x,
                y=y,
                weight=ent.getWeight(),
                net=self._totals[eid].net,
                category=ent.getCategory(),
                color=self.config.color_for(ent.getCategory()),
                radiusSize=radius_size(ent.getWeight(), max_weight, ns.min_size, ns.size_range),
            ))
        return nodes

    def _build_edges(self) -> List[EdgeView]:
        edges = []
        for fe in self._flowEdges:
            curvature = base_curvature(
                fe.getSource().getAngle(), fe.getTarget().getAngle(), self.config.curves
            )
            edges.append(EdgeView(
                sourceId=fe.getSourceId(),
                targetId=fe.getTargetId(),
                flowSourceToTarget=fe.flowSourceToTarget(),
                flowTargetToSource=fe.flowTargetToSource(),
                totalFlow=fe.totalFlow(),
                curvatureBase=curvature,
                color=self.config.color_for(fe.dominantCategory()),
            ))
        return edges

    # --------------------------
    # Getters (used by UI)
    # --------------------------
    def nodes(self) -> List[NodeView]:
        return list(self._nodes)

    def edges(self) -> List[EdgeView]:
        return list(self._edges)

    def labels(self) -> List[LabelView]:
        return list(self._labels)

    def flowEdges(self) -> List[FlowEdge]:
        return list(self._flowEdges)

    def getEntity(self, entityId: str) -> Entity:
        return self._placed[entityId]

    def getNode(self, entityId: str) -> Optional[NodeView]:
        for n in self._nodes:
            if n.id == entityId:
                return n
        return None

    def neighbors(self, entityId: str) -> set:
        return set(self._adjacency.get(entityId, ()))

    def visibleEdges(self, flowFilter=None) -> List[EdgeView]:
        if flowFilter is None:
            return list(self._edges)
        return [e for e in self._edges if flowFilter.accepts(e)]

    def edgePath(self, edge: EdgeView) -> QuadCurve:
        return self.router.edgePath(edge)

    def get_stats(self):
        return {
            "entities": len(self._nodes),
            "edges": len(self._edges),
            "categories": len(self._labels),
            "total_flow": sum(e.totalFlow for e in self._edges),
            "major_edges": sum(1 for e in self._edges if e.totalFlow >= self.config.major_flow_threshold),
        }

    def get_bounding_box(self):
        xs = [n.x for n in self._nodes] + [l.x for l in self._labels]
        ys = [n.y for n in self._nodes] + [l.y for l in self._labels]
        if not xs:
            return (0.0, 0.0, 0.0, 0.0)
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self):
        return {
            "nodes": [asdict(n) for n in self._nodes],
            "links": [asdict(e) for e in self._edges],
            "divisions": [asdict(l) for l in self._labels],
        }
