# config.py

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from errors import InvalidInputError


@dataclass(frozen=True)
class CategorySpec:
    code: str
    name: str
    color: str


DEFAULT_CATEGORIES: Tuple[CategorySpec, ...] = (
    CategorySpec("SOC", "Social Sciences", "#D55E00"),   # Vermillion
    CategorySpec("APP", "Applied Sciences", "#E69F00"),  # Orange
    CategorySpec("HUM", "Humanities", "#56B4E9"),        # Sky Blue
    CategorySpec("NAT", "Natural Sciences", "#009E73"),  # Bluish Green
)


@dataclass(frozen=True)
class LayoutConfig:
    radius: float = 250.0
    label_radius: float = 330.0
    # First entity sits at start_angle; direction -1 walks clockwise
    start_angle: float = 180.0
    direction: int = -1
    center: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self):
        if self.radius <= 0.0 or self.label_radius <= 0.0:
            raise InvalidInputError("radius and label_radius must be positive")
        if self.direction not in (-1, 1):
            raise InvalidInputError(f"direction must be -1 or 1, got {self.direction}")


@dataclass(frozen=True)
class CurveConfig:
    # (upper bound of angular distance, curvature), checked in order
    tiers: Tuple[Tuple[float, float], ...] = ((60.0, 0.5), (120.0, 0.3))
    fallback_curvature: float = 0.1

    # Collision escalation, tuned for a 250-unit ring of ~28 entities
    collision_threshold: float = 40.0
    collision_multiplier: float = 1.8
    reference_radius: float = 250.0

    def __post_init__(self):
        bounds = [b for b, _ in self.tiers]
        if bounds != sorted(bounds):
            raise InvalidInputError("curvature tiers must be sorted by angle bound")
        if self.collision_threshold < 0.0 or self.reference_radius <= 0.0:
            raise InvalidInputError("collision threshold/reference radius out of range")

    def thresholdFor(self, radius: float) -> float:
        return self.collision_threshold * radius / self.reference_radius


@dataclass(frozen=True)
class NodeSizeConfig:
    min_size: float = 5.0
    size_range: float = 25.0


@dataclass(frozen=True)
class NetworkConfig:
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    curves: CurveConfig = field(default_factory=CurveConfig)
    node_size: NodeSizeConfig = field(default_factory=NodeSizeConfig)
    categories: Tuple[CategorySpec, ...] = DEFAULT_CATEGORIES
    major_flow_threshold: int = 10
    fallback_color: str = "#999999"

    def __post_init__(self):
        codes = self.category_order()
        if not codes:
            raise InvalidInputError("at least one category is required")
        if len(set(codes)) != len(codes):
            raise InvalidInputError(f"duplicate category codes in {codes}")

    def category_order(self) -> Tuple[str, ...]:
        return tuple(c.code for c in self.categories)

    def category(self, code: str) -> Optional[CategorySpec]:
        for c in self.categories:
            if c.code == code:
                return c
        return None

    def color_for(self, code: str) -> str:
        c = self.category(code)
        return c.color if c else self.fallback_color

    def name_for(self, code: str) -> str:
        c = self.category(code)
        return c.name if c else code

    def with_radius(self, radius: float, label_radius: Optional[float] = None) -> "NetworkConfig":
        # Keep the label ring at the same relative distance unless told otherwise
        if label_radius is None:
            label_radius = radius * self.layout.label_radius / self.layout.radius
        return replace(self, layout=replace(self.layout, radius=radius, label_radius=label_radius))
