# interaction.py
"""
Hover/selection/filter state for the viewers.

State changes go through pure functions that return a new state; the
renderers re-derive highlight and dim classes from the current state only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Sequence

DEFAULT_MAJOR_THRESHOLD = 10


class HighlightMode(Enum):
    NONE = "none"
    HOVERED = "hovered"
    SELECTED = "selected"


@dataclass(frozen=True)
class HighlightState:
    mode: HighlightMode = HighlightMode.NONE
    node_id: Optional[str] = None

    @classmethod
    def none(cls) -> "HighlightState":
        return cls()

    @classmethod
    def hovered(cls, node_id: str) -> "HighlightState":
        return cls(HighlightMode.HOVERED, node_id)

    @classmethod
    def selected(cls, node_id: str) -> "HighlightState":
        return cls(HighlightMode.SELECTED, node_id)

    def focus(self) -> Optional[str]:
        return None if self.mode is HighlightMode.NONE else self.node_id

    def isSticky(self) -> bool:
        return self.mode is HighlightMode.SELECTED


def on_hover(state: HighlightState, node_id: str) -> HighlightState:
    # A sticky selection wins over hover
    if state.isSticky():
        return state
    return HighlightState.hovered(node_id)


def on_leave(state: HighlightState) -> HighlightState:
    if state.isSticky():
        return state
    return HighlightState.none()


def on_click(state: HighlightState, node_id: str) -> HighlightState:
    if state.isSticky() and state.node_id == node_id:
        return HighlightState.none()
    return HighlightState.selected(node_id)


def on_click_outside(state: HighlightState) -> HighlightState:
    return HighlightState.none()


def on_reset(state: HighlightState) -> HighlightState:
    return HighlightState.none()


def on_pick(state: HighlightState, picked: Sequence[str]) -> HighlightState:
    """A pick event from a point-selecting chart: a node click, or empty space."""
    if picked:
        return on_click(state, picked[0])
    return on_click_outside(state)


class FilterMode(Enum):
    ALL = "all"
    MAJOR = "major"


@dataclass(frozen=True)
class FlowFilter:
    mode: FilterMode = FilterMode.ALL
    threshold: int = DEFAULT_MAJOR_THRESHOLD

    @classmethod
    def all(cls, threshold: int = DEFAULT_MAJOR_THRESHOLD) -> "FlowFilter":
        return cls(FilterMode.ALL, threshold)

    @classmethod
    def major(cls, threshold: int = DEFAULT_MAJOR_THRESHOLD) -> "FlowFilter":
        return cls(FilterMode.MAJOR, threshold)

    def accepts(self, edge) -> bool:
        if self.mode is FilterMode.ALL:
            return True
        return edge.totalFlow >= self.threshold

    def label(self) -> str:
        if self.mode is FilterMode.ALL:
            return "All Flows"
        return f"Major Flows (≥{self.threshold})"


def on_filter_change(state: HighlightState, new_filter: FlowFilter):
    """Switching the edge subset also clears any highlight."""
    return HighlightState.none(), new_filter


@dataclass(frozen=True)
class HighlightView:
    focus: Optional[str] = None
    highlighted_edges: FrozenSet[tuple] = field(default_factory=frozenset)
    dimmed_edges: FrozenSet[tuple] = field(default_factory=frozenset)
    dimmed_nodes: FrozenSet[str] = field(default_factory=frozenset)

    def isActive(self) -> bool:
        return self.focus is not None


def highlight_classes(state: HighlightState, edges: Iterable, node_ids: Iterable[str],
                      neighbors: Optional[Iterable[str]] = None) -> HighlightView:
    """
    Edge and node classes for the focused entity.

    Edge classes are over the visible `edges`: those touching the focus are
    highlighted, all others dimmed. Node dimming follows `neighbors`, the
    ids joined to the focus by any edge whether shown or not; without it
    only the visible edges count.
    """
    focus = state.focus()
    if focus is None:
        return HighlightView()

    highlighted = set()
    dimmed = set()
    connected = {focus}
    for e in edges:
        if e.touches(focus):
            highlighted.add(e.key())
            connected.add(e.targetId if e.sourceId == focus else e.sourceId)
        else:
            dimmed.add(e.key())
    if neighbors is not None:
        connected.update(neighbors)

    dimmed_nodes = frozenset(n for n in node_ids if n not in connected)
    return HighlightView(focus, frozenset(highlighted), frozenset(dimmed), dimmed_nodes)
