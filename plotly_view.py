# plotly_view.py

import math
from typing import List

import plotly.graph_objects as go

from interaction import FlowFilter, HighlightState, highlight_classes
from network import MigrationNetwork

EDGE_OPACITY = 0.4
EDGE_OPACITY_HIGHLIGHT = 0.8
EDGE_OPACITY_DIM = 0.1
NODE_OPACITY_DIM = 0.3
CURVE_STEPS = 24


def hex_to_rgba(color: str, alpha: float) -> str:
    c = color.lstrip("#")
    r, g, b = int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16)
    return f"rgba({r},{g},{b},{alpha})"


def edge_width(total_flow: int, highlighted: bool = False) -> float:
    if highlighted:
        return 3.0
    return 1.0 + math.sqrt(total_flow) / 2.0


def edge_hover_text(e) -> str:
    return (
        f"<b>{e.sourceId} ↔ {e.targetId}</b><br>"
        f"{e.sourceId} → {e.targetId}: {e.flowSourceToTarget} students<br>"
        f"{e.targetId} → {e.sourceId}: {e.flowTargetToSource} students<br>"
        f"<b>Total: {e.totalFlow} students</b>"
    )


def node_hover_text(n) -> str:
    sign = "+" if n.net > 0 else ""
    return (
        f"<b>{n.label}</b> {n.name}<br>"
        f"Graduates: {n.weight:g}<br>"
        f"Net change: {sign}{n.net}<br>"
        f"Division: {n.category}"
    )


def picked_node_ids(points) -> List[str]:
    """Entity ids from selected points; only the node trace carries customdata."""
    picked = []
    for p in points:
        cd = p.get("customdata")
        if isinstance(cd, (list, tuple)):
            cd = cd[0] if cd else None
        if cd:
            picked.append(cd)
    return picked


def build_figure(network: MigrationNetwork, flow_filter: FlowFilter = None,
                 state: HighlightState = None, height: int = 750) -> go.Figure:
    flow_filter = flow_filter or FlowFilter.all(network.config.major_flow_threshold)
    state = state or HighlightState.none()

    nodes = network.nodes()
    edges = network.visibleEdges(flow_filter)
    view = highlight_classes(state, edges, [n.id for n in nodes], network.neighbors(state.focus()))

    fig = go.Figure()

    # Draw edges (one trace each: Plotly lines carry a single color/width)
    for e in edges:
        key = e.key()
        if key in view.highlighted_edges:
            alpha, width = EDGE_OPACITY_HIGHLIGHT, edge_width(e.totalFlow, highlighted=True)
        elif key in view.dimmed_edges:
            alpha, width = EDGE_OPACITY_DIM, edge_width(e.totalFlow)
        else:
            alpha, width = EDGE_OPACITY, edge_width(e.totalFlow)
        xs, ys = network.edgePath(e).sample(CURVE_STEPS)
        fig.add_trace(go.Scatter(
            x=xs, y=ys,
            mode="lines",
            line=dict(color=hex_to_rgba(e.color, alpha), width=width),
            hoverinfo="text",
            text=edge_hover_text(e),
            hoveron="points",
            showlegend=False,
        ))

    # Draw nodes
    fig.add_trace(go.Scatter(
        x=[n.x for n in nodes],
        y=[n.y for n in nodes],
        mode="markers+text",
        text=[n.label for n in nodes],
        textposition="middle center",
        textfont=dict(size=11, color="black"),
        hovertext=[node_hover_text(n) for n in nodes],
        hoverinfo="text",
        customdata=[n.id for n in nodes],
        marker=dict(
            size=[2.0 * n.radiusSize for n in nodes],
            color=[n.color for n in nodes],
            opacity=[NODE_OPACITY_DIM if n.id in view.dimmed_nodes else 1.0 for n in nodes],
            line=dict(width=1.5, color="black"),
        ),
        showlegend=False,
    ))

    # Division labels
    labels = network.labels()
    fig.add_trace(go.Scatter(
        x=[l.x for l in labels],
        y=[l.y for l in labels],
        mode="text",
        text=[l.text for l in labels],
        textfont=dict(size=18, color=[l.color for l in labels]),
        hoverinfo="skip",
        showlegend=False,
    ))

    fig.update_yaxes(scaleanchor="x", scaleratio=1)
    fig.update_layout(
        margin=dict(l=20, r=20, t=10, b=10),
        # Screen-style coordinates (y down), same as the desktop scene
        xaxis=dict(visible=False), yaxis=dict(visible=False, autorange="reversed"),
        plot_bgcolor="white",
        dragmode="pan", height=height,
    )
    return fig


