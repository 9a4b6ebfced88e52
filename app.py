# app.py
import streamlit as st

from errors import NetworkDataError
from interaction import (
    FlowFilter, HighlightState, on_filter_change, on_pick, on_reset
)
from network import MigrationNetwork
from plotly_view import build_figure, picked_node_ids
from sample_data import sample_entities, sample_records

st.set_page_config(page_title="Major Migration Network", layout="wide")

# Session state
if 'network' not in st.session_state:
    try:
        st.session_state.network = MigrationNetwork.build(sample_entities(), sample_records())
    except NetworkDataError as e:
        st.error(f"Could not build the network: {e}")
        st.stop()
if 'highlight' not in st.session_state:
    st.session_state.highlight = HighlightState.none()
if 'flow_filter' not in st.session_state:
    st.session_state.flow_filter = FlowFilter.all(st.session_state.network.config.major_flow_threshold)
if 'plot_nonce' not in st.session_state:
    st.session_state.plot_nonce = 0

net: MigrationNetwork = st.session_state.network
threshold = net.config.major_flow_threshold

def set_filter(new_filter: FlowFilter):
    st.session_state.highlight, st.session_state.flow_filter = on_filter_change(
        st.session_state.highlight, new_filter
    )

def handle_pick():
    key = f"network_plot_{st.session_state.plot_nonce}"
    event = st.session_state[key]
    picked = picked_node_ids(event.selection.points)
    st.session_state.highlight = on_pick(st.session_state.highlight, picked)
    # A fresh chart key drops the kept selection, so clicking the same node
    # again is a new event (which toggles the selection off)
    st.session_state.plot_nonce += 1

st.markdown("## Major Migration Network")
st.caption(
    "Circle size = Graduates | Line color = Division receiving more students | "
    "Hover for details | Click a major to highlight"
)

# UI
col_btns, col_plot = st.columns([1, 4], gap="large")

with col_btns:
    st.markdown("### Controls")
    if st.button("All Flows"):
        set_filter(FlowFilter.all(threshold))
    if st.button(f"Major Flows (≥{threshold})"):
        set_filter(FlowFilter.major(threshold))
    if st.button("Reset"):
        st.session_state.highlight = on_reset(st.session_state.highlight)
    st.divider()

    # Info
    stats = net.get_stats()
    shown = len(net.visibleEdges(st.session_state.flow_filter))
    focus = st.session_state.highlight.focus()
    st.markdown(
        f"Majors: {stats['entities']}  \n"
        f"Connections: {shown} of {stats['edges']} ({st.session_state.flow_filter.label()})  \n"
        f"Students who switched: {stats['total_flow']}  \n"
        f"Focus: {focus or '-'}"
    )

with col_plot:
    fig = build_figure(net, st.session_state.flow_filter, st.session_state.highlight)
    st.plotly_chart(
        fig, use_container_width=True,
        on_select=handle_pick, selection_mode="points",
        key=f"network_plot_{st.session_state.plot_nonce}",
    )
