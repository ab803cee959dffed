import streamlit as st

from maptags.config import apply_config, load_config
from app.diag.tracer import trace
from app.state.session import ensure_session_state

ensure_session_state(st, apply_config(load_config()))

session = st.session_state.tag_session
bridge = st.session_state.tag_bridge
sink = st.session_state.tag_sink

st.title("Debug: Tag Board")
st.caption("Instrumented page. Read-only view of the current session.")

trace(
    "render",
    state=session.gate.state.value,
    page=session.board.current_page,
    selected=len(session.board.selected_labels()),
)

server_state = sink.load() if hasattr(sink, "load") else {}
st.json(
    {
        "gate_state": session.gate.state.value,
        "built": session.gate.built,
        "record_id": bridge.record_id,
        "current_page": session.board.current_page,
        "max_page": session.board.max_page,
        "visible": sorted(session.board.visible_indices()),
        "selected": session.board.selected_labels(),
        "visuals_ready": bridge.visuals_ready,
        "confirm_bound": bridge.confirm_bound,
        "server_state": server_state,
    }
)
