import uuid
from typing import List, Sequence

import streamlit as st

from maptags import board_frame, selection_summary
from maptags.config import apply_config, load_config
from app.diag.tracer import trace
from app.host.streamlit_host import StreamlitHost, WidgetSpec
from app.state.session import activate, end_session, ensure_session_state

CONFIG = load_config()

# Tags are laid out two per row on the menu.
COLUMNS = 2


def tag_rows(widgets: Sequence[WidgetSpec], columns: int = COLUMNS) -> List[List[WidgetSpec]]:
    """Split the visible widgets of a page into grid rows.

    Parameters
    ----------
    widgets:
        Widgets in display order.
    columns:
        Number of tags per row.  A trailing row may be shorter; the menu
        centres a lone tag.

    Returns
    -------
    list of list
        Rows of at most ``columns`` widgets.
    """

    return [list(widgets[i : i + columns]) for i in range(0, len(widgets), columns)]


def new_record_id() -> str:
    """Return an identifier shaped like a persisted level record."""
    return uuid.uuid4().hex


def render_menu(bridge, host: StreamlitHost) -> None:
    st.subheader("Tags")
    st.button("▲", key="page_up", disabled=not host.can_page_up, on_click=bridge.page_up)
    for row in tag_rows(host.visible_widgets()):
        cols = st.columns(COLUMNS) if len(row) == COLUMNS else st.columns([1, 2, 1])[1:2]
        for col, widget in zip(cols, row):
            col.button(
                widget.label,
                key=f"btn_{widget.index}",
                type="primary" if widget.emphasized else "secondary",
                on_click=bridge.click_tag,
                args=(widget.index,),
                use_container_width=True,
            )
    st.button("▼", key="page_down", disabled=not host.can_page_down, on_click=bridge.page_down)
    st.button("Close", key="close_menu", on_click=bridge.close)


def main() -> None:
    st.set_page_config(page_title="Level Results", layout="wide")
    settings = apply_config(CONFIG)
    ensure_session_state(st, settings)

    session = st.session_state.tag_session
    host = st.session_state.tag_host
    bridge = st.session_state.tag_bridge

    st.title("Level Results")
    record_id = st.text_input(
        "Result record id",
        value=st.session_state.setdefault("record_id_default", new_record_id()),
        help=f"Records shorter than {settings.min_record_id_length} characters get no tag menu",
    )

    show, ok, leave = st.columns(3)
    if show.button("Show results"):
        outcome = activate(st, record_id)
        trace("activate", outcome=outcome.value, record_id=record_id)
    if ok.button("OK"):
        host.click_confirm()
        trace("confirm", menu_open=host.menu_open, listeners=host.confirm_listeners)
    if leave.button("Leave results screen"):
        end_session(st)
        st.session_state.pop("record_id_default", None)
        trace("dismiss", state=session.gate.state.value)

    if host.menu_open:
        render_menu(bridge, host)
        if session.gate.built and not bridge.visuals_ready:
            # emphasis is applied only after the first full layout pass
            bridge.apply_initial_visuals()

    st.divider()
    st.write(selection_summary(session.board))
    with st.expander("Board state"):
        st.dataframe(board_frame(session.board), hide_index=True, use_container_width=True)


if __name__ == "__main__":
    main()
