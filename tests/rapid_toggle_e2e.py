from types import SimpleNamespace
import pathlib
import sys


class Session(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from maptags.config import Settings  # noqa: E402
from app.state.session import activate, ensure_session_state  # noqa: E402


def main() -> None:
    st = SimpleNamespace(session_state=Session())
    labels = [f"Tag {i}" for i in range(35)]
    ensure_session_state(st, Settings(tags=labels))
    activate(st, "e" * 32)
    bridge = st.session_state.tag_bridge
    bridge.apply_initial_visuals()
    for step in range(200):
        if step % 14 == 0:
            bridge.page_down()
        elif step % 7 == 0:
            bridge.page_up()
        board = st.session_state.tag_session.board
        visible = sorted(board.visible_indices())
        bridge.click_tag(visible[step % len(visible)])
    board = st.session_state.tag_session.board
    expected = {tag.label: tag.selected for tag in board.tags}
    received = st.session_state.tag_sink.load()
    assert all(expected[label] == sel for label, sel in received.items()), "sink lost toggles"
    host = st.session_state.tag_host
    assert all(
        host.widgets[f"tag_{i}"].emphasized == tag.selected for i, tag in enumerate(board.tags)
    ), "emphasis drifted from board state"


if __name__ == "__main__":
    main()
