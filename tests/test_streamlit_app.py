from types import SimpleNamespace

from maptags import BuildOutcome, GateState
from maptags.config import Settings
from maptags.notify import HttpTagStateSink

import app
from app.backend.mock_sink import RecordingSink
from app.host.streamlit_host import StreamlitHost, WidgetSpec
from app.state.session import activate, end_session, ensure_session_state


class Session(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def fake_st():
    return SimpleNamespace(session_state=Session())


def test_ensure_session_state_creates_once():
    st = fake_st()
    ensure_session_state(st)
    bridge = st.session_state.tag_bridge
    ensure_session_state(st)
    assert st.session_state.tag_bridge is bridge
    assert isinstance(st.session_state.tag_host, StreamlitHost)
    assert isinstance(st.session_state.tag_sink, RecordingSink)
    assert st.session_state.tag_first_activation is True


def test_sessions_are_independent():
    a, b = fake_st(), fake_st()
    ensure_session_state(a)
    ensure_session_state(b)
    assert a.session_state.tag_session is not b.session_state.tag_session


def test_settings_choose_http_sink_and_catalogue():
    st = fake_st()
    settings = Settings(tags=["A", "B", "C"], page_size=2, notify_url="http://localhost/tags")
    ensure_session_state(st, settings)
    assert isinstance(st.session_state.tag_sink, HttpTagStateSink)
    assert st.session_state.tag_session.catalogue.labels == ["A", "B", "C"]
    assert st.session_state.tag_session.board.page_size == 2


def test_activate_opens_menu_and_records_notices():
    st = fake_st()
    ensure_session_state(st)
    host = st.session_state.tag_host
    bridge = st.session_state.tag_bridge

    assert activate(st, "f" * 32) is BuildOutcome.built
    assert st.session_state.tag_first_activation is False
    assert host.menu_open
    assert [w.label for w in host.visible_widgets()][:2] == ["Flow", "Streams"]
    assert len(host.visible_widgets()) == 10
    assert (host.can_page_up, host.can_page_down) == (False, True)

    bridge.apply_initial_visuals()
    bridge.click_tag(0)
    assert host.widgets["tag_0"].emphasized
    assert st.session_state.tag_sink.load() == {"Flow": True}

    bridge.page_down()
    assert [w.index for w in host.visible_widgets()] == [10, 11, 12]

    assert activate(st, "f" * 32) is BuildOutcome.already_ready


def test_short_record_gets_no_menu():
    st = fake_st()
    ensure_session_state(st)
    assert activate(st, "practice") is BuildOutcome.skipped
    assert not st.session_state.tag_host.menu_open
    assert st.session_state.tag_host.widgets == {}


def test_ok_button_closes_menu_once():
    st = fake_st()
    ensure_session_state(st)
    host = st.session_state.tag_host
    activate(st, "f" * 40)
    assert host.confirm_listeners == 1
    host.click_confirm()
    assert not host.menu_open
    assert host.confirm_listeners == 0
    host.open_menu()
    host.click_confirm()
    assert host.menu_open


def test_end_session_clears_host():
    st = fake_st()
    ensure_session_state(st)
    activate(st, "f" * 40)
    st.session_state.tag_bridge.click_tag(3)
    end_session(st)
    assert st.session_state.tag_session.gate.state is GateState.idle
    assert st.session_state.tag_host.widgets == {}
    assert not st.session_state.tag_host.menu_open

    assert activate(st, "f" * 40) is BuildOutcome.built
    assert st.session_state.tag_session.board.selected_labels() == []


def test_recording_sink_folds_latest_state():
    st = fake_st()
    ensure_session_state(st)
    activate(st, "f" * 40)
    bridge = st.session_state.tag_bridge
    bridge.click_tag(1)
    bridge.click_tag(2)
    bridge.click_tag(1)
    sink = st.session_state.tag_sink
    assert len(sink.notices) == 3
    assert sink.load() == {"Streams": False, "Inventive Patterns": True}
    sink.reset()
    assert sink.load() == {}


def test_tag_rows_pairs_widgets():
    widgets = [WidgetSpec(index=i, label=f"T{i}") for i in range(3)]
    rows = app.tag_rows(widgets)
    assert [[w.index for w in row] for row in rows] == [[0, 1], [2]]
    assert app.tag_rows([]) == []
    assert len(app.tag_rows(widgets, columns=3)) == 1


def test_new_record_id_is_eligible():
    record_id = app.new_record_id()
    assert len(record_id) == 32
    assert record_id != app.new_record_id()
