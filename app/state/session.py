from typing import Optional

from maptags.bridge import PresentationBridge
from maptags.config import Settings
from maptags.lifecycle import BuildOutcome
from maptags.notify import HttpTagStateSink
from maptags.session import TagSession

from app.backend.mock_sink import RecordingSink
from app.host.streamlit_host import StreamlitHost


def ensure_session_state(st, settings: Optional[Settings] = None) -> None:
    """Create this browser session's tag session, host and bridge once."""
    settings = settings or Settings()
    if "tag_session" not in st.session_state:
        st.session_state.tag_session = TagSession(
            settings.catalogue(), page_size=settings.page_size
        )
    if "tag_host" not in st.session_state:
        st.session_state.tag_host = StreamlitHost()
    if "tag_sink" not in st.session_state:
        if settings.notify_url:
            st.session_state.tag_sink = HttpTagStateSink(
                settings.notify_url, retries=settings.notify_retries
            )
        else:
            st.session_state.tag_sink = RecordingSink()
    if "tag_bridge" not in st.session_state:
        st.session_state.tag_bridge = PresentationBridge(
            st.session_state.tag_session,
            st.session_state.tag_host,
            st.session_state.tag_sink,
            min_record_id_length=settings.min_record_id_length,
        )
    if "tag_first_activation" not in st.session_state:
        st.session_state.tag_first_activation = True


def activate(st, record_id: Optional[str]):
    first = st.session_state.tag_first_activation
    outcome = st.session_state.tag_bridge.activate_record(first, record_id)
    if outcome is BuildOutcome.built:
        st.session_state.tag_host.open_menu()
    st.session_state.tag_first_activation = False
    return outcome


def end_session(st) -> None:
    """Dismiss the results screen and drop the rendered tags."""
    st.session_state.tag_bridge.dismiss()
    st.session_state.tag_host.clear()
