"""Glue between a :class:`~maptags.session.TagSession` and a host UI.

The bridge renders one widget per tag after a build, mirrors board changes
onto those widgets and turns host events (activation, clicks, dismissal)
into board and gate operations.  It only borrows the session's board and
gate; the session owns them.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Hashable, List, Optional, Protocol

from .errors import InvalidStateError, PreconditionNotMetError
from .lifecycle import BuildOutcome
from .models import PageTransition, TagStateNotice
from .notify import NullTagStateSink, TagStateSink
from .session import TagSession

logger = logging.getLogger(__name__)

# Result records with shorter identifiers are transient (practice runs and
# the like) and never get a tag menu.
MIN_RECORD_ID_LENGTH = 32


class HostUI(Protocol):
    """Calls the bridge makes into the hosting UI toolkit."""

    def render_tag(self, index: int, label: str) -> Hashable:
        ...

    def set_visible(self, handle: Hashable, visible: bool) -> None:
        ...

    def set_emphasis(self, handle: Hashable, emphasized: bool) -> None:
        ...

    def set_navigation(self, can_page_up: bool, can_page_down: bool) -> None:
        ...

    def close_menu(self) -> None:
        ...

    def bind_confirm(self, callback: Callable[[], None]) -> None:
        ...

    def unbind_confirm(self, callback: Callable[[], None]) -> None:
        ...


def is_eligible_record(record_id: Optional[str], min_length: int = MIN_RECORD_ID_LENGTH) -> bool:
    return record_id is not None and len(record_id) >= min_length


def require_eligible(eligible: bool, record_id: Optional[str] = None) -> None:
    if not eligible:
        raise PreconditionNotMetError(
            "activation is not eligible for a tag menu",
            {"record_id": record_id},
        )


class PresentationBridge:
    def __init__(
        self,
        session: TagSession,
        host: HostUI,
        sink: Optional[TagStateSink] = None,
        min_record_id_length: int = MIN_RECORD_ID_LENGTH,
    ) -> None:
        self._board = session.board
        self._gate = session.gate
        self.host = host
        self.sink = sink or NullTagStateSink()
        self.min_record_id_length = min_record_id_length
        self.record_id: Optional[str] = None
        self._handles: List[Hashable] = []
        self._visuals_ready = False
        self._confirm_listener = self.confirm
        self._confirm_bound = False
        self._seq = 0
        self._board.add_listener(self._on_tag_toggled)

    @property
    def handles(self) -> List[Hashable]:
        return list(self._handles)

    @property
    def visuals_ready(self) -> bool:
        return self._visuals_ready

    @property
    def confirm_bound(self) -> bool:
        return self._confirm_bound

    # ------------------------------------------------------------------
    # Host lifecycle
    # ------------------------------------------------------------------

    def activate(self, first_activation: bool, eligible: bool) -> BuildOutcome:
        """Handle the results screen being shown.

        Builds and renders the board the first time an eligible activation
        arrives in a session.  An ineligible activation settles the session
        without building so later activations are not re-examined until the
        screen is dismissed.
        """

        if self._gate.initialized or self._gate.initializing:
            return self._gate.request_initialize()
        try:
            require_eligible(eligible, self.record_id)
        except PreconditionNotMetError as e:
            logger.info(
                json.dumps(
                    {
                        "event": "activation_skipped",
                        "first_activation": first_activation,
                        "reason": e.message,
                        "record_id": self.record_id,
                    }
                )
            )
            return self._gate.mark_ready()

        outcome = self._gate.request_initialize()
        if outcome is BuildOutcome.built:
            self._render()
        return outcome

    def activate_record(self, first_activation: bool, record_id: Optional[str]) -> BuildOutcome:
        """Like :meth:`activate`, deciding eligibility from *record_id*."""
        if not (self._gate.initialized or self._gate.initializing):
            self.record_id = record_id
        eligible = is_eligible_record(record_id, self.min_record_id_length)
        return self.activate(first_activation, eligible)

    def dismiss(self) -> None:
        """Handle the results screen closing; ends the session."""
        self._gate.reset()
        self._handles = []
        self._visuals_ready = False
        self.record_id = None

    def apply_initial_visuals(self) -> None:
        """Second build phase, run by the host once its layout has settled."""
        self._require_built()
        for index, selected in enumerate(self._board.selection()):
            self.host.set_emphasis(self._handles[index], selected)
        self._visuals_ready = True

    def _render(self) -> None:
        self._handles = [
            self.host.render_tag(index, self._board.label(index))
            for index in range(len(self._board))
        ]
        for index, handle in enumerate(self._handles):
            self.host.set_visible(handle, self._board.is_visible(index))
        self._sync_navigation()
        if not self._confirm_bound:
            self.host.bind_confirm(self._confirm_listener)
            self._confirm_bound = True
        self._visuals_ready = False

    # ------------------------------------------------------------------
    # Clicks
    # ------------------------------------------------------------------

    def click_tag(self, index: int) -> bool:
        self._require_built()
        return self._board.toggle(index)

    def page_up(self) -> PageTransition:
        return self._change_page(-1)

    def page_down(self) -> PageTransition:
        return self._change_page(1)

    def close(self) -> None:
        self.host.close_menu()

    def confirm(self) -> None:
        """The results screen "OK" control was clicked."""
        if not self._confirm_bound:
            return
        self.host.close_menu()
        self.host.unbind_confirm(self._confirm_listener)
        self._confirm_bound = False

    def _change_page(self, delta: int) -> PageTransition:
        self._require_built()
        transition = self._board.go_to_page(delta)
        for index, visible in transition.steps():
            self.host.set_visible(self._handles[index], visible)
        self._sync_navigation()
        return transition

    def _sync_navigation(self) -> None:
        self.host.set_navigation(
            not self._board.is_first_page(), not self._board.is_last_page()
        )

    def _require_built(self) -> None:
        if not self._gate.built:
            raise InvalidStateError(
                "tag board has not been built for this session",
                {"state": self._gate.state.value},
            )

    # ------------------------------------------------------------------
    # Board events
    # ------------------------------------------------------------------

    def _on_tag_toggled(self, index: int, selected: bool) -> None:
        self._seq += 1
        if self._visuals_ready:
            self.host.set_emphasis(self._handles[index], selected)
        notice = TagStateNotice(
            index=index,
            label=self._board.label(index),
            selected=selected,
            record_id=self.record_id,
            seq=self._seq,
        )
        self._notify(notice)

    def _notify(self, notice: TagStateNotice) -> Any:
        try:
            return self.sink.notify_tag_state(notice)
        except Exception as e:  # sink failures never reach the board
            logger.warning(
                json.dumps(
                    {"event": "notify_error", "index": notice.index, "error": str(e)}
                )
            )
            return None
