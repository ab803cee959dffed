from __future__ import annotations

from typing import Dict, List

from maptags.models import TagStateNotice

from app.diag.tracer import trace


class RecordingSink:
    """In-memory stand-in for the tag state server."""

    def __init__(self) -> None:
        self.notices: List[TagStateNotice] = []

    def reset(self) -> None:
        self.notices = []

    def notify_tag_state(self, notice: TagStateNotice) -> bool:
        self.notices.append(notice)
        trace("notify", index=notice.index, selected=notice.selected, count=len(self.notices))
        return True

    def load(self) -> Dict[str, bool]:
        """Fold the received notices into the last known state per label."""
        state: Dict[str, bool] = {}
        for notice in self.notices:
            state[notice.label] = notice.selected
        return state
