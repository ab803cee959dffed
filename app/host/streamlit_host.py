"""Host UI state rendered by the Streamlit results screen.

Streamlit redraws the whole page on every interaction, so the host does not
hold widgets.  It records what the bridge asked for (which tags exist, which
are visible or emphasised, whether the menu is open) and ``app.py`` draws
from that record on each run.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from pydantic import BaseModel


class WidgetSpec(BaseModel):
    index: int
    label: str
    visible: bool = True
    emphasized: bool = False


class StreamlitHost:
    def __init__(self) -> None:
        self.widgets: Dict[str, WidgetSpec] = {}
        self.menu_open = False
        self.can_page_up = False
        self.can_page_down = False
        self._confirm_callbacks: List[Callable[[], None]] = []

    def render_tag(self, index: int, label: str) -> str:
        key = f"tag_{index}"
        self.widgets[key] = WidgetSpec(index=index, label=label)
        return key

    def set_visible(self, handle: str, visible: bool) -> None:
        self.widgets[handle].visible = visible

    def set_emphasis(self, handle: str, emphasized: bool) -> None:
        self.widgets[handle].emphasized = emphasized

    def set_navigation(self, can_page_up: bool, can_page_down: bool) -> None:
        self.can_page_up = can_page_up
        self.can_page_down = can_page_down

    def open_menu(self) -> None:
        self.menu_open = True

    def close_menu(self) -> None:
        self.menu_open = False

    def bind_confirm(self, callback: Callable[[], None]) -> None:
        if callback not in self._confirm_callbacks:
            self._confirm_callbacks.append(callback)

    def unbind_confirm(self, callback: Callable[[], None]) -> None:
        if callback in self._confirm_callbacks:
            self._confirm_callbacks.remove(callback)

    @property
    def confirm_listeners(self) -> int:
        return len(self._confirm_callbacks)

    def click_confirm(self) -> None:
        """The results screen "OK" button was pressed."""
        for callback in list(self._confirm_callbacks):
            callback()

    def visible_widgets(self) -> List[WidgetSpec]:
        return sorted(
            (w for w in self.widgets.values() if w.visible), key=lambda w: w.index
        )

    def clear(self) -> None:
        self.widgets = {}
        self.menu_open = False
        self.can_page_up = False
        self.can_page_down = False
