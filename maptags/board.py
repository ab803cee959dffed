"""Paginated toggle board.

The board keeps the selection state of every tag in catalogue order and a
1-indexed current page.  Visibility is never stored: a tag is visible when
its index falls inside the current page's slice, so selection survives any
amount of paging.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Iterable, List, Set

from .catalogue import TagCatalogue
from .errors import IndexOutOfRangeError, InvalidStateError
from .models import PageTransition, Tag

logger = logging.getLogger(__name__)

PAGE_SIZE = 10

ToggleListener = Callable[[int, bool], None]


class TagBoard:
    """Selection state and pagination for an ordered list of tags."""

    def __init__(self, page_size: int = PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self._tags: List[Tag] = []
        self._current_page = 1
        self._initialized = False
        self._listeners: List[ToggleListener] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self, labels: Iterable[str]) -> None:
        """Build the tags from *labels*, all unselected, on page 1.

        Parameters
        ----------
        labels:
            Tag labels in page order.  They are validated through
            :class:`~maptags.catalogue.TagCatalogue`, so blank or duplicate
            labels raise ``pydantic.ValidationError``.

        Raises
        ------
        InvalidStateError
            If the board was already initialized and not reset since.
        """

        if self._initialized:
            raise InvalidStateError(
                "board already initialized; reset it first",
                {"tags": len(self._tags)},
            )
        catalogue = TagCatalogue(labels=list(labels))
        self._tags = [Tag(label=label) for label in catalogue.labels]
        self._current_page = 1
        self._initialized = True

    def reset(self) -> None:
        self._tags = []
        self._current_page = 1
        self._initialized = False

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_listener(self, listener: ToggleListener) -> None:
        """Register *listener* to be called as ``listener(index, selected)``."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: ToggleListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._tags)

    @property
    def tags(self) -> List[Tag]:
        """Copies of the tags; mutate state through :meth:`toggle` only."""
        return [tag.model_copy() for tag in self._tags]

    def label(self, index: int) -> str:
        self._check_index(index)
        return self._tags[index].label

    def is_selected(self, index: int) -> bool:
        self._check_index(index)
        return self._tags[index].selected

    def selection(self) -> List[bool]:
        return [tag.selected for tag in self._tags]

    def selected_labels(self) -> List[str]:
        return [tag.label for tag in self._tags if tag.selected]

    def toggle(self, index: int) -> bool:
        """Flip the selection of the tag at *index* and return the new value."""

        self._check_index(index)
        tag = self._tags[index]
        tag.selected = not tag.selected
        logger.info(
            json.dumps(
                {
                    "event": "tag_toggled",
                    "index": index,
                    "label": tag.label,
                    "selected": tag.selected,
                }
            )
        )
        for listener in list(self._listeners):
            listener(index, tag.selected)
        return tag.selected

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tags):
            raise IndexOutOfRangeError(index, len(self._tags))

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def max_page(self) -> int:
        # ceil without floats; an empty board still has one page
        return max(1, -(-len(self._tags) // self.page_size))

    def page_of(self, index: int) -> int:
        self._check_index(index)
        return index // self.page_size + 1

    def page_indices(self, page: int) -> range:
        """Indices shown on *page*, in catalogue order."""
        if not 1 <= page <= self.max_page:
            raise IndexOutOfRangeError(page, self.max_page, what="page")
        start = (page - 1) * self.page_size
        return range(start, min(start + self.page_size, len(self._tags)))

    def visible_indices(self) -> Set[int]:
        return set(self.page_indices(self._current_page))

    def is_visible(self, index: int) -> bool:
        self._check_index(index)
        return self.page_of(index) == self._current_page

    def is_first_page(self) -> bool:
        return self._current_page == 1

    def is_last_page(self) -> bool:
        return self._current_page == self.max_page

    def go_to_page(self, page_delta: int) -> PageTransition:
        """Move by *page_delta* pages, clamped to ``[1, max_page]``.

        Returns
        -------
        PageTransition
            The resulting page with the indices that were hidden and then
            shown.  Requests that cannot move return empty index lists.
        """

        target = min(max(self._current_page + page_delta, 1), self.max_page)
        if target == self._current_page:
            return PageTransition(page=self._current_page)
        hidden = list(self.page_indices(self._current_page))
        shown = list(self.page_indices(target))
        previous = self._current_page
        self._current_page = target
        logger.info(
            json.dumps(
                {
                    "event": "page_changed",
                    "from": previous,
                    "to": target,
                    "max_page": self.max_page,
                }
            )
        )
        return PageTransition(page=target, hidden=hidden, shown=shown)
