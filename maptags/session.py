from __future__ import annotations

from typing import Optional

from .board import PAGE_SIZE, TagBoard
from .catalogue import TagCatalogue
from .lifecycle import LifecycleGate


class TagSession:
    """Owns the board and its build gate for one results-screen session.

    The gate's builder loads this session's catalogue into the board.  A new
    session object is created per host screen; nothing here is shared
    process-wide.
    """

    def __init__(
        self,
        catalogue: Optional[TagCatalogue] = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.catalogue = catalogue or TagCatalogue.default()
        self.board = TagBoard(page_size=page_size)
        self.gate = LifecycleGate(self.board, self._build)

    def _build(self, board: TagBoard) -> None:
        board.initialize(self.catalogue.labels)
