from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, Field


class Tag(BaseModel):
    """A single toggleable tag on the board."""

    label: str
    selected: bool = False


class PageTransition(BaseModel):
    """Result of a page change.

    ``hidden`` lists the indices of the outgoing page and ``shown`` those of
    the incoming page.  Both are empty when the request did not move.
    """

    page: int
    hidden: List[int] = Field(default_factory=list)
    shown: List[int] = Field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.hidden or self.shown)

    def steps(self) -> Iterator[Tuple[int, bool]]:
        """Yield ``(index, visible)`` pairs, outgoing page first."""
        for index in self.hidden:
            yield index, False
        for index in self.shown:
            yield index, True


class TagStateNotice(BaseModel):
    """Payload describing a tag state change for a notification sink."""

    index: int
    label: str
    selected: bool
    record_id: Optional[str] = None
    # increases by one per toggle within a bridge; receivers keep the highest
    seq: int = 0
