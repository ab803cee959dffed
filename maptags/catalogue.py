"""Static catalogue of tag labels offered on the results screen."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, field_validator

# Labels shown on the stock results screen, in page order.
DEFAULT_LABELS: List[str] = [
    "Flow",
    "Streams",
    "Inventive Patterns",
    "Meme",
    "Jump Streams",
    "Beautiful Lighting",
    "Vision Blocks",
    "Bad Walls",
    "Overstated Difficulty",
    "Ugly",
    "Useless",
    "Entertaining",
    "Impossible",
]


class TagCatalogue(BaseModel):
    """Ordered, duplicate-free list of tag labels."""

    labels: List[str]

    @field_validator("labels")
    @classmethod
    def _check_labels(cls, value: List[str]) -> List[str]:
        cleaned = []
        seen = set()
        for label in value:
            label = label.strip()
            if not label:
                raise ValueError("tag labels must not be empty")
            if label in seen:
                raise ValueError(f"duplicate tag label: {label!r}")
            seen.add(label)
            cleaned.append(label)
        return cleaned

    @classmethod
    def default(cls) -> "TagCatalogue":
        return cls(labels=list(DEFAULT_LABELS))

    def __len__(self) -> int:
        return len(self.labels)
