import pandas as pd

from .board import TagBoard


def board_frame(board: TagBoard) -> pd.DataFrame:
    """Return one row per tag with its page, visibility and selection."""
    rows = [
        {
            "Index": index,
            "Label": tag.label,
            "Page": board.page_of(index),
            "Visible": board.is_visible(index),
            "Selected": tag.selected,
        }
        for index, tag in enumerate(board.tags)
    ]
    return pd.DataFrame(rows, columns=["Index", "Label", "Page", "Visible", "Selected"])


def selection_summary(board: TagBoard) -> str:
    """Return a short sentence listing the selected tags."""
    selected = board.selected_labels()
    if not selected:
        return "No tags selected"
    return f"Selected tags: {', '.join(selected)}"
