"""maptags package."""

from .board import PAGE_SIZE, TagBoard
from .bridge import (
    MIN_RECORD_ID_LENGTH,
    HostUI,
    PresentationBridge,
    is_eligible_record,
    require_eligible,
)
from .catalogue import DEFAULT_LABELS, TagCatalogue
from .config import Settings, apply_config, load_config
from .errors import (
    IndexOutOfRangeError,
    InvalidStateError,
    PreconditionNotMetError,
    TagBoardError,
)
from .lifecycle import BuildOutcome, GateState, LifecycleGate
from .models import PageTransition, Tag, TagStateNotice
from .notify import HttpTagStateSink, NullTagStateSink, TagStateSink
from .reporting import board_frame, selection_summary
from .session import TagSession

__all__ = [
    "PAGE_SIZE",
    "TagBoard",
    "MIN_RECORD_ID_LENGTH",
    "HostUI",
    "PresentationBridge",
    "is_eligible_record",
    "require_eligible",
    "DEFAULT_LABELS",
    "TagCatalogue",
    "Settings",
    "apply_config",
    "load_config",
    "IndexOutOfRangeError",
    "InvalidStateError",
    "PreconditionNotMetError",
    "TagBoardError",
    "BuildOutcome",
    "GateState",
    "LifecycleGate",
    "PageTransition",
    "Tag",
    "TagStateNotice",
    "HttpTagStateSink",
    "NullTagStateSink",
    "TagStateSink",
    "board_frame",
    "selection_summary",
    "TagSession",
]
