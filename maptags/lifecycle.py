"""One-shot build gate for a tag board session."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Callable

from .board import TagBoard
from .errors import InvalidStateError

logger = logging.getLogger(__name__)

Builder = Callable[[TagBoard], None]


class GateState(str, Enum):
    idle = "idle"
    initializing = "initializing"
    ready = "ready"


class BuildOutcome(str, Enum):
    """What a build request did."""

    built = "built"
    already_ready = "already_ready"
    in_progress = "in_progress"
    skipped = "skipped"

    @property
    def completed(self) -> bool:
        """True once the board has structurally settled for this session."""
        return self is not BuildOutcome.in_progress


class LifecycleGate:
    """Builds the board at most once per session.

    The gate moves ``idle -> initializing -> ready`` on a build request and
    back to ``idle`` on :meth:`reset`.  Requests made while ``ready`` or
    while a build is running are ignored.
    """

    def __init__(self, board: TagBoard, builder: Builder) -> None:
        self._board = board
        self._builder = builder
        self._state = GateState.idle
        self._built = False

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def initializing(self) -> bool:
        return self._state is GateState.initializing

    @property
    def initialized(self) -> bool:
        return self._state is GateState.ready

    @property
    def built(self) -> bool:
        """Whether the current session's board was actually built."""
        return self._built

    def request_initialize(self) -> BuildOutcome:
        if self._state is GateState.ready:
            return BuildOutcome.already_ready
        if self._state is GateState.initializing:
            logger.debug("build already in progress; request ignored")
            return BuildOutcome.in_progress

        self._state = GateState.initializing
        try:
            self._builder(self._board)
        except Exception:
            # leave nothing half-built behind
            self._board.reset()
            self._state = GateState.idle
            raise
        self._built = True
        self._state = GateState.ready
        logger.info(json.dumps({"event": "board_built", "tags": len(self._board)}))
        return BuildOutcome.built

    def mark_ready(self) -> BuildOutcome:
        """Settle the session without building anything."""

        if self._state is GateState.initializing:
            raise InvalidStateError("cannot skip a build that is already running")
        if self._state is GateState.ready:
            return BuildOutcome.already_ready
        self._state = GateState.ready
        logger.info(json.dumps({"event": "build_skipped"}))
        return BuildOutcome.skipped

    def reset(self) -> None:
        if self._state is GateState.initializing:
            raise InvalidStateError(
                "cannot reset while the board is being built",
                {"state": self._state.value},
            )
        previous = self._state
        self._state = GateState.idle
        self._built = False
        self._board.reset()
        logger.info(json.dumps({"event": "gate_reset", "from": previous.value}))
