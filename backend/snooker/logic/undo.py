"""Snapshot-based undo for the frame in play."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from snooker.logic.history import HistoryLedger
from snooker.logic.state import GameState

logger = structlog.get_logger()


@dataclass(frozen=True)
class Snapshot:
    """State and history as they were before one mutating operation.

    Both members are frozen models, so holding references is equivalent
    to holding deep copies.
    """

    state: GameState
    history: HistoryLedger


@dataclass
class UndoStack:
    """LIFO of snapshots, emptied whenever a frame ends, restarts or the match resets."""

    _snapshots: list[Snapshot] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)

    def push(self, state: GameState, history: HistoryLedger) -> None:
        self._snapshots.append(Snapshot(state=state, history=history))

    def pop(self) -> Snapshot | None:
        """Remove and return the most recent snapshot, or None when empty."""
        if not self._snapshots:
            return None
        return self._snapshots.pop()

    def clear(self) -> None:
        if self._snapshots:
            logger.debug("undo stack cleared", depth=len(self._snapshots))
        self._snapshots.clear()
