"""
Linear undo/redo history of pattern snapshots.
"""

import logging
from typing import Optional

from .pattern import PatternState

logger = logging.getLogger(__name__)


class History:
    """
    Snapshots S[0..n) and a cursor c into them.

    S[0] is the state the session started from. Committing while c is not
    at the tail drops S[c+1:] before appending, so a redo tail never
    survives a new edit.
    """

    def __init__(self, initial: Optional[PatternState] = None):
        self._snapshots: list[PatternState] = [initial if initial is not None else PatternState()]
        self._cursor = 0

    @property
    def current(self) -> PatternState:
        return self._snapshots[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> list[PatternState]:
        return list(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def commit(self, state: PatternState) -> None:
        dropped = len(self._snapshots) - (self._cursor + 1)
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(state)
        self._cursor += 1
        logger.debug("Committed snapshot %d (dropped %d redo step(s))", self._cursor, dropped)

    def undo(self) -> PatternState:
        if self.can_undo():
            self._cursor -= 1
            logger.debug("Undo to snapshot %d", self._cursor)
        return self.current

    def redo(self) -> PatternState:
        if self.can_redo():
            self._cursor += 1
            logger.debug("Redo to snapshot %d", self._cursor)
        return self.current
