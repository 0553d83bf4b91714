"""Growable scratch rows shared by the dynamic programming engines."""

from __future__ import annotations

import logging
from typing import List


logger = logging.getLogger(__name__)


class Workspace:
    """One or more integer cost rows that only ever grow.

    Engine instances keep a workspace for their whole lifetime so repeated
    calls avoid reallocating; stateless calls build a fresh, empty workspace
    that is sized exactly on first use. Values past the active region of a
    call are stale and must be initialised by the engine before reading.
    Not safe to share between threads.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: int = 1, capacity: int = 0) -> None:
        if rows < 1:
            raise ValueError("Workspace needs at least one row")
        if capacity < 0:
            raise ValueError("Workspace capacity must be non-negative")
        self._rows: List[List[int]] = [[0] * capacity for _ in range(rows)]

    @property
    def capacity(self) -> int:
        return len(self._rows[0])

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def reserve(self, size: int) -> List[List[int]]:
        """Return the rows, replacing them with larger ones if ``size`` exceeds capacity."""

        if size > len(self._rows[0]):
            logger.debug(
                "Growing workspace from %d to %d cells (%d rows)",
                len(self._rows[0]),
                size,
                len(self._rows),
            )
            self._rows = [[0] * size for _ in self._rows]
        return self._rows

    def __repr__(self) -> str:
        return f"Workspace(rows={self.row_count}, capacity={self.capacity})"


__all__ = ["Workspace"]
