"""Forward-only, restartable cursor over a result sequence."""

from __future__ import annotations

from collections.abc import Sequence

from searchlink.models.result import EXHAUSTED, CursorResult, ResolvedMatch


class ResultCursor:
    """Cursor over an immutable sequence of matches.

    The position starts at -1 (before the first match) and never goes past
    ``len(matches)``; once there, ``next()`` keeps returning ``EXHAUSTED``
    until ``first()`` restarts the traversal.
    """

    def __init__(self, matches: Sequence[ResolvedMatch] = ()) -> None:
        self._matches = tuple(matches)
        self._position = -1

    @property
    def position(self) -> int:
        return self._position

    def first(self) -> CursorResult:
        """Restart and return the first match."""
        self._position = -1
        return self.next()

    def next(self) -> CursorResult:
        """Advance and return the next match, or ``EXHAUSTED``."""
        if self._position < len(self._matches):
            self._position += 1
        if self._position >= len(self._matches):
            return EXHAUSTED
        return self._matches[self._position]
