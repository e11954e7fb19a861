"""Explicit sequence counter handed to whatever needs sequential numbers."""

from __future__ import annotations


class SequenceCounter:
    """Hands out 1, 2, 3, ... starting after *start*.

    Owned by whichever component numbers things, such as a pipeline
    numbering interview results or a writer numbering decision records.
    Never shared through module state.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start

    @property
    def current(self) -> int:
        """The last number handed out (``start`` if none yet)."""
        return self._value

    def next(self) -> int:
        self._value += 1
        return self._value
