"""Answer model: the two outcomes an answer source can produce."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Answered:
    """The question was answered. An empty text means "nothing to add"."""

    text: str

    @property
    def was_skipped(self) -> bool:
        return self.text == ""


@dataclass(frozen=True)
class Cancelled:
    """The answering side asked to abort the whole interview."""

    reason: str = ""


Answer = Answered | Cancelled
