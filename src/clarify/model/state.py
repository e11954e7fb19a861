"""Interview session lifecycle states."""

from __future__ import annotations

from enum import StrEnum


class SessionState(StrEnum):
    IDLE = "idle"
    READY = "ready"
    IN_PROGRESS = "in_progress"
    AWAITING_ANSWER = "awaiting_answer"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.COMPLETED, SessionState.CANCELLED)
