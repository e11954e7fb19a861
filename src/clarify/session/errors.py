"""Interview session error types."""

from __future__ import annotations

from clarify.model.state import SessionState


class InterviewError(Exception):
    """Base error for interview session failures."""


class ConfigurationError(InterviewError):
    """Raised when a session is not set up to obtain answers."""


class InvalidStateError(InterviewError):
    """Raised when an operation is not allowed in the session's current state."""

    def __init__(self, operation: str, state: SessionState) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} in state: {state.value}")
