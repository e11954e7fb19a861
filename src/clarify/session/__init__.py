"""Interview session state machine."""

from clarify.model.state import SessionState
from clarify.session.config import SessionConfig
from clarify.session.errors import ConfigurationError, InterviewError, InvalidStateError
from clarify.session.session import InterviewSession

__all__ = [
    "InterviewSession",
    "SessionConfig",
    "SessionState",
    "InterviewError",
    "ConfigurationError",
    "InvalidStateError",
]
