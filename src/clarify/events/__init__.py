"""Event system: bus and event types for interview progress."""

from clarify.events.bus import EventBus
from clarify.events.types import (
    AnswerReceived,
    EventKind,
    FollowUpTriggered,
    PipelineCompleted,
    ProgressEvent,
    QuestionAsked,
    SessionCompleted,
    StakeholderCompleted,
    StakeholderStarted,
)

__all__ = [
    "EventBus",
    "EventKind",
    "ProgressEvent",
    "QuestionAsked",
    "AnswerReceived",
    "FollowUpTriggered",
    "SessionCompleted",
    "StakeholderStarted",
    "StakeholderCompleted",
    "PipelineCompleted",
]
