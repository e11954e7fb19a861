"""Event types emitted while interviews and pipelines run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from clarify.model.category import StakeholderRole
from clarify.model.exchange import InterviewResult
from clarify.model.question import InterviewQuestion


class EventKind(Enum):
    QUESTION_ASKED = "question_asked"
    ANSWER_RECEIVED = "answer_received"
    FOLLOWUP_TRIGGERED = "followup_triggered"
    SESSION_COMPLETED = "session_completed"
    STAKEHOLDER_STARTED = "stakeholder_started"
    STAKEHOLDER_COMPLETED = "stakeholder_completed"
    PIPELINE_COMPLETED = "pipeline_completed"


# --- Session progress events ---


@dataclass(frozen=True)
class QuestionAsked:
    kind: ClassVar[EventKind] = EventKind.QUESTION_ASKED
    question: InterviewQuestion
    questions_remaining: int


@dataclass(frozen=True)
class AnswerReceived:
    kind: ClassVar[EventKind] = EventKind.ANSWER_RECEIVED
    question: InterviewQuestion
    answer: str
    questions_remaining: int


@dataclass(frozen=True)
class FollowUpTriggered:
    kind: ClassVar[EventKind] = EventKind.FOLLOWUP_TRIGGERED
    question: InterviewQuestion
    questions_remaining: int


@dataclass(frozen=True)
class SessionCompleted:
    kind: ClassVar[EventKind] = EventKind.SESSION_COMPLETED
    questions_remaining: int = 0


ProgressEvent = QuestionAsked | AnswerReceived | FollowUpTriggered | SessionCompleted


# --- Pipeline events ---


@dataclass(frozen=True)
class StakeholderStarted:
    kind: ClassVar[EventKind] = EventKind.STAKEHOLDER_STARTED
    role: StakeholderRole
    message: str = ""


@dataclass(frozen=True)
class StakeholderCompleted:
    kind: ClassVar[EventKind] = EventKind.STAKEHOLDER_COMPLETED
    role: StakeholderRole
    result: InterviewResult
    message: str = ""


@dataclass(frozen=True)
class PipelineCompleted:
    kind: ClassVar[EventKind] = EventKind.PIPELINE_COMPLETED
    roles: tuple[StakeholderRole, ...] = field(default_factory=tuple)
    message: str = ""
