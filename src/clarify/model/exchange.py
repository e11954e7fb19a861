"""Exchange model: recorded question/answer pairs and interview results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from clarify.model.analysis import Ambiguity, ScoredDecision
from clarify.model.category import StakeholderRole
from clarify.model.state import SessionState


@dataclass(frozen=True)
class InterviewExchange:
    """One answered question.

    ``question`` is a snapshot of the question text, not a reference to the
    question object.
    """

    question: str
    answer: str
    follow_up_triggered: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "question": self.question,
            "answer": self.answer,
            "follow_up_triggered": self.follow_up_triggered,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InterviewExchange:
        return cls(
            question=data["question"],
            answer=data["answer"],
            follow_up_triggered=data.get("follow_up_triggered", False),
        )


@dataclass(frozen=True)
class InterviewResult:
    """Immutable outcome of one stakeholder interview."""

    role: StakeholderRole
    exchanges: tuple[InterviewExchange, ...]
    state: SessionState
    identified_decisions: tuple[ScoredDecision, ...] = ()
    ambiguities: tuple[Ambiguity, ...] = ()
    started_at: datetime | None = None
    completed_at: datetime | None = None
    sequence: int = 0

    @property
    def completed(self) -> bool:
        return self.state is SessionState.COMPLETED
