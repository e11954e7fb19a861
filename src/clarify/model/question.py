"""Question model: interview questions, follow-up triggers and question sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from clarify.model.category import Category, StakeholderRole


class QuestionType(StrEnum):
    CORE = "core"
    FOLLOW_UP = "follow-up"


@dataclass(frozen=True)
class FollowUpTrigger:
    """Condition under which a follow-up question fires.

    A trigger is tied to one core question. It fires when that question is
    answered and either ``always_ask`` is set or any keyword appears in the
    answer as a case-insensitive substring.
    """

    after_question_id: str
    trigger_keywords: tuple[str, ...] = ()
    always_ask: bool = False

    def fires_on(self, question_id: str, answer: str) -> bool:
        if question_id != self.after_question_id:
            return False
        if self.always_ask:
            return True
        lowered = answer.lower()
        return any(keyword.lower() in lowered for keyword in self.trigger_keywords)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"after_question_id": self.after_question_id}
        if self.trigger_keywords:
            data["trigger_keywords"] = list(self.trigger_keywords)
        if self.always_ask:
            data["always_ask"] = True
        return data


@dataclass(frozen=True)
class InterviewQuestion:
    """A single question posed during an interview."""

    id: str
    text: str
    type: QuestionType = QuestionType.CORE
    category: Category = Category.GENERAL
    priority: int = 0  # lower is asked first
    related_decision_title: str | None = None
    related_ambiguity_description: str | None = None
    follow_up_trigger: FollowUpTrigger | None = None

    @property
    def is_follow_up(self) -> bool:
        return self.type is QuestionType.FOLLOW_UP

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "type": self.type.value,
            "category": self.category.value,
            "priority": self.priority,
        }
        if self.related_decision_title is not None:
            data["related_decision_title"] = self.related_decision_title
        if self.related_ambiguity_description is not None:
            data["related_ambiguity_description"] = self.related_ambiguity_description
        if self.follow_up_trigger is not None:
            data["follow_up_trigger"] = self.follow_up_trigger.to_dict()
        return data


@dataclass(frozen=True)
class QuestionCountEstimate:
    min: int
    max: int


@dataclass(frozen=True)
class QuestionSet:
    """Core questions plus the pool of follow-ups they may trigger.

    Read-only once built. Every follow-up must be conditioned on a core
    question of the same set; construction fails otherwise.
    """

    role: StakeholderRole
    core_questions: tuple[InterviewQuestion, ...] = ()
    follow_up_questions: tuple[InterviewQuestion, ...] = ()
    estimated_question_count: QuestionCountEstimate = field(
        default_factory=lambda: QuestionCountEstimate(0, 0)
    )

    def __post_init__(self) -> None:
        core_ids = {q.id for q in self.core_questions}
        for follow_up in self.follow_up_questions:
            trigger = follow_up.follow_up_trigger
            if trigger is None:
                raise ValueError(f"Follow-up {follow_up.id!r} has no trigger")
            if trigger.after_question_id not in core_ids:
                raise ValueError(
                    f"Follow-up {follow_up.id!r} references unknown core question "
                    f"{trigger.after_question_id!r}"
                )

    def find_core(self, question_id: str) -> InterviewQuestion | None:
        for question in self.core_questions:
            if question.id == question_id:
                return question
        return None

    def find_follow_up(self, question_id: str) -> InterviewQuestion | None:
        for question in self.follow_up_questions:
            if question.id == question_id:
                return question
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "core_questions": [q.to_dict() for q in self.core_questions],
            "follow_up_questions": [q.to_dict() for q in self.follow_up_questions],
            "estimated_question_count": {
                "min": self.estimated_question_count.min,
                "max": self.estimated_question_count.max,
            },
        }
