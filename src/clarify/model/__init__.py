"""Clarify model layer -- public type re-exports."""

from clarify.model.analysis import (
    CLARITY_THRESHOLD,
    Ambiguity,
    AmbiguityLevel,
    AnalysisResult,
    IdentifiedDecision,
    ScoredDecision,
    score_decision,
)
from clarify.model.answer import Answer, Answered, Cancelled
from clarify.model.category import DECISION_CATEGORIES, Category, StakeholderRole
from clarify.model.exchange import InterviewExchange, InterviewResult
from clarify.model.question import (
    FollowUpTrigger,
    InterviewQuestion,
    QuestionCountEstimate,
    QuestionSet,
    QuestionType,
)
from clarify.model.snapshot import SessionSnapshot
from clarify.model.state import SessionState

__all__ = [
    # category
    "Category",
    "DECISION_CATEGORIES",
    "StakeholderRole",
    # analysis
    "CLARITY_THRESHOLD",
    "AmbiguityLevel",
    "IdentifiedDecision",
    "ScoredDecision",
    "Ambiguity",
    "AnalysisResult",
    "score_decision",
    # question
    "QuestionType",
    "FollowUpTrigger",
    "InterviewQuestion",
    "QuestionCountEstimate",
    "QuestionSet",
    # answer
    "Answer",
    "Answered",
    "Cancelled",
    # exchange
    "InterviewExchange",
    "InterviewResult",
    # session state
    "SessionState",
    "SessionSnapshot",
]
