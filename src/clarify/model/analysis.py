"""Analysis model: scored decisions and ambiguities handed over by spec analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from clarify.model.category import Category

# Decisions scoring below this clarity need a clarifying question.
CLARITY_THRESHOLD = 0.6


class AmbiguityLevel(StrEnum):
    CLEAR = "clear"
    MODERATE = "moderate"
    UNCLEAR = "unclear"


@dataclass(frozen=True)
class IdentifiedDecision:
    """A technical decision spotted in the specification."""

    title: str
    category: Category
    description: str = ""
    clarity_score: float = 1.0
    options: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoredDecision(IdentifiedDecision):
    """An IdentifiedDecision annotated with its ambiguity assessment."""

    needs_clarification: bool = False
    ambiguity_level: AmbiguityLevel = AmbiguityLevel.CLEAR


@dataclass(frozen=True)
class Ambiguity:
    """An area of the specification that is unclear or incomplete."""

    description: str
    location: str = ""
    suggested_questions: tuple[str, ...] = ()


def ambiguity_level_for(clarity_score: float) -> AmbiguityLevel:
    """Map a 0-1 clarity score (1 = clear) onto an AmbiguityLevel."""
    if clarity_score >= 0.7:
        return AmbiguityLevel.CLEAR
    if clarity_score >= 0.4:
        return AmbiguityLevel.MODERATE
    return AmbiguityLevel.UNCLEAR


def score_decision(decision: IdentifiedDecision) -> ScoredDecision:
    """Attach needs_clarification and ambiguity_level to a decision."""
    return ScoredDecision(
        title=decision.title,
        category=decision.category,
        description=decision.description,
        clarity_score=decision.clarity_score,
        options=decision.options,
        needs_clarification=decision.clarity_score < CLARITY_THRESHOLD,
        ambiguity_level=ambiguity_level_for(decision.clarity_score),
    )


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the question generator needs from an analysis pass."""

    scored_decisions: tuple[ScoredDecision, ...] = ()
    ambiguities: tuple[Ambiguity, ...] = ()
    summary: str = ""

    @property
    def decisions(self) -> tuple[IdentifiedDecision, ...]:
        return self.scored_decisions

    @classmethod
    def from_decisions(
        cls,
        decisions: list[IdentifiedDecision],
        ambiguities: list[Ambiguity] | None = None,
        summary: str = "",
    ) -> AnalysisResult:
        """Score raw decisions and bundle them with the ambiguities."""
        return cls(
            scored_decisions=tuple(score_decision(d) for d in decisions),
            ambiguities=tuple(ambiguities or ()),
            summary=summary,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisResult:
        """Build from the analysis JSON shape.

        Accepts both camelCase and snake_case keys. Decisions are always
        re-scored from their clarity score, so a payload carrying only
        ``decisions`` works as well as one carrying ``scoredDecisions``.
        """
        raw_decisions = _pick(data, "scored_decisions", "scoredDecisions")
        if raw_decisions is None:
            raw_decisions = data.get("decisions", [])
        decisions = [
            IdentifiedDecision(
                title=d["title"],
                category=Category(d.get("category", Category.ARCHITECTURE)),
                description=d.get("description", ""),
                clarity_score=_clamp(float(_pick(d, "clarity_score", "clarityScore", default=1.0))),
                options=tuple(d.get("options") or ()),
            )
            for d in raw_decisions
        ]
        ambiguities = [
            Ambiguity(
                description=a["description"],
                location=a.get("location", ""),
                suggested_questions=tuple(
                    _pick(a, "suggested_questions", "suggestedQuestions", default=()) or ()
                ),
            )
            for a in data.get("ambiguities", [])
        ]
        return cls.from_decisions(decisions, ambiguities, summary=data.get("summary", ""))


def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


def _clamp(score: float) -> float:
    return max(0.0, min(1.0, score))
