"""Question generator: turns an analysis result into an interview question set."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from clarify.generator.templates import (
    AMBIGUITY_FALLBACK_TEMPLATE,
    CORE_TEMPLATES,
    FOLLOW_UP_TEMPLATES,
    HESITATION_KEYWORDS,
    FollowUpTemplate,
    decision_question_text,
)
from clarify.model.analysis import Ambiguity, AmbiguityLevel, AnalysisResult, ScoredDecision
from clarify.model.category import Category, StakeholderRole
from clarify.model.question import (
    FollowUpTrigger,
    InterviewQuestion,
    QuestionCountEstimate,
    QuestionSet,
    QuestionType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
    """Sizing for generated question sets.

    ``min_core_questions`` is soft guidance: it only decides when template
    questions may skip categories that are already covered. A sparse
    analysis can still yield fewer core questions.
    """

    min_core_questions: int = 5
    max_core_questions: int = 8
    max_follow_up_questions: int = 8


class QuestionGenerator:
    """Builds a QuestionSet from scored decisions and ambiguities.

    Generation is deterministic: question ids are derived from positions
    (``decision-1``, ``ambiguity-2``, ``tech-lead-core-3``, ...), so two
    calls with the same input and config produce equal question sets.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()

    def generate(
        self,
        analysis: AnalysisResult,
        role: StakeholderRole = StakeholderRole.TECH_LEAD,
    ) -> QuestionSet:
        core = self._core_questions(analysis, role)
        follow_ups = self._follow_up_questions(analysis, core, role)
        logger.debug(
            "Generated %d core and %d follow-up questions for %s",
            len(core),
            len(follow_ups),
            role.value,
        )
        return QuestionSet(
            role=role,
            core_questions=tuple(core),
            follow_up_questions=tuple(follow_ups),
            estimated_question_count=QuestionCountEstimate(
                min=len(core),
                max=len(core) + min(len(follow_ups), self.config.max_follow_up_questions),
            ),
        )

    # --- core questions -------------------------------------------------------

    def _core_questions(
        self, analysis: AnalysisResult, role: StakeholderRole
    ) -> list[InterviewQuestion]:
        limit = self.config.max_core_questions
        questions: list[InterviewQuestion] = []
        used_categories: set[Category] = set()

        for decision in analysis.scored_decisions:
            if decision.needs_clarification and len(questions) < limit:
                questions.append(_decision_question(decision, len(questions)))
                used_categories.add(decision.category)

        for ambiguity in analysis.ambiguities:
            if len(questions) < limit:
                questions.append(_ambiguity_question(ambiguity, len(questions)))

        for template in CORE_TEMPLATES:
            if len(questions) >= limit:
                break
            if (
                len(questions) >= self.config.min_core_questions
                and template.category in used_categories
            ):
                continue
            if any(q.text == template.text for q in questions):
                continue
            questions.append(
                InterviewQuestion(
                    id=f"{role.value}-core-{len(questions) + 1}",
                    text=template.text,
                    type=QuestionType.CORE,
                    category=template.category,
                    priority=template.priority,
                )
            )

        # list.sort is stable: equal priorities keep insertion order
        questions.sort(key=lambda q: q.priority)
        return questions[:limit]

    # --- follow-ups -----------------------------------------------------------

    def _follow_up_questions(
        self,
        analysis: AnalysisResult,
        core: list[InterviewQuestion],
        role: StakeholderRole,
    ) -> list[InterviewQuestion]:
        cap = self.config.max_follow_up_questions
        follow_ups: list[InterviewQuestion] = []

        for decision in analysis.scored_decisions:
            if decision.ambiguity_level is AmbiguityLevel.CLEAR:
                continue
            related = next(
                (
                    q
                    for q in core
                    if q.related_decision_title == decision.title
                    or q.category is decision.category
                ),
                None,
            )
            if related is not None:
                _append_unique(follow_ups, _decision_follow_up(decision, related, len(follow_ups)))

        for template in FOLLOW_UP_TEMPLATES:
            if len(follow_ups) >= cap:
                break
            trigger_question = _first_matching(core, template)
            if trigger_question is None:
                continue
            trigger = FollowUpTrigger(
                after_question_id=trigger_question.id,
                trigger_keywords=template.trigger_keywords,
                always_ask=not template.trigger_keywords,
            )
            _append_unique(
                follow_ups,
                InterviewQuestion(
                    id=f"{role.value}-followup-{len(follow_ups) + 1}",
                    text=template.text,
                    type=QuestionType.FOLLOW_UP,
                    category=template.category,
                    priority=len(follow_ups) + 10,
                    follow_up_trigger=trigger,
                ),
            )

        return follow_ups[:cap]


def generate_questions(
    analysis: AnalysisResult,
    role: StakeholderRole = StakeholderRole.TECH_LEAD,
    config: GeneratorConfig | None = None,
) -> QuestionSet:
    """Convenience wrapper around QuestionGenerator.generate()."""
    return QuestionGenerator(config).generate(analysis, role)


def _decision_question(decision: ScoredDecision, index: int) -> InterviewQuestion:
    return InterviewQuestion(
        id=f"decision-{index + 1}",
        text=decision_question_text(decision.category, decision.title),
        type=QuestionType.CORE,
        category=decision.category,
        priority=1 if decision.needs_clarification else 5,
        related_decision_title=decision.title,
    )


def _ambiguity_question(ambiguity: Ambiguity, index: int) -> InterviewQuestion:
    if ambiguity.suggested_questions:
        text = ambiguity.suggested_questions[0]
    else:
        text = AMBIGUITY_FALLBACK_TEMPLATE.format(description=ambiguity.description)
    return InterviewQuestion(
        id=f"ambiguity-{index + 1}",
        text=text,
        type=QuestionType.CORE,
        category=Category.GENERAL,
        priority=2,
        related_ambiguity_description=ambiguity.description,
    )


def _decision_follow_up(
    decision: ScoredDecision, core_question: InterviewQuestion, index: int
) -> InterviewQuestion:
    if decision.options:
        text = f"Between {' and '.join(decision.options)}, which would you lean toward and why?"
    else:
        text = f'Can you elaborate on the trade-offs you\'d consider for "{decision.title}"?'

    if decision.ambiguity_level is AmbiguityLevel.UNCLEAR:
        trigger = FollowUpTrigger(after_question_id=core_question.id, always_ask=True)
    else:
        # Moderate: probe further only when the answer mentions an option or hesitates
        keywords = tuple(decision.options) + HESITATION_KEYWORDS
        trigger = FollowUpTrigger(after_question_id=core_question.id, trigger_keywords=keywords)

    return InterviewQuestion(
        id=f"decision-followup-{index + 1}",
        text=text,
        type=QuestionType.FOLLOW_UP,
        category=decision.category,
        priority=index + 10,
        related_decision_title=decision.title,
        follow_up_trigger=trigger,
    )


def _first_matching(
    core: list[InterviewQuestion], template: FollowUpTemplate
) -> InterviewQuestion | None:
    for question in core:
        if question.category is template.category or question.category is template.trigger_category:
            return question
    return None


def _append_unique(follow_ups: list[InterviewQuestion], question: InterviewQuestion) -> None:
    if not any(q.text == question.text for q in follow_ups):
        follow_ups.append(question)
