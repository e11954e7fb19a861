"""Pipeline driver: runs one interview per stakeholder role, in order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, Sequence

from clarify.answers.base import AnswerProvider, InteractiveAdapter
from clarify.events import types as events
from clarify.events.bus import EventBus
from clarify.generator.generator import QuestionGenerator
from clarify.model.analysis import Ambiguity, AnalysisResult, ScoredDecision
from clarify.model.category import StakeholderRole
from clarify.model.exchange import InterviewResult
from clarify.model.question import QuestionSet
from clarify.pipeline.counter import SequenceCounter
from clarify.session.config import SessionConfig
from clarify.session.session import InterviewSession

logger = logging.getLogger(__name__)

DEFAULT_ROLE_ORDER: tuple[StakeholderRole, ...] = (
    StakeholderRole.TECH_LEAD,
    StakeholderRole.QA,
    StakeholderRole.UX,
)

AnswerSource = AnswerProvider | InteractiveAdapter

# Given the role and the results of the roles interviewed before it.
AnalysisSource = Callable[[StakeholderRole, tuple[InterviewResult, ...]], AnalysisResult]
SourceFactory = Callable[[StakeholderRole, tuple[InterviewResult, ...]], AnswerSource]


@dataclass(frozen=True)
class PipelineResult:
    """Combined outcome of all stakeholder interviews."""

    interviews: tuple[InterviewResult, ...]
    completed_at: datetime
    cancelled: bool = False
    all_decisions: tuple[ScoredDecision, ...] = ()
    all_ambiguities: tuple[Ambiguity, ...] = ()


class InterviewPipeline:
    """Runs independent interview sessions for several roles, one after another.

    Each role gets its own analysis, question set, answer source and
    session. Results of earlier roles are passed, read only, to the
    callables that build later roles' analysis and answer source. A
    cancelled interview stops the pipeline; later roles are not run.
    """

    def __init__(
        self,
        analysis_source: AnalysisSource,
        source_factory: SourceFactory,
        *,
        roles: Sequence[StakeholderRole] = DEFAULT_ROLE_ORDER,
        generator: QuestionGenerator | None = None,
        session_config: SessionConfig | None = None,
        event_bus: EventBus | None = None,
        counter: SequenceCounter | None = None,
    ) -> None:
        self.analysis_source = analysis_source
        self.source_factory = source_factory
        self.roles = tuple(roles)
        self.generator = generator or QuestionGenerator()
        self.session_config = session_config or SessionConfig()
        self.event_bus = event_bus or EventBus()
        self.counter = counter or SequenceCounter()

    def run(self) -> PipelineResult:
        interviews: list[InterviewResult] = []
        cancelled = False

        for role in self.roles:
            previous = tuple(interviews)
            self.event_bus.emit(
                events.StakeholderStarted(role=role, message=f"Starting {role.value} interview")
            )

            analysis = self.analysis_source(role, previous)
            question_set = self.generator.generate(analysis, role)
            session = self._build_session(question_set, self.source_factory(role, previous))
            session.start()

            result = replace(session.result(analysis), sequence=self.counter.next())
            interviews.append(result)
            self.event_bus.emit(
                events.StakeholderCompleted(
                    role=role,
                    result=result,
                    message=(
                        f"{role.value} interview {result.state.value}: "
                        f"{len(result.exchanges)} exchanges"
                    ),
                )
            )

            if not result.completed:
                logger.info("Interview for %s was cancelled; stopping pipeline", role.value)
                cancelled = True
                break

        self.event_bus.emit(
            events.PipelineCompleted(
                roles=tuple(r.role for r in interviews),
                message=f"{len(interviews)} of {len(self.roles)} interviews run",
            )
        )
        return PipelineResult(
            interviews=tuple(interviews),
            completed_at=datetime.now(timezone.utc),
            cancelled=cancelled,
            all_decisions=tuple(d for r in interviews for d in r.identified_decisions),
            all_ambiguities=tuple(a for r in interviews for a in r.ambiguities),
        )

    def _build_session(self, question_set: QuestionSet, source: AnswerSource) -> InterviewSession:
        # Providers answer programmatically; anything else is treated as interactive
        if hasattr(source, "provide_answer"):
            return InterviewSession(
                question_set,
                provider=source,
                config=self.session_config,
                event_bus=self.event_bus,
            )
        return InterviewSession(
            question_set,
            adapter=source,
            config=self.session_config,
            event_bus=self.event_bus,
        )
