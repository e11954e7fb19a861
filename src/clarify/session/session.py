"""Interview session: walks a question set and records the answers."""

from __future__ import annotations

import logging
import uuid
from collections import deque
from datetime import datetime, timezone
from typing import Callable

from clarify.answers.base import AnswerProvider, InteractiveAdapter
from clarify.events.bus import EventBus
from clarify.events.types import (
    AnswerReceived,
    FollowUpTriggered,
    ProgressEvent,
    QuestionAsked,
    SessionCompleted,
)
from clarify.generator.follow_ups import select_follow_ups
from clarify.model.analysis import AnalysisResult
from clarify.model.answer import Answer, Cancelled
from clarify.model.category import StakeholderRole
from clarify.model.exchange import InterviewExchange, InterviewResult
from clarify.model.question import InterviewQuestion, QuestionSet
from clarify.model.snapshot import SessionSnapshot
from clarify.model.state import SessionState
from clarify.session.config import SessionConfig
from clarify.session.errors import ConfigurationError, InvalidStateError

logger = logging.getLogger(__name__)


class InterviewSession:
    """State machine for a single stakeholder interview.

    A session is bound to one QuestionSet and at most one answer source.
    Core questions are asked in question-set order, then the follow-ups
    their answers fired, first in first out. A session is single use:
    once completed or cancelled it can only be inspected or snapshotted.

    Two ways to drive it:

    - ``start()`` runs the whole interview, blocking on the configured
      provider or interactive adapter for every answer.
    - ``ask_next()`` / ``submit_answer()`` / ``skip_current_question()``
      let a host that cannot block (a web handler, a TUI) feed answers in
      one at a time. No answer source is needed in this mode.

    The session is not thread-safe apart from ``cancel()``, which may be
    called from another thread while an answer is outstanding. It takes
    effect before the next question is asked.
    """

    def __init__(
        self,
        question_set: QuestionSet,
        *,
        provider: AnswerProvider | None = None,
        adapter: InteractiveAdapter | None = None,
        config: SessionConfig | None = None,
        event_bus: EventBus | None = None,
        session_id: str | None = None,
    ) -> None:
        if provider is not None and adapter is not None:
            raise ConfigurationError(
                "Configure either an answer provider or an interactive adapter, not both"
            )
        self.id = session_id or str(uuid.uuid4())
        self.question_set = question_set
        self.provider = provider
        self.adapter = adapter
        self.config = config or SessionConfig()
        self.event_bus = event_bus or EventBus()
        self.state = SessionState.IDLE

        self._exchanges: list[InterviewExchange] = []
        self._question_index = 0
        self._asked_follow_up_ids: list[str] = []
        self._core_queue: deque[InterviewQuestion] = deque()
        self._follow_up_queue: deque[InterviewQuestion] = deque()
        self._current: InterviewQuestion | None = None
        self._started_at: datetime | None = None
        self._completed_at: datetime | None = None

        self._core_queue.extend(question_set.core_questions)
        self.state = SessionState.READY

    # --- Inspection ---

    def get_state(self) -> SessionState:
        return self.state

    def get_role(self) -> StakeholderRole:
        return self.question_set.role

    def get_exchanges(self) -> list[InterviewExchange]:
        """Return a copy of the exchanges recorded so far."""
        return list(self._exchanges)

    def get_current_question(self) -> InterviewQuestion | None:
        """The outstanding question, only while awaiting an answer."""
        if self.state is not SessionState.AWAITING_ANSWER:
            return None
        return self._current

    def get_questions_remaining(self) -> int:
        """Queued core questions plus the pending follow-ups the cap still allows."""
        return len(self._core_queue) + self._follow_ups_left()

    def on_progress(self, callback: Callable[[ProgressEvent], None]) -> None:
        """Register a callback receiving every progress event."""
        self.event_bus.on_all(callback)

    # --- Running the interview ---

    def start(self) -> list[InterviewExchange]:
        """Run the interview to completion or cancellation.

        Returns the recorded exchanges. An exception raised by the answer
        source cancels the session and propagates to the caller.
        """
        self._require_state("start interview", SessionState.READY)
        if self.provider is None and self.adapter is None:
            raise ConfigurationError(
                "Either an answer provider or an interactive adapter must be configured"
            )

        self._begin()
        try:
            while not self._is_cancelled():
                question = self._dequeue_next()
                if question is None:
                    break
                self._process(question)
        except Exception:
            logger.warning("Answer source failed; cancelling session %s", self.id)
            self._mark_cancelled()
            raise

        if not self._is_cancelled():
            self._complete()
        return self.get_exchanges()

    def ask_next(self) -> InterviewQuestion | None:
        """Pose the next question and wait for submit_answer().

        Returns None once nothing is left to ask, completing the session.
        """
        if self.state is SessionState.COMPLETED:
            return None
        self._require_state(
            "ask next question", SessionState.READY, SessionState.IN_PROGRESS
        )
        if self.state is SessionState.READY:
            self._begin()

        question = self._dequeue_next()
        if question is None:
            self._complete()
            return None
        self._present(question)
        return question

    def submit_answer(self, answer: str) -> None:
        """Answer the outstanding question."""
        self._require_state("submit answer", SessionState.AWAITING_ANSWER)
        assert self._current is not None
        self._record(self._current, answer)
        if not self._has_next():
            self._complete()

    def skip_current_question(self) -> None:
        """Drop the outstanding question, or the next queued one, unanswered."""
        self._require_state(
            "skip question", SessionState.AWAITING_ANSWER, SessionState.IN_PROGRESS
        )
        if self.state is SessionState.AWAITING_ANSWER:
            skipped = self._current
            self._current = None
        else:
            skipped = self._dequeue_next()

        if skipped is not None:
            logger.debug("Skipped question %s", skipped.id)
            if skipped.is_follow_up:
                self._asked_follow_up_ids.append(skipped.id)

        self.state = SessionState.IN_PROGRESS
        if not self._has_next():
            self._complete()

    def cancel(self) -> None:
        """Cancel the interview. No effect once the session has ended."""
        if self.state.is_terminal:
            logger.debug("Ignoring cancel for session %s in state %s", self.id, self.state)
            return
        self._mark_cancelled()

    # --- Snapshots ---

    def create_snapshot(self) -> SessionSnapshot:
        """Capture progress so it can be resumed by another session.

        An outstanding question is listed first in its queue so that a
        resumed session asks it again.
        """
        core_ids = [q.id for q in self._core_queue]
        follow_up_ids = [q.id for q in self._follow_up_queue]
        if self.state is SessionState.AWAITING_ANSWER and self._current is not None:
            if self._current.is_follow_up:
                follow_up_ids.insert(0, self._current.id)
            else:
                core_ids.insert(0, self._current.id)

        return SessionSnapshot(
            role=self.question_set.role,
            state=self.state,
            exchanges=tuple(self._exchanges),
            question_index=self._question_index,
            asked_follow_up_ids=tuple(self._asked_follow_up_ids),
            remaining_core_question_ids=tuple(core_ids),
            remaining_follow_up_ids=tuple(follow_up_ids),
            started_at=self._started_at,
            completed_at=self._completed_at,
        )

    def restore_from_snapshot(self, snapshot: SessionSnapshot) -> None:
        """Load progress from *snapshot* into this not-yet-started session.

        Queued ids are resolved against this session's question set; ids it
        does not contain are dropped. An unfinished snapshot leaves the
        session ready to be resumed with start() or ask_next().
        """
        self._require_state("restore snapshot", SessionState.IDLE, SessionState.READY)
        if snapshot.role is not self.question_set.role:
            raise ValueError(
                f"Snapshot role {snapshot.role.value!r} does not match question set role "
                f"{self.question_set.role.value!r}"
            )

        self._exchanges = list(snapshot.exchanges)
        self._question_index = snapshot.question_index
        self._asked_follow_up_ids = list(snapshot.asked_follow_up_ids)
        self._started_at = snapshot.started_at
        self._completed_at = snapshot.completed_at
        self._current = None

        self._core_queue = deque(
            q
            for q in map(self.question_set.find_core, snapshot.remaining_core_question_ids)
            if q is not None
        )
        self._follow_up_queue = deque(
            q
            for q in map(self.question_set.find_follow_up, snapshot.remaining_follow_up_ids)
            if q is not None
        )

        self.state = snapshot.state if snapshot.state.is_terminal else SessionState.READY
        logger.debug(
            "Restored session %s: %d exchanges, %d questions remaining",
            self.id,
            len(self._exchanges),
            self.get_questions_remaining(),
        )

    # --- Results ---

    def result(self, analysis: AnalysisResult | None = None) -> InterviewResult:
        """Freeze the session's current outcome into an InterviewResult."""
        return InterviewResult(
            role=self.question_set.role,
            exchanges=tuple(self._exchanges),
            state=self.state,
            identified_decisions=analysis.scored_decisions if analysis else (),
            ambiguities=analysis.ambiguities if analysis else (),
            started_at=self._started_at,
            completed_at=self._completed_at,
        )

    # --- Private methods ---

    def _require_state(self, operation: str, *allowed: SessionState) -> None:
        if self.state not in allowed:
            raise InvalidStateError(operation, self.state)

    def _is_cancelled(self) -> bool:
        return self.state is SessionState.CANCELLED

    def _begin(self) -> None:
        self.state = SessionState.IN_PROGRESS
        if self._started_at is None:
            self._started_at = datetime.now(timezone.utc)
        logger.debug(
            "Session %s started for %s with %d questions queued",
            self.id,
            self.question_set.role.value,
            self.get_questions_remaining(),
        )

    def _has_next(self) -> bool:
        return bool(self._core_queue) or self._follow_ups_left() > 0

    def _follow_ups_left(self) -> int:
        """Pending follow-ups that can still be asked under the cap."""
        slots = self.config.max_follow_ups - len(self._asked_follow_up_ids)
        if self._current is not None and self._current.is_follow_up:
            # the outstanding follow-up already holds a slot
            slots -= 1
        unasked = sum(1 for q in self._follow_up_queue if q.id not in self._asked_follow_up_ids)
        return max(0, min(unasked, slots))

    def _dequeue_next(self) -> InterviewQuestion | None:
        """Pop the next question to ask, honouring the follow-up cap."""
        if self._core_queue:
            return self._core_queue.popleft()
        while self._follow_up_queue:
            if len(self._asked_follow_up_ids) >= self.config.max_follow_ups:
                logger.debug(
                    "Follow-up cap of %d reached; %d follow-ups left unasked",
                    self.config.max_follow_ups,
                    len(self._follow_up_queue),
                )
                return None
            follow_up = self._follow_up_queue.popleft()
            if follow_up.id not in self._asked_follow_up_ids:
                return follow_up
        return None

    def _present(self, question: InterviewQuestion) -> None:
        self._current = question
        if not self._is_cancelled():
            self.state = SessionState.AWAITING_ANSWER
        self.event_bus.emit(
            QuestionAsked(question=question, questions_remaining=self.get_questions_remaining())
        )

    def _obtain_answer(self, question: InterviewQuestion) -> Answer:
        if self.provider is not None:
            return self.provider.provide_answer(question)
        assert self.adapter is not None
        return self.adapter.prompt(question)

    def _process(self, question: InterviewQuestion) -> None:
        self._present(question)
        answer = self._obtain_answer(question)

        if self._is_cancelled():
            # cancel() arrived while the answer was outstanding
            logger.debug("Discarding answer to %s from cancelled session", question.id)
            return
        if isinstance(answer, Cancelled):
            logger.info("Answer source cancelled session %s at %s", self.id, question.id)
            self._mark_cancelled()
            return
        self._record(question, answer.text)

    def _record(self, question: InterviewQuestion, answer: str) -> None:
        """Append the exchange, then queue whatever follow-ups it fired."""
        fired = [
            f
            for f in select_follow_ups(answer, question.id, self.question_set.follow_up_questions)
            if not self._is_known_follow_up(f.id)
        ]

        self._exchanges.append(
            InterviewExchange(question=question.text, answer=answer, follow_up_triggered=bool(fired))
        )
        self._question_index += 1
        if question.is_follow_up:
            self._asked_follow_up_ids.append(question.id)
        self._current = None

        self.event_bus.emit(
            AnswerReceived(
                question=question,
                answer=answer,
                questions_remaining=self.get_questions_remaining(),
            )
        )

        for follow_up in fired:
            self._follow_up_queue.append(follow_up)
            logger.debug("Queued follow-up %s after %s", follow_up.id, question.id)
            self.event_bus.emit(
                FollowUpTriggered(
                    question=follow_up, questions_remaining=self.get_questions_remaining()
                )
            )

        if not self._is_cancelled():
            self.state = SessionState.IN_PROGRESS

    def _is_known_follow_up(self, question_id: str) -> bool:
        if question_id in self._asked_follow_up_ids:
            return True
        if self._current is not None and self._current.id == question_id:
            return True
        return any(q.id == question_id for q in self._follow_up_queue)

    def _complete(self) -> None:
        # Follow-ups left past the cap can never be asked
        self._follow_up_queue.clear()
        self.state = SessionState.COMPLETED
        self._completed_at = datetime.now(timezone.utc)
        logger.info(
            "Session %s completed with %d exchanges", self.id, len(self._exchanges)
        )
        self.event_bus.emit(SessionCompleted(questions_remaining=0))

    def _mark_cancelled(self) -> None:
        self.state = SessionState.CANCELLED
        self._completed_at = datetime.now(timezone.utc)
        self._current = None
        logger.info("Session %s cancelled after %d exchanges", self.id, len(self._exchanges))
