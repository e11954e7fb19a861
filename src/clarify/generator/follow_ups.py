"""Follow-up selection: which follow-ups an answer fires."""

from __future__ import annotations

from collections.abc import Iterable

from clarify.model.question import InterviewQuestion


def select_follow_ups(
    answer: str,
    question_id: str,
    follow_up_questions: Iterable[InterviewQuestion],
) -> list[InterviewQuestion]:
    """Return the follow-ups fired by *answer* to the question *question_id*.

    Matching is a plain case-insensitive substring test, so "cache" also
    matches "cached". Pool order is preserved.
    """
    return [
        follow_up
        for follow_up in follow_up_questions
        if follow_up.follow_up_trigger is not None
        and follow_up.follow_up_trigger.fires_on(question_id, answer)
    ]
