"""MapAnswerProvider: answers from a pre-defined table."""

from __future__ import annotations

from collections.abc import Mapping

from clarify.model.answer import Answer, Answered, Cancelled
from clarify.model.question import InterviewQuestion


class MapAnswerProvider:
    """Provider backed by a mapping of question id to answer text.

    Lookup is by question id first. Failing that, a key that is contained
    in the question text (or contains it) is used. Unmatched questions get
    *default* when one is given and cancel the interview otherwise.
    """

    def __init__(self, answers: Mapping[str, str], default: str | None = None) -> None:
        self._answers = dict(answers)
        self._default = default

    def provide_answer(self, question: InterviewQuestion) -> Answer:
        if question.id in self._answers:
            return Answered(self._answers[question.id])

        for key, value in self._answers.items():
            if key in question.text or question.text in key:
                return Answered(value)

        if self._default is not None:
            return Answered(self._default)
        return Cancelled(reason=f"No answer for question {question.id}")
