"""CallbackAnswerProvider: delegates to a user-supplied callback function."""

from __future__ import annotations

from typing import Callable

from clarify.model.answer import Answer
from clarify.model.question import InterviewQuestion


class CallbackAnswerProvider:
    """Provider that delegates answering to a callback.

    The callback receives the full InterviewQuestion and must return an
    Answered or Cancelled value. Exceptions it raises are not caught.
    """

    def __init__(self, callback: Callable[[InterviewQuestion], Answer]) -> None:
        self._callback = callback

    def provide_answer(self, question: InterviewQuestion) -> Answer:
        return self._callback(question)
