"""Answer source protocols."""

from __future__ import annotations

from typing import Protocol

from clarify.model.answer import Answer
from clarify.model.question import InterviewQuestion


class AnswerProvider(Protocol):
    """Programmatic answer source: a lookup table, a callback, another agent."""

    def provide_answer(self, question: InterviewQuestion) -> Answer: ...


class InteractiveAdapter(Protocol):
    """Answer source that prompts an external actor, usually a human."""

    def prompt(self, question: InterviewQuestion) -> Answer: ...

    def display(self, message: str) -> None: ...
