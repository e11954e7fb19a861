"""Answer sources: programmatic providers and interactive adapters."""

from clarify.answers.base import AnswerProvider, InteractiveAdapter
from clarify.answers.callback import CallbackAnswerProvider
from clarify.answers.console import SKIP_TOKEN, ConsoleAdapter
from clarify.answers.mapping import MapAnswerProvider

__all__ = [
    "AnswerProvider",
    "InteractiveAdapter",
    "MapAnswerProvider",
    "CallbackAnswerProvider",
    "ConsoleAdapter",
    "SKIP_TOKEN",
]
