"""Question generation from spec analysis results."""

from clarify.generator.follow_ups import select_follow_ups
from clarify.generator.generator import GeneratorConfig, QuestionGenerator, generate_questions

__all__ = [
    "GeneratorConfig",
    "QuestionGenerator",
    "generate_questions",
    "select_follow_ups",
]
