"""Multi-role interview pipeline."""

from clarify.pipeline.counter import SequenceCounter
from clarify.pipeline.driver import DEFAULT_ROLE_ORDER, InterviewPipeline, PipelineResult

__all__ = [
    "InterviewPipeline",
    "PipelineResult",
    "SequenceCounter",
    "DEFAULT_ROLE_ORDER",
]
