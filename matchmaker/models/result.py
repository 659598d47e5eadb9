"""
Stage outcomes.

Every pipeline stage reports through Success or Failure instead of raising
across stage boundaries. Failure carries the stage that produced it so callers
can tell caller-input problems (validation) from server-side faults.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar, Union


T = TypeVar("T")


class PipelineStage(str, Enum):
    """Pipeline stages, in execution order."""
    VALIDATE = "validate"
    SCORE = "score"
    CORRELATE = "correlate"
    RATIONALE = "rationale"
    PROMPT = "prompt"
    FORMAT = "format"

    @property
    def failure_prefix(self) -> str:
        return _FAILURE_PREFIXES[self]


_FAILURE_PREFIXES = {
    PipelineStage.VALIDATE: "Validation failed",
    PipelineStage.SCORE: "Trait scoring failed",
    PipelineStage.CORRELATE: "Archetype correlation failed",
    PipelineStage.RATIONALE: "Rationale generation failed",
    PipelineStage.PROMPT: "Image prompt generation failed",
    PipelineStage.FORMAT: "Output formatting failed",
}


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    success: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    error: str
    stage: PipelineStage
    success: bool = field(default=False, init=False)

    @property
    def is_client_error(self) -> bool:
        """Validation failures are the caller's problem; the rest are ours."""
        return self.stage == PipelineStage.VALIDATE


Result = Union[Success[T], Failure]
