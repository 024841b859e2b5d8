"""
Ordered step execution for craftenv.

A run is a fixed sequence of steps. Each step returns a StepResult; the
pipeline stops at the first failed result and leaves the effects of the
steps before it in place. Re-running the whole tool is the recovery path.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..exceptions import CraftenvError
from ..utils.logging import log_error, log_phase, log_success


@dataclass
class StepResult:
    """Success or failure of a single step."""

    success: bool
    message: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    step: Optional[str] = None

    @classmethod
    def ok(cls, message: str = "", **data: Any) -> "StepResult":
        return cls(True, message, data)

    @classmethod
    def failure(cls, message: str, **data: Any) -> "StepResult":
        return cls(False, message, data)


@dataclass
class PipelineStep:
    """A named step and the callable that performs it."""

    name: str
    description: str
    action: Callable[[], StepResult]


class Pipeline:
    """Runs steps in order, stopping at the first failure."""

    def __init__(self, steps: List[PipelineStep]):
        self.steps = steps
        self.completed: List[str] = []

    def run(self) -> StepResult:
        """Run every step and return the last result, or the first failure."""
        result = StepResult.ok()
        for step in self.steps:
            log_phase(step.description)
            try:
                result = step.action()
            except CraftenvError as e:
                result = StepResult.failure(e.message, **(e.details or {}))
            result.step = step.name

            if not result.success:
                log_error(f"{step.description} failed: {result.message}")
                return result

            if result.message:
                log_success(result.message)
            self.completed.append(step.name)
        return result
