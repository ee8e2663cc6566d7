from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, Tuple

from .config import SandboxConfig
from .lib.command import CommandRunner
from .outcome import OutcomeStatus, StepOutcome
from .prompt import Prompter
from .reporter import Reporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepContext:
    config: SandboxConfig
    runner: CommandRunner
    prompter: Prompter
    reporter: Reporter


class Step(Protocol):
    """A single idempotent step."""

    step_id: str
    title: str

    def run(self, ctx: StepContext) -> StepOutcome:
        ...


@dataclass(frozen=True)
class PipelineResult:
    outcomes: List[Tuple[str, StepOutcome]] = field(default_factory=list)

    @property
    def ran_steps(self) -> List[str]:
        return [step_id for step_id, _ in self.outcomes]

    @property
    def failed_step(self) -> Optional[str]:
        for step_id, outcome in self.outcomes:
            if outcome.is_fatal:
                return step_id
        return None

    @property
    def warnings(self) -> List[str]:
        return [
            outcome.message or step_id
            for step_id, outcome in self.outcomes
            if outcome.status is OutcomeStatus.WARNING
        ]

    @property
    def ok(self) -> bool:
        return self.failed_step is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def report_outcome(reporter: Reporter, outcome: StepOutcome) -> None:
    if outcome.message:
        if outcome.status is OutcomeStatus.FATAL:
            reporter.error(outcome.message)
        elif outcome.status is OutcomeStatus.WARNING:
            reporter.warn(outcome.message)
        else:
            reporter.success(outcome.message)
    for hint in outcome.hints:
        reporter.hint(hint)


def run_pipeline(*, ctx: StepContext, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first fatal outcome.

    Completed steps are left in place when a later one fails.
    """

    result = PipelineResult()
    total = len(steps)

    for index, step in enumerate(steps, start=1):
        ctx.reporter.step(f"{index}/{total}", step.title)
        logger.info("Running step %s", step.step_id)

        outcome = step.run(ctx)
        result.outcomes.append((step.step_id, outcome))
        report_outcome(ctx.reporter, outcome)

        logger.info("Step %s finished: %s", step.step_id, outcome.status.value)
        if outcome.is_fatal:
            logger.error("Stopping after fatal step %s", step.step_id)
            break

    return result
