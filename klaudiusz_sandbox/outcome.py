from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple


class OutcomeStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"
    FATAL = "fatal"


@dataclass(frozen=True)
class StepOutcome:
    """Result of one step.

    FATAL stops the pipeline; WARNING is reported and the run continues.
    ``hints`` are remediation lines shown under the message.
    """

    status: OutcomeStatus
    message: Optional[str] = None
    hints: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_fatal(self) -> bool:
        return self.status is OutcomeStatus.FATAL


def ok(message: Optional[str] = None) -> StepOutcome:
    return StepOutcome(OutcomeStatus.OK, message)


def warning(message: str, hints: Sequence[str] = ()) -> StepOutcome:
    return StepOutcome(OutcomeStatus.WARNING, message, tuple(hints))


def fatal(message: str, hints: Sequence[str] = ()) -> StepOutcome:
    return StepOutcome(OutcomeStatus.FATAL, message, tuple(hints))
