"""Models for test execution outcomes."""

from dataclasses import dataclass
from typing import Literal, get_args

from typing_extensions import TypeAliasType

from grading_core.errors import InvalidOutcome

OutcomeStatus = TypeAliasType(
    "OutcomeStatus", Literal["passed", "failed", "errored", "skipped"]
)

OUTCOME_STATUSES: tuple[OutcomeStatus, ...] = get_args(OutcomeStatus.__value__)


@dataclass(frozen=True, kw_only=True)
class TestOutcome:
    """Outcome of a single executed test.

    Contains only the execution result; grading facts live in GradingMetadata.
    """

    __test__ = False

    identity: str
    status: OutcomeStatus
    detail: str | None = None
    duration: float = 0.0

    def __post_init__(self) -> None:
        if not self.identity:
            raise InvalidOutcome("Outcome identity must not be empty")
        if self.status not in OUTCOME_STATUSES:
            raise InvalidOutcome(
                f"Unknown status {self.status!r} for {self.identity}, "
                f"expected one of: {', '.join(OUTCOME_STATUSES)}"
            )
