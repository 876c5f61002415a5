"""Models for joined results and the final score report."""

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from grading_core.models.metadata import GradingMetadata
from grading_core.models.outcome import OutcomeStatus, TestOutcome


@dataclass(frozen=True, kw_only=True)
class JoinedResult:
    """A graded test paired with its single execution outcome."""

    identity: str
    metadata: GradingMetadata
    outcome: TestOutcome

    @property
    def status(self) -> OutcomeStatus:
        return self.outcome.status

    @property
    def passed(self) -> bool:
        return self.outcome.status == "passed"

    @property
    def points_earned(self) -> int:
        """Points awarded; anything other than a pass earns nothing."""
        return self.metadata.points if self.passed else 0

    @property
    def explanation(self) -> str:
        """Short human-readable verdict, e.g. ``"pkg.test_x passed"``."""
        return f"{self.identity} {self.outcome.status}"


@dataclass(frozen=True, kw_only=True)
class TagSubtotal:
    """Earned and possible points for every test carrying one tag name."""

    earned: int = 0
    possible: int = 0

    def add(self, *, earned: int, possible: int) -> "TagSubtotal":
        return TagSubtotal(
            earned=self.earned + earned, possible=self.possible + possible
        )


@dataclass(frozen=True, kw_only=True)
class Report:
    """Immutable score summary of a grading run.

    ``results`` is ordered by identity. ``raw_points_earned`` is set only when
    a points cap reduced ``points_earned``; ``missing`` lists graded tests that
    were dropped because they produced no outcome in lenient mode.
    """

    results: Sequence[JoinedResult]
    points_earned: int
    points_possible: int
    tag_subtotals: Mapping[str, TagSubtotal] = field(default_factory=dict)
    raw_points_earned: int | None = None
    missing: Sequence[str] = ()
    properties: Mapping[str, str | int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.points_earned > self.points_possible:
            raise ValueError(
                f"Points earned ({self.points_earned}) exceed "
                f"points possible ({self.points_possible})"
            )
        object.__setattr__(self, "results", tuple(self.results))
        object.__setattr__(self, "missing", tuple(self.missing))
        object.__setattr__(
            self, "tag_subtotals", MappingProxyType(dict(self.tag_subtotals))
        )
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def tests_total(self) -> int:
        return len(self.results)

    @property
    def tests_passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    def count_by_status(self) -> Mapping[OutcomeStatus, int]:
        """Number of results per outcome status."""
        return dict(Counter(result.status for result in self.results))
