"""Join grading metadata with execution outcomes by test identity."""

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from grading_core.errors import DuplicateIdentity, DuplicateOutcome, MissingOutcome
from grading_core.models.metadata import GradingMetadata
from grading_core.models.outcome import TestOutcome
from grading_core.models.report import JoinedResult

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Resolution:
    """Joined results plus the outcome errors tolerated in lenient mode."""

    results: Sequence[JoinedResult]
    errors: Sequence[MissingOutcome] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def missing(self) -> tuple[str, ...]:
        """Graded identities that produced no outcome."""
        return tuple(
            identity for error in self.errors for identity in error.identities
        )


def resolve(
    metadata_records: Iterable[GradingMetadata],
    outcome_records: Iterable[TestOutcome],
    *,
    lenient: bool = False,
) -> Resolution:
    """Pair every graded test with exactly one outcome.

    Outcomes without metadata belong to ungraded tests and are discarded.
    Results are ordered by identity regardless of input order.

    Args:
        metadata_records: Grading metadata, one record per graded test
        outcome_records: Execution outcomes, one per executed test
        lenient: Report graded tests without an outcome in
            ``Resolution.errors`` instead of raising

    Returns:
        The joined results and any tolerated MissingOutcome errors

    Raises:
        DuplicateIdentity: If two metadata records share an identity
        DuplicateOutcome: If a graded test has more than one outcome
        MissingOutcome: If a graded test has no outcome and lenient is False

    """
    metadata_records = list(metadata_records)
    identity_counts = Counter(record.identity for record in metadata_records)
    if duplicates := [i for i, count in identity_counts.items() if count > 1]:
        raise DuplicateIdentity(duplicates)

    metadata_by_identity = {record.identity: record for record in metadata_records}

    outcomes_by_identity: defaultdict[str, list[TestOutcome]] = defaultdict(list)
    ungraded = 0
    for outcome in outcome_records:
        if outcome.identity in metadata_by_identity:
            outcomes_by_identity[outcome.identity].append(outcome)
        else:
            ungraded += 1
    if ungraded:
        log.debug("Discarded %d outcome(s) of ungraded tests", ungraded)

    if repeated := [i for i, found in outcomes_by_identity.items() if len(found) > 1]:
        raise DuplicateOutcome(repeated)

    results: list[JoinedResult] = []
    missing: list[str] = []
    for identity in sorted(metadata_by_identity):
        if found := outcomes_by_identity.get(identity):
            results.append(
                JoinedResult(
                    identity=identity,
                    metadata=metadata_by_identity[identity],
                    outcome=found[0],
                )
            )
        else:
            missing.append(identity)

    if not missing:
        return Resolution(results=results)

    if not lenient:
        raise MissingOutcome(missing)

    log.warning(
        "Ignoring %d graded test(s) without an outcome: %s",
        len(missing),
        ", ".join(missing),
    )
    return Resolution(
        results=results, errors=[MissingOutcome(identity) for identity in missing]
    )
