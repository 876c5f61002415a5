"""Grading pipeline: resolve metadata against outcomes, then aggregate."""

import logging
from collections.abc import Iterable

from grading_core.aggregator import aggregate
from grading_core.models.metadata import GradingMetadata
from grading_core.models.outcome import TestOutcome
from grading_core.models.policy import GradingPolicy
from grading_core.models.report import Report
from grading_core.resolver import resolve

log = logging.getLogger(__name__)


def grade(
    metadata_records: Iterable[GradingMetadata],
    outcome_records: Iterable[TestOutcome],
    policy: GradingPolicy | None = None,
) -> Report:
    """Produce a score report for one grading run.

    Raises the resolver's errors unchanged; no partial report is returned
    unless the policy is lenient.
    """
    policy = policy or GradingPolicy()

    resolution = resolve(metadata_records, outcome_records, lenient=policy.lenient)
    log.info("Resolved %d graded test(s)", len(resolution.results))

    report = aggregate(resolution.results, policy, missing=resolution.missing)
    log.info(
        "Score: %d/%d (%d of %d test(s) passed)",
        report.points_earned,
        report.points_possible,
        report.tests_passed,
        report.tests_total,
    )
    if report.raw_points_earned is not None:
        log.info(
            "Points earned capped at %d from %d",
            report.points_earned,
            report.raw_points_earned,
        )
    return report
