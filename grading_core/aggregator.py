"""Fold joined results into a score report."""

from collections.abc import Iterable, Sequence

from grading_core.models.policy import GradingPolicy
from grading_core.models.report import JoinedResult, Report, TagSubtotal


def counts_toward_possible(result: JoinedResult, policy: GradingPolicy) -> bool:
    """Whether a result's points are part of the points possible."""
    return result.status != "skipped" or policy.skipped_counts_toward_possible


def aggregate(
    results: Iterable[JoinedResult],
    policy: GradingPolicy | None = None,
    *,
    missing: Sequence[str] = (),
) -> Report:
    """Compute earned and possible points, overall and per tag name.

    Failed, errored and skipped tests earn nothing. A test contributes once
    to the subtotal of every distinct tag name it carries.

    Args:
        results: Joined results, as produced by the resolver
        policy: Scoring policy (defaults to GradingPolicy())
        missing: Graded identities dropped by a lenient resolution

    Returns:
        The immutable report

    """
    policy = policy or GradingPolicy()

    scored: list[JoinedResult] = []
    earned = 0
    possible = 0
    subtotals: dict[str, TagSubtotal] = {}

    for result in sorted(results, key=lambda r: r.identity):
        if result.metadata.points == 0 and not policy.zero_point_tests_count:
            continue
        scored.append(result)

        result_possible = (
            result.metadata.points if counts_toward_possible(result, policy) else 0
        )
        earned += result.points_earned
        possible += result_possible

        for name in result.metadata.tag_names:
            subtotal = subtotals.get(name, TagSubtotal())
            subtotals[name] = subtotal.add(
                earned=result.points_earned, possible=result_possible
            )

    raw_earned: int | None = None
    if policy.max_points is not None:
        possible = policy.max_points
        if earned > possible:
            raw_earned, earned = earned, possible

    return Report(
        results=scored,
        points_earned=earned,
        points_possible=possible,
        tag_subtotals=dict(sorted(subtotals.items())),
        raw_points_earned=raw_earned,
        missing=missing,
        properties=policy.properties,
    )
