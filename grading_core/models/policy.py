"""Configuration for how joined results are scored."""

from collections.abc import Mapping

from pydantic import Field

from grading_core.models.base import Model


class GradingPolicy(Model):
    """Scoring policy for a grading run."""

    lenient: bool = Field(
        default=False,
        description="Drop graded tests without an outcome instead of failing",
    )
    skipped_counts_toward_possible: bool = Field(
        default=True,
        description="Whether skipped graded tests add to points possible",
    )
    zero_point_tests_count: bool = Field(
        default=True,
        description="Whether zero-point tests count in totals and tag subtotals",
    )
    max_points: int | None = Field(
        default=None,
        ge=0,
        description="Overrides points possible and caps points earned",
    )
    properties: Mapping[str, str | int] = Field(
        default_factory=dict,
        description="Report-level key/value pairs (assignment, checkpoint, ...)",
    )
