"""Resolve grading metadata against test outcomes and aggregate a score report."""

from grading_core.aggregator import aggregate
from grading_core.errors import (
    DuplicateIdentity,
    DuplicateOutcome,
    GradingError,
    InvalidMetadata,
    InvalidOutcome,
    MissingOutcome,
    ResolutionError,
)
from grading_core.grader import grade
from grading_core.models.metadata import GradingMetadata, Tag
from grading_core.models.outcome import TestOutcome
from grading_core.models.policy import GradingPolicy
from grading_core.models.report import JoinedResult, Report, TagSubtotal
from grading_core.resolver import Resolution, resolve

__all__ = [
    "DuplicateIdentity",
    "DuplicateOutcome",
    "GradingError",
    "GradingMetadata",
    "GradingPolicy",
    "InvalidMetadata",
    "InvalidOutcome",
    "JoinedResult",
    "MissingOutcome",
    "Report",
    "Resolution",
    "ResolutionError",
    "Tag",
    "TagSubtotal",
    "TestOutcome",
    "aggregate",
    "grade",
    "resolve",
]
