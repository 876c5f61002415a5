"""Errors raised while validating and resolving grading data."""

from collections.abc import Iterable


class GradingError(Exception):
    """Base class for all grading errors."""


class InvalidMetadata(GradingError, ValueError):
    """Raised when a metadata record is malformed (e.g. negative points)."""


class InvalidOutcome(GradingError, ValueError):
    """Raised when an outcome record is malformed (e.g. unknown status)."""


class ResolutionError(GradingError):
    """Base for errors that name one or more offending test identities."""

    reason = "resolution failed"

    def __init__(self, identities: str | Iterable[str]) -> None:
        if isinstance(identities, str):
            identities = [identities]
        self.identities: tuple[str, ...] = tuple(sorted(set(identities)))
        super().__init__(f"{self.reason}: {', '.join(self.identities)}")


class DuplicateIdentity(ResolutionError):
    """Raised when two metadata records share the same test identity."""

    reason = "Duplicate graded test identity"


class DuplicateOutcome(ResolutionError):
    """Raised when a graded test has more than one execution outcome."""

    reason = "Multiple outcomes for graded test"


class MissingOutcome(ResolutionError):
    """Raised when a graded test has no execution outcome."""

    reason = "No outcome for graded test"
