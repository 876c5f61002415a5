"""Models for per-test grading metadata."""

import re
from dataclasses import dataclass, field

from grading_core.errors import InvalidMetadata

_PARAMS_RE = re.compile(r"[\[(].*$")
_SEPARATOR_RE = re.compile(r"::|[./]")


@dataclass(frozen=True, kw_only=True)
class Tag:
    """A named classification on a graded test, with an optional value."""

    name: str
    value: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidMetadata("Tag name must not be empty")

    def sort_key(self) -> tuple[str, str]:
        """Return a key ordering tags by name, then value."""
        return (self.name, self.value or "")


@dataclass(frozen=True, kw_only=True)
class GradingMetadata:
    """Resolved grading facts for one test.

    Identical (name, value) tags collapse into one entry, while the same tag
    name may appear with several distinct values.
    """

    identity: str
    points: int
    friendly_name: str = ""
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.identity:
            raise InvalidMetadata("Graded test identity must not be empty")
        if isinstance(self.points, bool) or not isinstance(self.points, int):
            raise InvalidMetadata(
                f"Points for {self.identity} must be an integer, got {self.points!r}"
            )
        if self.points < 0:
            raise InvalidMetadata(
                f"Points for {self.identity} must be >= 0, got {self.points}"
            )
        tags = tuple(self.tags)
        if invalid := [tag for tag in tags if not isinstance(tag, Tag)]:
            raise InvalidMetadata(
                f"Tags for {self.identity} must be Tag instances, got {invalid!r}"
            )
        object.__setattr__(self, "tags", frozenset(tags))

    @property
    def description(self) -> str:
        """Friendly name, falling back to the test's short name."""
        if self.friendly_name:
            return self.friendly_name
        base = _PARAMS_RE.sub("", self.identity) or self.identity
        return _SEPARATOR_RE.split(base)[-1] or self.identity

    @property
    def tag_names(self) -> tuple[str, ...]:
        """Distinct tag names, sorted."""
        return tuple(sorted({tag.name for tag in self.tags}))

    def sorted_tags(self) -> tuple[Tag, ...]:
        """Tags in a stable order for display."""
        return tuple(sorted(self.tags, key=Tag.sort_key))
