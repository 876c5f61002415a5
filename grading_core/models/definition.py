"""Models for grading definitions loaded from grading.yaml files."""

from collections.abc import Sequence

from pydantic import ConfigDict, Field

from grading_core.models.base import Model
from grading_core.models.metadata import GradingMetadata, Tag
from grading_core.models.policy import GradingPolicy


class TagEntry(Model):
    """A tag as written in a grading file."""

    # Unquoted YAML numbers such as `value: 2` are read as text.
    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)

    name: str = Field(..., min_length=1, description="Tag name")
    value: str | None = Field(default=None, description="Optional tag value")


class GradedTestEntry(Model):
    """Grading metadata for one test as written in a grading file."""

    id: str = Field(..., min_length=1, description="Fully-qualified test name")
    points: int = Field(..., description="Points the test is worth")
    friendly_name: str = Field(default="", description="Human-readable description")
    tags: Sequence[TagEntry] = Field(default_factory=list, description="Tags")


class GradingDefinition(Model):
    """Complete grading definition loaded from grading.yaml."""

    version: str = Field(..., description="Grading definition schema version")
    policy: GradingPolicy = Field(
        default_factory=GradingPolicy, description="Scoring policy"
    )
    tests: Sequence[GradedTestEntry] = Field(
        default_factory=list, description="Graded tests"
    )

    def to_metadata_records(self) -> Sequence[GradingMetadata]:
        """Convert entries into validated metadata records.

        Raises:
            InvalidMetadata: If an entry has negative points

        """
        return [
            GradingMetadata(
                identity=entry.id,
                points=entry.points,
                friendly_name=entry.friendly_name,
                tags=[Tag(name=tag.name, value=tag.value) for tag in entry.tags],
            )
            for entry in self.tests
        ]
