"""Tests for GradingDefinition.to_metadata_records method."""

from grading_core.models.definition import GradedTestEntry, GradingDefinition, TagEntry
from grading_core.models.metadata import GradingMetadata, Tag
from grading_core.testing.factories import (
    GradedTestEntryFactory,
    GradingDefinitionFactory,
)


def test_single_entry() -> None:
    """Creates one record per entry."""
    definition = GradingDefinition(
        version="1.0",
        tests=[
            GradedTestEntry(
                id="tests.test_io.test_read",
                points=10,
                friendly_name="Reads input",
                tags=[TagEntry(name="category", value="io")],
            )
        ],
    )

    records = definition.to_metadata_records()

    assert records == [
        GradingMetadata(
            identity="tests.test_io.test_read",
            points=10,
            friendly_name="Reads input",
            tags=[Tag(name="category", value="io")],
        )
    ]


def test_preserves_entry_order() -> None:
    """Records follow the order of entries in the file."""
    entries = GradedTestEntryFactory.batch(5)
    definition = GradingDefinitionFactory.build(tests=entries)

    records = definition.to_metadata_records()

    assert [r.identity for r in records] == [e.id for e in entries]
    assert all(r.points == 5 for r in records)


def test_empty_tests() -> None:
    """Returns empty list for definition with no tests."""
    definition = GradingDefinition(version="1.0")

    assert definition.to_metadata_records() == []


def test_tag_without_value_serializes_to_null() -> None:
    """A bare tag dumps its value as null."""
    entry = TagEntry(name="slow")

    data = entry.model_dump(mode="json")

    assert data == {"name": "slow", "value": None}


def test_numeric_tag_value_is_read_as_text() -> None:
    """Unquoted numeric tag values become strings."""
    entry = TagEntry.model_validate({"name": "level", "value": 2})

    assert entry.value == "2"
