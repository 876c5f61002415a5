"""Test factories for generating grading data."""

from uuid import uuid4

from polyfactory import Use
from polyfactory.factories import DataclassFactory
from polyfactory.factories.pydantic_factory import ModelFactory

from grading_core.models.definition import (
    GradedTestEntry,
    GradingDefinition,
    TagEntry,
)
from grading_core.models.metadata import GradingMetadata
from grading_core.models.outcome import TestOutcome
from grading_core.models.policy import GradingPolicy


def random_identity() -> str:
    return f"tests.test_module.test_{uuid4().hex[:8]}"


class GradingMetadataFactory(DataclassFactory[GradingMetadata]):
    """Factory for GradingMetadata."""

    __model__ = GradingMetadata

    identity = Use(random_identity)
    points = 10
    friendly_name = ""
    tags = Use(frozenset)


class TestOutcomeFactory(DataclassFactory[TestOutcome]):
    """Factory for TestOutcome."""

    __test__ = False
    __model__ = TestOutcome

    identity = Use(random_identity)
    status = "passed"
    detail = None
    duration = 0.0


class TagEntryFactory(ModelFactory[TagEntry]):
    """Factory for TagEntry."""


class GradedTestEntryFactory(ModelFactory[GradedTestEntry]):
    """Factory for GradedTestEntry."""

    id = Use(random_identity)
    points = 5
    tags = Use(list[TagEntry])


class GradingDefinitionFactory(ModelFactory[GradingDefinition]):
    """Factory for GradingDefinition."""

    policy = Use(GradingPolicy)
    tests = Use(list[GradedTestEntry])
