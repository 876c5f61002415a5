"""Load grading definitions from YAML files."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from grading_core.models.definition import GradingDefinition

log = logging.getLogger(__name__)


def load_grading_definition(path: Path) -> GradingDefinition:
    """Load and validate a grading.yaml file.

    Args:
        path: Path to the grading file

    Returns:
        The parsed grading definition

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, not valid YAML, or fails validation

    """
    if not path.is_file():
        raise FileNotFoundError(f"Grading file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty grading file: {path}")

    try:
        definition = GradingDefinition.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid grading definition schema in {path}: {e}") from e

    log.info("Loaded %d graded test(s) from %s", len(definition.tests), path)
    return definition
