"""Read test outcomes from JUnit XML reports."""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from pathlib import Path

from grading_core.models.outcome import OutcomeStatus, TestOutcome

log = logging.getLogger(__name__)

ELEMENT_STATUS: Sequence[tuple[str, OutcomeStatus]] = (
    ("failure", "failed"),
    ("error", "errored"),
    ("skipped", "skipped"),
)


def testcase_identity(testcase: ET.Element) -> str:
    """Build the fully-qualified test name for a <testcase> element."""
    name = testcase.get("name", "")
    classname = testcase.get("classname", "")
    return f"{classname}.{name}" if classname else name


def _outcome(testcase: ET.Element) -> TestOutcome:
    status: OutcomeStatus = "passed"
    detail: str | None = None
    for tag, candidate in ELEMENT_STATUS:
        if (element := testcase.find(tag)) is not None:
            status = candidate
            parts = [element.get("message", ""), (element.text or "").strip()]
            detail = "\n".join(part for part in parts if part) or None
            break

    time_str = testcase.get("time", "")
    try:
        duration = float(time_str) if time_str else 0.0
    except ValueError:
        log.debug("Ignoring unparseable test time %r", time_str)
        duration = 0.0

    return TestOutcome(
        identity=testcase_identity(testcase),
        status=status,
        detail=detail,
        duration=duration,
    )


def parse_junit_xml(content: str | bytes) -> Sequence[TestOutcome]:
    """Parse one JUnit XML document into outcomes.

    Accepts both a <testsuites> root and a bare <testsuite> root.

    Raises:
        ValueError: If the document is not well-formed XML

    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ValueError(f"Invalid JUnit XML: {e}") from e

    return [_outcome(testcase) for testcase in root.iter("testcase")]


def load_junit_reports(directory: Path) -> Sequence[TestOutcome]:
    """Load outcomes from every *.xml report in a directory, in file order.

    A missing directory yields no outcomes, as happens when the tests never
    compiled or ran.

    Raises:
        ValueError: If a report is not well-formed XML

    """
    if not directory.is_dir():
        log.warning("JUnit report directory not found: %s", directory)
        return []

    outcomes: list[TestOutcome] = []
    for report in sorted(directory.glob("*.xml")):
        try:
            outcomes.extend(parse_junit_xml(report.read_bytes()))
        except ValueError as e:
            raise ValueError(f"{report}: {e}") from e

    log.info("Loaded %d outcome(s) from %s", len(outcomes), directory)
    return outcomes
