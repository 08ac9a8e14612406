"""Load CTRF reports from disk and flatten them into execution records."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from scaledtest.flaky_analysis.models.ctrf import CtrfReport
from scaledtest.flaky_analysis.models.test_execution import TestExecutionRecord

logger = logging.getLogger(__name__)

DEFAULT_SUITE_NAME = "Unknown"


def flatten_report(report: CtrfReport) -> list[TestExecutionRecord]:
    """Convert each test entry of a report into an execution record."""
    return [
        TestExecutionRecord(
            test_name=test.name,
            suite_name=test.suite or DEFAULT_SUITE_NAME,
            status=test.status,
            duration_ms=test.duration,
            message=test.message,
        )
        for test in report.results.tests
    ]


async def load_report(report_path: Path) -> CtrfReport:
    """Load and validate a single CTRF report.

    Args:
        report_path: Path to a CTRF JSON file

    Returns:
        Parsed report

    Raises:
        FileNotFoundError: If the report file doesn't exist
        ValueError: If the file is empty, not JSON, or doesn't match the schema

    """
    if not report_path.is_file():
        raise FileNotFoundError(f"Report file not found: {report_path}")

    content = report_path.read_text(encoding="utf-8")
    if not content.strip():
        raise ValueError(f"Empty report file: {report_path}")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {report_path}: {e}") from e

    try:
        return CtrfReport.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid CTRF report schema in {report_path}: {e}") from e


def _expand_paths(paths: Sequence[Path]) -> list[Path]:
    """Replace directories with the JSON files they contain."""
    expanded: list[Path] = []
    for path in paths:
        if path.is_dir():
            expanded.extend(sorted(path.glob("*.json")))
        else:
            expanded.append(path)
    return expanded


async def load_all_reports(paths: Sequence[Path]) -> list[CtrfReport]:
    """Load every report under the given files and directories.

    Args:
        paths: Report files, or directories containing ``*.json`` reports

    Returns:
        Parsed reports; missing or invalid files are skipped

    """
    reports: list[CtrfReport] = []

    for report_path in _expand_paths(paths):
        try:
            reports.append(await load_report(report_path))
        except (FileNotFoundError, ValueError) as e:
            logger.warning(f"Skipping report: {e}")
            continue

    logger.info(f"Loaded {len(reports)} reports")
    return reports


async def load_execution_records(paths: Sequence[Path]) -> list[TestExecutionRecord]:
    """Load reports and flatten them into one list of execution records.

    Raises:
        ValueError: If paths were given but none held a valid report

    """
    reports = await load_all_reports(paths)
    if paths and not reports:
        raise ValueError(
            "No valid CTRF reports found in: " + ", ".join(str(p) for p in paths)
        )

    records: list[TestExecutionRecord] = []
    for report in reports:
        records.extend(flatten_report(report))

    logger.info(f"Flattened {len(records)} test executions")
    return records
