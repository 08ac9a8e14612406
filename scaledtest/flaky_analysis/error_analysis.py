"""Group failure messages into recurring error patterns."""

import logging
import re
from collections.abc import Iterable, Sequence

from scaledtest.flaky_analysis.models.error_pattern import ErrorPattern, Severity
from scaledtest.flaky_analysis.models.test_execution import TestExecutionRecord

logger = logging.getLogger(__name__)

MAX_ERROR_LENGTH = 50

# Checked in order; the first matching category wins.
ERROR_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Timeout": ("timeout", "timed out"),
    "Assertion": ("assert", "expect"),
    "Network": ("network", "connection", "fetch"),
    "Authentication": ("auth", "login", "token"),
    "Database": ("database", "sql", "query"),
    "Element Not Found": ("element", "not found", "selector"),
    "Permission": ("permission", "forbidden", "access"),
}
OTHER_CATEGORY = "Other"

_NUMBER_RE = re.compile(r"\d+")
_PATH_RE = re.compile(r"/\S+")
_LINE_RE = re.compile(r"line \d+", re.IGNORECASE)
_LOCATION_RE = re.compile(r"at .+")


def normalize_error_message(message: str) -> str:
    """Strip numbers, file paths, and stack locations from a message.

    Args:
        message: Raw failure message

    Returns:
        Lowercased message with variable parts replaced by placeholders

    """
    normalized = _NUMBER_RE.sub("N", message)
    normalized = _PATH_RE.sub("/PATH", normalized)
    normalized = _LINE_RE.sub("line N", normalized)
    normalized = _LOCATION_RE.sub("at LOCATION", normalized)
    return normalized.lower().strip()


def truncate_error(error: str, max_length: int = MAX_ERROR_LENGTH) -> str:
    """Shorten an error message for display."""
    if len(error) > max_length:
        return error[:max_length] + "..."
    return error


def get_severity(count: int, unique_tests: int) -> Severity:
    """Bucket an error pattern by how often and how widely it occurs."""
    if count >= 10 or unique_tests >= 5:
        return "critical"
    if count >= 5 or unique_tests >= 3:
        return "high"
    if count >= 3 or unique_tests >= 2:
        return "medium"
    return "low"


def analyze_error_patterns(
    records: Iterable[TestExecutionRecord],
) -> list[ErrorPattern]:
    """Collect failed executions into patterns, most frequent first."""
    counts: dict[str, int] = {}
    affected: dict[str, set[str]] = {}

    for record in records:
        if record.status != "failed" or not record.message:
            continue

        error = normalize_error_message(record.message)
        counts[error] = counts.get(error, 0) + 1
        affected.setdefault(error, set()).add(
            f"{record.suite_name} - {record.test_name}"
        )

    patterns = [
        ErrorPattern(
            error=truncate_error(error),
            count=count,
            tests=sorted(affected[error]),
            severity=get_severity(count, len(affected[error])),
        )
        for error, count in counts.items()
    ]
    patterns.sort(key=lambda p: (-p.count, p.error))

    logger.info(f"Found {len(patterns)} error patterns")
    return patterns


def categorize_errors(patterns: Sequence[ErrorPattern]) -> dict[str, int]:
    """Sum pattern counts into broad failure categories."""
    categories = dict.fromkeys([*ERROR_CATEGORIES, OTHER_CATEGORY], 0)

    for pattern in patterns:
        message = pattern.error.lower()
        for category, keywords in ERROR_CATEGORIES.items():
            if any(keyword in message for keyword in keywords):
                categories[category] += pattern.count
                break
        else:
            categories[OTHER_CATEGORY] += pattern.count

    return categories
