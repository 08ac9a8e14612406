"""Classify tests as flaky from their execution history."""

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from scaledtest.flaky_analysis.models.flaky_test_result import (
    FlakySummary,
    FlakyTestResult,
)
from scaledtest.flaky_analysis.models.test_execution import TestExecutionRecord

logger = logging.getLogger(__name__)

MIN_RUNS_FOR_ANALYSIS = 3
FLAKY_SCORE_LOWER = 10
FLAKY_SCORE_UPPER = 90
MAX_DISPLAY_NAME_LENGTH = 30

ScoreBand = Literal["flaky", "high", "medium", "low"]


@dataclass
class TestHistory:
    """Tally of all executions sharing one identity key."""

    __test__ = False

    passes: int = 0
    failures: int = 0
    skips: int = 0
    durations: list[float] = field(default_factory=list)

    @property
    def total_runs(self) -> int:
        """Runs that count toward the flaky score (skips excluded)."""
        return self.passes + self.failures


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def truncate_name(name: str, max_length: int = MAX_DISPLAY_NAME_LENGTH) -> str:
    """Shorten a test name for display, appending an ellipsis."""
    if len(name) > max_length:
        return name[:max_length] + "..."
    return name


def build_test_histories(
    records: Iterable[TestExecutionRecord],
) -> dict[tuple[str, str], TestHistory]:
    """Group execution records by (suite, test name) and tally outcomes.

    Args:
        records: Execution records in any order

    Returns:
        Mapping of identity key to its aggregated history

    """
    histories: dict[tuple[str, str], TestHistory] = {}

    for record in records:
        history = histories.setdefault(record.identity_key, TestHistory())

        if record.status == "passed":
            history.passes += 1
        elif record.status == "failed":
            history.failures += 1
        elif record.status == "skipped":
            history.skips += 1

        history.durations.append(record.duration_ms)

    return histories


def average_duration(durations: Sequence[float]) -> int:
    """Mean duration in whole milliseconds, ignoring unusable values."""
    usable = [d for d in durations if math.isfinite(d) and d >= 0]
    if not usable:
        return 0
    return round_half_up(sum(usable) / len(usable))


def _sort_key(result: FlakyTestResult) -> tuple[bool, int]:
    return (not result.is_flaky, -result.flaky_score)


def classify_flaky_tests(
    records: Iterable[TestExecutionRecord],
) -> list[FlakyTestResult]:
    """Classify every test with a failure history, flaky tests first.

    Tests with fewer than three passed or failed runs are ignored, as are
    tests that never failed. A test is flaky when its failure percentage
    lies strictly between 10 and 90.

    Args:
        records: Execution records for any number of tests

    Returns:
        Results sorted by flakiness, then failure percentage descending

    """
    histories = build_test_histories(records)
    results: list[FlakyTestResult] = []

    # Sorted keys keep ties in a fixed order.
    for (suite_name, test_name), history in sorted(histories.items()):
        total_runs = history.total_runs
        if total_runs < MIN_RUNS_FOR_ANALYSIS:
            continue

        flaky_score = round_half_up(history.failures / total_runs * 100)
        if flaky_score == 0:
            continue

        is_flaky = FLAKY_SCORE_LOWER < flaky_score < FLAKY_SCORE_UPPER
        results.append(
            FlakyTestResult(
                test_name=truncate_name(test_name),
                suite_name=suite_name,
                total_runs=total_runs,
                passed=history.passes,
                failed=history.failures,
                skipped=history.skips,
                flaky_score=flaky_score,
                avg_duration_ms=average_duration(history.durations),
                is_flaky=is_flaky,
            )
        )

    results.sort(key=_sort_key)
    logger.info(
        f"Classified {len(histories)} tests: {len(results)} with failures, "
        f"{sum(1 for r in results if r.is_flaky)} flaky"
    )
    return results


def score_band(result: FlakyTestResult) -> ScoreBand:
    """Bucket a result for color-coding."""
    if result.is_flaky:
        return "flaky"
    if result.flaky_score > 50:
        return "high"
    if result.flaky_score > 20:
        return "medium"
    return "low"


def summarize_flaky_tests(results: Sequence[FlakyTestResult]) -> FlakySummary:
    """Compute dashboard summary figures for classified tests."""
    if not results:
        return FlakySummary()

    return FlakySummary(
        total=len(results),
        truly_flaky=sum(1 for r in results if r.is_flaky),
        high_failure=sum(1 for r in results if r.is_high_failure),
        total_runs=sum(r.total_runs for r in results),
        avg_duration_ms=round_half_up(
            sum(r.avg_duration_ms for r in results) / len(results)
        ),
    )
