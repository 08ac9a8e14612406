"""Tests for test execution models."""

import pytest
from pydantic import ValidationError

from scaledtest.flaky_analysis.models.test_execution import TestExecutionRecord


def test_test_execution_record_minimal() -> None:
    """TestExecutionRecord accepts minimal required fields."""
    record = TestExecutionRecord(test_name="logs in", status="passed", duration_ms=12.5)

    assert record.test_name == "logs in"
    assert record.suite_name == "Unknown"
    assert record.status == "passed"
    assert record.duration_ms == 12.5
    assert record.message is None
    assert record.identity_key == ("Unknown", "logs in")


def test_test_execution_record_all_statuses() -> None:
    """TestExecutionRecord accepts every CTRF status."""
    for status in ["passed", "failed", "skipped", "pending", "other"]:
        record = TestExecutionRecord(
            test_name="t",
            status=status,  # type: ignore[arg-type]
            duration_ms=0,
        )
        assert record.status == status


def test_test_execution_record_invalid_status() -> None:
    """TestExecutionRecord rejects unknown statuses."""
    with pytest.raises(ValidationError) as exc_info:
        TestExecutionRecord(
            test_name="t",
            status="flaky",  # type: ignore[arg-type]
            duration_ms=1,
        )
    assert "status" in str(exc_info.value)


@pytest.mark.parametrize("duration", [-1.0, float("nan"), float("inf")])
def test_test_execution_record_invalid_duration(duration: float) -> None:
    """TestExecutionRecord rejects negative and non-finite durations."""
    with pytest.raises(ValidationError) as exc_info:
        TestExecutionRecord(test_name="t", status="passed", duration_ms=duration)
    assert "duration_ms" in str(exc_info.value)


def test_test_execution_record_is_immutable() -> None:
    """TestExecutionRecord cannot be modified after creation."""
    record = TestExecutionRecord(test_name="t", status="passed", duration_ms=1)

    with pytest.raises(ValidationError):
        record.status = "failed"  # type: ignore[misc]
