"""Models for flaky test classification output."""

from pydantic import BaseModel, Field


class FlakyTestResult(BaseModel):
    """Classification of one test across its execution history."""

    __test__ = False

    test_name: str = Field(..., description="Display name, truncated to 30 chars")
    suite_name: str = Field(..., description="Suite the test belongs to")
    total_runs: int = Field(..., description="Passed plus failed runs")
    passed: int = Field(..., description="Number of passed runs")
    failed: int = Field(..., description="Number of failed runs")
    skipped: int = Field(..., description="Number of skipped runs")
    flaky_score: int = Field(..., description="Failure percentage of counted runs")
    avg_duration_ms: int = Field(..., description="Mean duration of all runs")
    is_flaky: bool = Field(..., description="Whether results are inconsistent")

    @property
    def is_high_failure(self) -> bool:
        """Whether the test fails more often than it passes."""
        return self.flaky_score > 50


class FlakySummary(BaseModel):
    """Aggregate figures over a list of flaky test results."""

    total: int = 0
    truly_flaky: int = 0
    high_failure: int = 0
    total_runs: int = 0
    avg_duration_ms: int = 0
