"""Data models for test executions, reports, and analysis results."""

from scaledtest.flaky_analysis.models.analysis_config import AnalysisConfig
from scaledtest.flaky_analysis.models.ctrf import (
    CtrfReport,
    CtrfResults,
    CtrfSummary,
    CtrfTest,
    CtrfTool,
)
from scaledtest.flaky_analysis.models.error_pattern import ErrorPattern, Severity
from scaledtest.flaky_analysis.models.flaky_test_result import (
    FlakySummary,
    FlakyTestResult,
)
from scaledtest.flaky_analysis.models.test_execution import (
    ExecutionStatus,
    TestExecutionRecord,
)

__all__ = [
    "AnalysisConfig",
    "CtrfReport",
    "CtrfResults",
    "CtrfSummary",
    "CtrfTest",
    "CtrfTool",
    "ErrorPattern",
    "ExecutionStatus",
    "FlakySummary",
    "FlakyTestResult",
    "Severity",
    "TestExecutionRecord",
]
