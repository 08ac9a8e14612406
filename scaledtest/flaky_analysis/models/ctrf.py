"""Models for Common Test Report Format (CTRF) documents."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CtrfTool(BaseModel):
    """Tool that produced the report."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Test tool name (e.g., 'jest')")
    version: str | None = Field(default=None, description="Test tool version")


class CtrfSummary(BaseModel):
    """Aggregate counts for one report."""

    model_config = ConfigDict(extra="allow")

    tests: int = Field(..., ge=0)
    passed: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    pending: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)
    other: int = Field(default=0, ge=0)
    start: int = Field(..., description="Run start, epoch milliseconds")
    stop: int = Field(..., description="Run stop, epoch milliseconds")


class CtrfTest(BaseModel):
    """Individual test entry in a report."""

    __test__ = False

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Test title")
    status: Literal["passed", "failed", "skipped", "pending", "other"]
    duration: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Duration in milliseconds"
    )
    suite: str | None = Field(default=None, description="Suite name")
    message: str | None = Field(default=None, description="Failure message")
    trace: str | None = Field(default=None, description="Stack trace")
    flaky: bool | None = Field(default=None, description="Flagged flaky by the tool")
    retries: int | None = Field(default=None, ge=0)


class CtrfResults(BaseModel):
    """Body of a CTRF report."""

    model_config = ConfigDict(extra="allow")

    tool: CtrfTool
    summary: CtrfSummary
    tests: list[CtrfTest] = Field(default_factory=list)
    environment: dict[str, object] | None = None


class CtrfReport(BaseModel):
    """Top-level CTRF document."""

    model_config = ConfigDict(extra="allow")

    results: CtrfResults
