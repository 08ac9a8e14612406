"""Configuration model for analysis runs."""

from pydantic import BaseModel, Field


class AnalysisConfig(BaseModel):
    """Presentation options loaded from an analysis config file."""

    limit: int | None = Field(
        default=10, ge=1, description="Maximum flaky tests to emit (None for all)"
    )
    include_non_flaky: bool = Field(
        default=True, description="Also emit tests with failures that are not flaky"
    )
    error_limit: int | None = Field(
        default=10, ge=1, description="Maximum error patterns to emit (None for all)"
    )
