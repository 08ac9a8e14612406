"""Models for recurring failure message patterns."""

from typing import Literal

from pydantic import BaseModel, Field

Severity = Literal["critical", "high", "medium", "low"]


class ErrorPattern(BaseModel):
    """A normalized failure message and the tests that produced it."""

    error: str = Field(..., description="Normalized message, truncated to 50 chars")
    count: int = Field(..., description="Number of failures with this message")
    tests: list[str] = Field(
        default_factory=list, description="Affected tests as '<suite> - <name>'"
    )
    severity: Severity = Field(..., description="Severity bucket")
