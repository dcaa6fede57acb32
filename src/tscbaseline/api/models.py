"""Pydantic models for TSC Baseline API requests and responses."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ..config import ErrorFormat


class BaselineRequest(BaseModel):
    """Request model for building a baseline document."""

    output: str = Field(
        ...,
        description="Raw compiler output",
        examples=["src/a.ts(10,2): error TS2322: Type 'number' is not assignable to type 'string'."],
    )
    ignore_messages: bool = Field(
        False,
        description="Identify errors by file and code only",
    )


class CheckRequest(BaseModel):
    """Request model for checking compiler output against a baseline."""

    output: str = Field(
        ...,
        description="Raw compiler output",
    )
    baseline: Dict[str, Any] = Field(
        ...,
        description="Baseline document as written by 'save'",
    )
    error_format: str = Field(
        ErrorFormat.HUMAN.value,
        description="Report format (human or gitlab)",
    )
    ignore_messages: Optional[bool] = Field(
        None,
        description="Expected identity mode; must match the baseline when given",
    )

    @field_validator("error_format")
    @classmethod
    def error_format_must_be_known(cls, v):
        """Validate the requested report format."""
        valid = {fmt.value for fmt in ErrorFormat}
        if v not in valid:
            raise ValueError(f"error_format must be one of: {', '.join(sorted(valid))}")
        return v


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["2.0.0"])


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(..., examples=["2.0.0"])
    api_version: str = Field(..., examples=["v1"])
    baseline_file_version: int = Field(..., examples=[2])
    supported_formats: list = Field(
        default_factory=lambda: [fmt.value for fmt in ErrorFormat]
    )
