"""Pydantic models for the persisted baseline and the structured report."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .diagnostics import ErrorSummary, ErrorSummaryMap


class SummaryRecord(BaseModel):
    """One persisted error summary."""

    model_config = ConfigDict(extra="ignore")

    file: str
    code: str
    message: Optional[str] = None
    line: Optional[int] = None
    count: int = Field(1, ge=1)

    def to_summary(self) -> ErrorSummary:
        """Convert to the in-memory summary type."""
        return ErrorSummary(
            file=self.file,
            code=self.code,
            message=self.message,
            line=self.line,
            count=self.count,
        )


class BaselineMeta(BaseModel):
    """Metadata block of a baseline document."""

    model_config = ConfigDict(populate_by_name=True)

    baseline_file_version: int = Field(0, alias="baselineFileVersion")
    ignore_messages: bool = Field(False, alias="ignoreMessages")


class BaselineDocument(BaseModel):
    """A versioned baseline document as stored on disk."""

    meta: BaselineMeta
    errors: Dict[str, SummaryRecord] = Field(default_factory=dict)

    def to_summary_map(self) -> ErrorSummaryMap:
        """Return the stored summaries keyed by identity hash."""
        return {key: record.to_summary() for key, record in self.errors.items()}


class CodeQualityLines(BaseModel):
    """Line range of a code quality entry."""

    begin: int


class CodeQualityLocation(BaseModel):
    """Location of a code quality entry."""

    path: str
    lines: CodeQualityLines


class CodeQualityEntry(BaseModel):
    """GitLab code quality report entry."""

    description: str
    check_name: str
    fingerprint: str
    severity: str
    location: CodeQualityLocation
