"""Diagnostic records shared by the parser, aggregator and formatters."""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class SpecificError:
    """One concrete diagnostic occurrence as printed by the compiler."""

    file: str
    line: int
    column: int
    code: str
    message: str

    @property
    def location(self) -> str:
        """Render the occurrence as ``file(line,column)``."""
        return f"{self.file}({self.line},{self.column})"


@dataclass
class ErrorSummary:
    """Identity-deduplicated diagnostic with an occurrence count."""

    file: str
    code: str
    message: Optional[str] = None
    line: Optional[int] = None
    count: int = 1


ErrorSummaryMap = Dict[str, ErrorSummary]
SpecificErrorsMap = Dict[str, List[SpecificError]]
