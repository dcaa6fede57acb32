"""Parsing of raw compiler output into structured diagnostics."""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from .diagnostics import ErrorSummaryMap, SpecificError, SpecificErrorsMap
from .summary import SummaryAggregator

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Everything extracted from one blob of compiler output."""

    errors: List[SpecificError] = field(default_factory=list)
    specific_errors_map: SpecificErrorsMap = field(default_factory=dict)
    error_summary_map: ErrorSummaryMap = field(default_factory=dict)


class DiagnosticParser:
    """Turns ``file(line,col): error CODE: message`` lines into records.

    Lines that do not match the grammar exactly (runner banners, footers,
    warnings) are discarded without complaint.
    """

    def __init__(self, ignore_messages: bool = False):
        """Initialize parser for the given identity mode."""
        self.ignore_messages = ignore_messages
        self.error_pattern = re.compile(
            r"(?P<file>.+?)\((?P<line>\d+),(?P<column>\d+)\): "
            r"error (?P<code>\w+): (?P<message>.+)"
        )

    def parse_line(self, line: str) -> Optional[SpecificError]:
        """Parse a single line, returning None when it is not a diagnostic."""
        match = self.error_pattern.fullmatch(line)
        if not match:
            return None

        return SpecificError(
            file=match.group("file"),
            line=int(match.group("line")),
            column=int(match.group("column")),
            code=match.group("code"),
            message=match.group("message"),
        )

    def parse_lines(self, error_log: str) -> List[SpecificError]:
        """Parse every diagnostic line of ``error_log`` in encounter order."""
        errors = []
        skipped = 0

        for line in error_log.splitlines():
            error = self.parse_line(line)
            if error is None:
                skipped += 1
                continue
            errors.append(error)

        logger.debug(
            "Parsed compiler output",
            extra={"diagnostics": len(errors), "skipped_lines": skipped},
        )
        return errors

    def parse(self, error_log: str) -> ParseResult:
        """Parse ``error_log`` and aggregate the diagnostics by identity."""
        errors = self.parse_lines(error_log)
        aggregator = SummaryAggregator(self.ignore_messages).add_all(errors)
        return ParseResult(
            errors=errors,
            specific_errors_map=aggregator.specific_errors_map,
            error_summary_map=aggregator.error_summary_map,
        )


def parse_typescript_errors(error_log: str, ignore_messages: bool = False) -> ParseResult:
    """Parse compiler output with a fresh parser."""
    return DiagnosticParser(ignore_messages).parse(error_log)
