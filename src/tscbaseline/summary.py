"""Aggregation of parsed diagnostics into counted summaries."""

import logging
from typing import Iterable, List, Mapping

from .diagnostics import ErrorSummary, ErrorSummaryMap, SpecificError, SpecificErrorsMap
from .identity import summary_hash

logger = logging.getLogger(__name__)


class SummaryAggregator:
    """Groups diagnostics by identity and indexes them by file."""

    def __init__(self, ignore_messages: bool = False):
        """Initialize an empty aggregation for the given identity mode."""
        self.ignore_messages = ignore_messages
        self.error_summary_map: ErrorSummaryMap = {}
        self.specific_errors_map: SpecificErrorsMap = {}

    def add(self, error: SpecificError) -> str:
        """Record one occurrence and return its identity hash."""
        candidate = ErrorSummary(
            file=error.file,
            code=error.code,
            message=None if self.ignore_messages else error.message,
            line=error.line,
            count=1,
        )
        key = summary_hash(candidate, self.ignore_messages)

        existing = self.error_summary_map.get(key)
        if existing is None:
            self.error_summary_map[key] = candidate
        else:
            existing.count += 1
            existing.line = error.line

        self.specific_errors_map.setdefault(error.file, []).append(error)
        return key

    def add_all(self, errors: Iterable[SpecificError]) -> "SummaryAggregator":
        """Record every occurrence in encounter order."""
        for error in errors:
            self.add(error)

        logger.debug(
            "Aggregated diagnostics",
            extra={
                "summaries": len(self.error_summary_map),
                "files": len(self.specific_errors_map),
            },
        )
        return self


def matching_specific_errors(
    summary: ErrorSummary,
    specific_errors_map: Mapping[str, List[SpecificError]],
    ignore_messages: bool = False,
) -> List[SpecificError]:
    """Return the concrete occurrences that belong to ``summary``, in text order."""
    return [
        error
        for error in specific_errors_map.get(summary.file, [])
        if error.code == summary.code
        and (ignore_messages or error.message == summary.message)
    ]
