"""Rendering of new-error summaries for people and for CI tooling."""

import logging
from typing import Any, Dict, List, Mapping

from .diagnostics import ErrorSummary, SpecificError
from .models import CodeQualityEntry, CodeQualityLines, CodeQualityLocation
from .summary import matching_specific_errors

logger = logging.getLogger(__name__)

CHECK_NAME = "tsc-baseline"
SEVERITY = "major"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def to_human_readable_text(
    error_summary_map: Mapping[str, ErrorSummary],
    specific_errors_map: Mapping[str, List[SpecificError]],
    ignore_messages: bool = False,
) -> str:
    """Describe each new summary followed by the occurrences behind it."""
    blocks = []

    for key, error in error_summary_map.items():
        specific_errors = matching_specific_errors(error, specific_errors_map, ignore_messages)

        lines = [f"File: {error.file}"]
        if error.message is not None:
            lines.append(f"Message: {error.message}")
        lines.append(f"Code: {error.code}")
        lines.append(f"Hash: {key}")
        lines.append(f"Count of new errors: {error.count}")
        lines.append(f"{_plural(len(specific_errors), 'current error')}:")
        lines.extend(specific.location for specific in specific_errors)

        blocks.append("\n".join(lines))

    return "\n\n".join(blocks).strip()


def to_gitlab_output_format(
    error_summary_map: Mapping[str, ErrorSummary],
) -> List[Dict[str, Any]]:
    """Build a GitLab code quality report from the new summaries."""
    entries = []

    for key, error in error_summary_map.items():
        description = error.code if error.message is None else f"{error.code}: {error.message}"
        entry = CodeQualityEntry(
            description=description,
            check_name=CHECK_NAME,
            fingerprint=key,
            severity=SEVERITY,
            location=CodeQualityLocation(
                path=error.file,
                lines=CodeQualityLines(begin=error.line or 1),
            ),
        )
        entries.append(entry.model_dump())

    logger.debug("Built code quality report", extra={"entries": len(entries)})
    return entries


def format_check_summary(new_errors_count: int, old_errors_count: int) -> str:
    """One-line tally printed after the human report."""
    return (
        f"{_plural(new_errors_count, 'new error')} found. "
        f"{_plural(old_errors_count, 'error')} already in baseline."
    )


def format_human_check_output(
    error_summary_map: Mapping[str, ErrorSummary],
    specific_errors_map: Mapping[str, List[SpecificError]],
    new_errors_count: int,
    old_errors_count: int,
    ignore_messages: bool = False,
) -> str:
    """Full human report of a check run."""
    header = "\nNew errors found:" if new_errors_count > 0 else ""
    body = to_human_readable_text(error_summary_map, specific_errors_map, ignore_messages)
    return f"{header}\n{body}\n\n{format_check_summary(new_errors_count, old_errors_count)}"
