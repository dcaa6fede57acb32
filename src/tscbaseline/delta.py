"""Comparison of a fresh summary set against a baseline."""

import logging
from dataclasses import replace
from typing import Mapping

from .diagnostics import ErrorSummary, ErrorSummaryMap

logger = logging.getLogger(__name__)


def get_new_errors(
    old_errors: Mapping[str, ErrorSummary], new_errors: Mapping[str, ErrorSummary]
) -> ErrorSummaryMap:
    """Return the summaries in ``new_errors`` not accounted for by ``old_errors``.

    Unknown identities are returned whole. Known identities whose count grew
    are returned with only the increase as their count. Identities that only
    exist in ``old_errors`` are never returned.
    """
    result: ErrorSummaryMap = {}

    for key, error in new_errors.items():
        old_error = old_errors.get(key)
        if old_error is None:
            result[key] = replace(error)
        elif old_error.count < error.count:
            result[key] = replace(error, count=error.count - old_error.count)

    logger.debug(
        "Computed new errors",
        extra={"baseline": len(old_errors), "current": len(new_errors), "new": len(result)},
    )
    return result


def get_total_errors_count(errors: Mapping[str, ErrorSummary]) -> int:
    """Sum the occurrence counts of every summary."""
    return sum(error.count for error in errors.values())
