"""Command operations shared by the CLI and the HTTP service."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .config import BaselineConfig, ErrorFormat
from .delta import get_new_errors, get_total_errors_count
from .diagnostics import ErrorSummaryMap, SpecificErrorsMap
from .errors import IdentityModeMismatchError, MissingHashError
from .models import BaselineDocument
from .parser import parse_typescript_errors
from .report import format_human_check_output, to_gitlab_output_format
from .serialize import DeterministicSerializer
from .store import (
    add_hash_to_baseline,
    ensure_baseline_version_current,
    load_baseline,
    parse_baseline_document,
    remove_baseline,
    write_baseline,
)

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of comparing fresh compiler output against a baseline."""

    new_errors: ErrorSummaryMap = field(default_factory=dict)
    specific_errors_map: SpecificErrorsMap = field(default_factory=dict)
    new_errors_count: int = 0
    baseline_errors_count: int = 0
    ignore_messages: bool = False

    @property
    def has_new_errors(self) -> bool:
        """Whether the check should fail."""
        return self.new_errors_count > 0

    def render(self, error_format: str = ErrorFormat.HUMAN.value) -> Any:
        """Render the result in the requested format."""
        if error_format == ErrorFormat.GITLAB.value:
            return to_gitlab_output_format(self.new_errors)
        return format_human_check_output(
            self.new_errors,
            self.specific_errors_map,
            self.new_errors_count,
            self.baseline_errors_count,
            self.ignore_messages,
        )


def save(error_log: str, config: BaselineConfig) -> ErrorSummaryMap:
    """Parse ``error_log`` and store it as the new baseline."""
    ignore_messages = config.identity_ignores_messages
    result = parse_typescript_errors(error_log, ignore_messages)
    write_baseline(result.error_summary_map, config.path, ignore_messages)
    logger.info(
        "Baseline saved",
        extra={"path": str(config.path), "summaries": len(result.error_summary_map)},
    )
    return result.error_summary_map


def add(error_hash: Optional[str], config: BaselineConfig) -> None:
    """Accept one occurrence of ``error_hash`` into the stored baseline."""
    if not error_hash or not error_hash.strip():
        raise MissingHashError()
    add_hash_to_baseline(error_hash.strip(), config.path)


def compare(error_log: str, document: BaselineDocument, config: BaselineConfig) -> CheckResult:
    """Compare ``error_log`` against an already loaded, current baseline."""
    baseline_ignore_messages = document.meta.ignore_messages
    if (
        config.ignore_messages is not None
        and config.ignore_messages != baseline_ignore_messages
    ):
        raise IdentityModeMismatchError(
            str(config.path), baseline_ignore_messages, config.ignore_messages
        )

    old_errors = document.to_summary_map()
    parsed = parse_typescript_errors(error_log, baseline_ignore_messages)
    new_errors = get_new_errors(old_errors, parsed.error_summary_map)

    result = CheckResult(
        new_errors=new_errors,
        specific_errors_map=parsed.specific_errors_map,
        new_errors_count=get_total_errors_count(new_errors),
        baseline_errors_count=get_total_errors_count(old_errors),
        ignore_messages=baseline_ignore_messages,
    )
    logger.info(
        "Check completed",
        extra={
            "new_errors": result.new_errors_count,
            "baseline_errors": result.baseline_errors_count,
        },
    )
    return result


def check(error_log: str, config: BaselineConfig) -> CheckResult:
    """Compare ``error_log`` against the baseline stored at ``config.path``."""
    return compare(error_log, load_baseline(config.path), config)


def check_document(
    error_log: str, raw_document: Dict[str, Any], config: BaselineConfig
) -> CheckResult:
    """Compare ``error_log`` against a baseline given as raw JSON."""
    ensure_baseline_version_current(raw_document, config.path)
    return compare(error_log, parse_baseline_document(raw_document, config.path), config)


def clear(config: BaselineConfig) -> None:
    """Delete the stored baseline."""
    remove_baseline(config.path)


def build_document(error_log: str, config: BaselineConfig) -> Dict[str, Any]:
    """Baseline document that ``save`` would write, without touching disk."""
    ignore_messages = config.identity_ignores_messages
    result = parse_typescript_errors(error_log, ignore_messages)
    return DeterministicSerializer(ignore_messages).serialize_document(result.error_summary_map)
