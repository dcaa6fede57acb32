"""Deterministic serialization for TSC Baseline."""

import json
import logging
from typing import Any, Dict, Mapping

from .diagnostics import ErrorSummary

logger = logging.getLogger(__name__)

CURRENT_BASELINE_VERSION = 2


def canonical_json_bytes(obj: Any) -> bytes:
    """Encode ``obj`` as canonical JSON bytes (sorted keys, compact, UTF-8)."""
    json_str = json.dumps(
        obj,
        ensure_ascii=False,
        sort_keys=True,
        separators=(",", ":"),
        indent=None,
    )
    return json_str.encode("utf-8", errors="replace")


class DeterministicSerializer:
    """Builds baseline documents and renders them as stable JSON text."""

    def __init__(self, ignore_messages: bool = False):
        """Initialize with the identity mode the document is written in."""
        self.ignore_messages = ignore_messages

    def serialize_document(self, summaries: Mapping[str, ErrorSummary]) -> Dict[str, Any]:
        """Serialize a summary map into a versioned baseline document."""
        logger.debug(
            "Serializing baseline document",
            extra={"summaries": len(summaries), "ignore_messages": self.ignore_messages},
        )
        return {
            "meta": {
                "baselineFileVersion": CURRENT_BASELINE_VERSION,
                "ignoreMessages": self.ignore_messages,
            },
            "errors": {
                key: self.serialize_summary(summary) for key, summary in summaries.items()
            },
        }

    def serialize_summary(self, summary: ErrorSummary) -> Dict[str, Any]:
        """Serialize a single summary to dictionary."""
        summary_data: Dict[str, Any] = {
            "file": summary.file,
            "code": summary.code,
        }

        if summary.message is not None and not self.ignore_messages:
            summary_data["message"] = summary.message

        if summary.line is not None:
            summary_data["line"] = summary.line

        summary_data["count"] = summary.count
        return summary_data

    def to_json_string(self, payload: Any) -> str:
        """Convert payload to pretty-printed JSON, one key per line."""
        logger.debug("Rendering payload to JSON string")
        return json.dumps(payload, ensure_ascii=False, indent=2)

    def create_success_envelope(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create success envelope around payload."""
        logger.debug("Creating success envelope")
        return {"ok": True, "data": payload}

    def create_error_envelope(
        self, error_code: str, error_message: str, details: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Create error envelope."""
        logger.debug("Creating error envelope", extra={"code": error_code})
        error_data = {
            "code": error_code,
            "message": error_message,
        }
        if details:
            error_data["details"] = details

        return {"ok": False, "error": error_data}
