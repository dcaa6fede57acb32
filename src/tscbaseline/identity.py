"""Stable identity hashing for diagnostics."""

import hashlib
from typing import Any, Dict, Mapping, Optional

from .diagnostics import ErrorSummary
from .serialize import canonical_json_bytes


def identity_fields(
    file: str, code: str, message: Optional[str], ignore_messages: bool = False
) -> Dict[str, Any]:
    """Build the identity fields of a diagnostic for the given mode."""
    fields: Dict[str, Any] = {"code": code, "file": file}
    if not ignore_messages:
        fields["message"] = message
    return fields


def compute_identity_hash(fields: Mapping[str, Any]) -> str:
    """Return the SHA-256 hex digest of the canonical encoding of ``fields``.

    Keys are sorted before hashing, so the digest never depends on the order
    the mapping was built in, and it is reproducible across processes.
    """
    return hashlib.sha256(canonical_json_bytes(dict(fields))).hexdigest()


def summary_hash(summary: ErrorSummary, ignore_messages: bool = False) -> str:
    """Identity hash of a summary in the given mode (count and line excluded)."""
    return compute_identity_hash(
        identity_fields(summary.file, summary.code, summary.message, ignore_messages)
    )
