"""Reading and writing of versioned baseline documents."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from .diagnostics import ErrorSummary
from .errors import BaselineFutureVersionError, BaselineOutdatedError, BaselineReadError
from .models import BaselineDocument, BaselineMeta, SummaryRecord
from .serialize import CURRENT_BASELINE_VERSION, DeterministicSerializer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _new_file_mode() -> int:
    """Mode a plain ``open(path, "w")`` would create a file with."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_baseline(
    summaries: Mapping[str, ErrorSummary], path: PathLike, ignore_messages: bool = False
) -> None:
    """Write ``summaries`` as the current baseline version, replacing ``path``.

    The document is written to a sibling temporary file first and moved into
    place, so readers never observe a half-written baseline. The file gets
    the same permissions as any other file created under the current umask.
    """
    target = Path(path)
    serializer = DeterministicSerializer(ignore_messages)
    json_str = serializer.to_json_string(serializer.serialize_document(summaries))

    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=".tsc-baseline-", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(json_str)
        # mkstemp always creates 0600
        os.chmod(tmp_name, _new_file_mode())
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info(
        "Baseline written",
        extra={"path": str(target), "summaries": len(summaries)},
    )


def read_baseline(path: PathLike) -> Dict[str, Any]:
    """Read the raw JSON object stored at ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BaselineReadError(str(path), str(exc)) from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BaselineReadError(str(path), f"invalid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise BaselineReadError(str(path), "baseline must be a JSON object")

    logger.debug("Baseline read", extra={"path": str(path)})
    return raw


def get_baseline_file_version(raw: Mapping[str, Any]) -> int:
    """Return the document version; documents without ``meta`` are version 0."""
    meta = raw.get("meta")
    if not isinstance(meta, dict):
        return 0
    version = meta.get("baselineFileVersion")
    if isinstance(version, bool) or not isinstance(version, int):
        return 0
    return version


def is_baseline_version_current(raw: Mapping[str, Any]) -> bool:
    """Check whether the document was written by this release."""
    return get_baseline_file_version(raw) == CURRENT_BASELINE_VERSION


def ensure_baseline_version_current(raw: Mapping[str, Any], path: PathLike) -> None:
    """Raise a version error unless the document is the current version."""
    version = get_baseline_file_version(raw)
    if version < CURRENT_BASELINE_VERSION:
        raise BaselineOutdatedError(str(path), version, CURRENT_BASELINE_VERSION)
    if version > CURRENT_BASELINE_VERSION:
        raise BaselineFutureVersionError(str(path), version, CURRENT_BASELINE_VERSION)


def parse_baseline_document(raw: Mapping[str, Any], path: PathLike = "<memory>") -> BaselineDocument:
    """Interpret raw JSON as a baseline document.

    Documents with a ``meta`` block are read as ``{meta, errors}``. Anything
    else is the legacy flat identity-to-summary map and is reported as
    version 0; it is never upgraded in place.
    """
    try:
        if isinstance(raw.get("meta"), dict):
            return BaselineDocument.model_validate(raw)

        return BaselineDocument(
            meta=BaselineMeta(baseline_file_version=0),
            errors={key: SummaryRecord.model_validate(value) for key, value in raw.items()},
        )
    except ValidationError as exc:
        raise BaselineReadError(str(path), f"invalid baseline document: {exc}") from exc


def load_baseline(path: PathLike) -> BaselineDocument:
    """Read, version-check and validate the baseline at ``path``."""
    raw = read_baseline(path)
    ensure_baseline_version_current(raw, path)
    return parse_baseline_document(raw, path)


def add_hash_to_baseline(error_hash: str, path: PathLike) -> ErrorSummary:
    """Accept one occurrence of ``error_hash`` into the baseline at ``path``.

    Unknown hashes get a placeholder summary; known hashes have their count
    raised by one. The document keeps its recorded identity mode.
    """
    document = load_baseline(path)
    ignore_messages = document.meta.ignore_messages
    summaries = document.to_summary_map()

    existing = summaries.get(error_hash)
    if existing is not None:
        existing.count += 1
        summary = existing
    else:
        summary = ErrorSummary(
            file="0000",
            code="0000",
            message=None if ignore_messages else "0000",
            line=0,
            count=1,
        )
        summaries[error_hash] = summary

    write_baseline(summaries, path, ignore_messages)
    logger.info(
        "Hash added to baseline",
        extra={"path": str(path), "hash": error_hash, "count": summary.count},
    )
    return summary


def remove_baseline(path: PathLike) -> None:
    """Delete the baseline file at ``path``."""
    try:
        Path(path).unlink()
    except FileNotFoundError as exc:
        raise BaselineReadError(str(path), "baseline file does not exist") from exc

    logger.info("Baseline removed", extra={"path": str(path)})
