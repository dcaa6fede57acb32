"""Service layer for the TSC Baseline API - wraps the command operations."""

import logging
from typing import Any, Dict, Optional

from .. import service
from ..config import BaselineConfig, ErrorFormat
from ..serialize import DeterministicSerializer

logger = logging.getLogger(__name__)

_REQUEST_BASELINE = "<request>"


class BaselineService:
    """Runs baseline operations on request payloads and builds envelopes."""

    def __init__(self) -> None:
        self.serializer = DeterministicSerializer()

    def build_baseline(self, output: str, ignore_messages: bool = False) -> Dict[str, Any]:
        """Return the baseline document 'save' would write for ``output``."""
        config = BaselineConfig(path=_REQUEST_BASELINE, ignore_messages=ignore_messages)
        document = service.build_document(output, config)
        return self.serializer.create_success_envelope(document)

    def check(
        self,
        output: str,
        baseline: Dict[str, Any],
        error_format: str = ErrorFormat.HUMAN.value,
        ignore_messages: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Compare ``output`` with ``baseline``.

        Raises:
            BaselineError: when the baseline is stale, from the future,
                malformed or recorded in a different identity mode.
        """
        config = BaselineConfig(
            path=_REQUEST_BASELINE,
            ignore_messages=ignore_messages,
            error_format=error_format,
        )
        result = service.check_document(output, baseline, config)

        doc_serializer = DeterministicSerializer(result.ignore_messages)
        payload = {
            "new_errors_count": result.new_errors_count,
            "baseline_errors_count": result.baseline_errors_count,
            "new_errors": {
                key: doc_serializer.serialize_summary(summary)
                for key, summary in result.new_errors.items()
            },
            "report": result.render(error_format),
        }
        return self.serializer.create_success_envelope(payload)
