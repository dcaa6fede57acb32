"""Baseline routes for the TSC Baseline API."""

import logging
from typing import Any, Dict

from fastapi import APIRouter

from ..models import BaselineRequest, CheckRequest
from ..service import BaselineService

router = APIRouter(tags=["baseline"])

logger = logging.getLogger(__name__)

baseline_service = BaselineService()


@router.post("/baseline")
def create_baseline(request: BaselineRequest) -> Dict[str, Any]:
    """Build the baseline document for the given compiler output."""
    logger.info(
        "Received baseline request",
        extra={"chars": len(request.output), "ignore_messages": request.ignore_messages},
    )
    return baseline_service.build_baseline(request.output, request.ignore_messages)


@router.post("/check")
def check_output(request: CheckRequest) -> Dict[str, Any]:
    """Report the errors in the compiler output that the baseline does not cover."""
    logger.info(
        "Received check request",
        extra={"chars": len(request.output), "error_format": request.error_format},
    )

    result = baseline_service.check(
        request.output,
        request.baseline,
        error_format=request.error_format,
        ignore_messages=request.ignore_messages,
    )

    logger.info(
        "Check request completed",
        extra={"new_errors": result["data"]["new_errors_count"]},
    )
    return result
