"""API route registration for TSC Baseline."""

from fastapi import APIRouter

from . import baseline, meta

router = APIRouter()
router.include_router(meta.router)
router.include_router(baseline.router)

__all__ = ["router"]
