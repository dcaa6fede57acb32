"""FastAPI application instance for the TSC Baseline API."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..errors import BaselineError
from ..logging_utils import configure_logging
from ..serialize import DeterministicSerializer
from . import __version__
from .routes import router as api_router

configure_logging(default="INFO")

logger = logging.getLogger(__name__)

_envelopes = DeterministicSerializer()

app = FastAPI(
    title="TSC Baseline API",
    description="Compare TypeScript compiler output against a baseline document",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(BaselineError)
async def baseline_error_handler(request: Request, exc: BaselineError):
    """Stale, future, malformed or mismatched baselines are client errors."""
    logger.info(
        "Baseline rejected",
        extra={"code": exc.code, "path": str(request.url.path)},
    )
    return JSONResponse(
        status_code=422,
        content=_envelopes.create_error_envelope(exc.code, exc.message, exc.details),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Return the error envelope for anything unexpected."""
    logger.error(
        "Unhandled error",
        extra={"path": str(request.url.path), "exception_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=500,
        content=_envelopes.create_error_envelope(
            "INTERNAL_ERROR",
            f"Internal server error: {exc}",
            {"exception_type": type(exc).__name__, "path": str(request.url.path)},
        ),
    )
