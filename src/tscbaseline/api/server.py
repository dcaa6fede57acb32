"""Command line launcher for the TSC Baseline API."""

import argparse
import logging
from typing import List, Optional

import uvicorn

logger = logging.getLogger(__name__)

APP_PATH = "tscbaseline.api.app:app"


def create_parser() -> argparse.ArgumentParser:
    """Create the launcher's argument parser."""
    parser = argparse.ArgumentParser(
        prog="tsc-baseline-api",
        description="Serve baseline building and checking over HTTP",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="uvicorn log level (default: info)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the API server until interrupted."""
    args = create_parser().parse_args(argv)

    logger.info("Starting API server", extra={"host": args.host, "port": args.port})
    uvicorn.run(
        APP_PATH,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )
    return 0
