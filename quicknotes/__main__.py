"""
QuickNotes Backend - Server Entry Point
========================================

Usage:
    python -m quicknotes [--host HOST] [--port PORT]
    quicknotes ...                    (console script, same options)

Defaults come from Settings (BACKEND_HOST, BACKEND_PORT, LOG_LEVEL), i.e.
0.0.0.0:8080. If the socket cannot be bound, uvicorn exits non-zero and the
process halts.
"""

import argparse
import logging
from typing import List, Optional

import uvicorn

from quicknotes.config import settings
from quicknotes.main import setup_logging

logger = logging.getLogger("quicknotes")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="quicknotes", description="Run the QuickNotes API server")
    parser.add_argument("--host", default=settings.backend_host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.backend_port, help="Bind port")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(settings.log_level)
    logger.info("backend listening on %s:%d", args.host, args.port)

    uvicorn.run(
        "quicknotes.main:app",
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
        # One process: the note store lives in this process's memory
        workers=1,
    )


if __name__ == "__main__":
    main()
