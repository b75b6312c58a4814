"""
QuickNotes Backend - Health Check Routes
=========================================

What:  Liveness probe (/healthz) and a small status report (/health).
Who:   Called by container health checks, load balancers and humans.

/healthz is deliberately trivial: plain-text "ok" whenever the process can
answer HTTP. /health adds version, uptime and the in-memory note count.
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from quicknotes import __version__
from quicknotes.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/healthz",
    response_class=PlainTextResponse,
    summary="Liveness probe",
)
async def healthz() -> str:
    return "ok"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service status report",
)
async def health_check(request: Request) -> HealthResponse:
    """
    Report service status.

    There are no external dependencies to probe, so a reachable process is
    always "healthy".
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(request.app.state.note_store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
