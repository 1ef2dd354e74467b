"""
Simple Notes Backend: Health Check Routes
===========================================

What:  Liveness endpoints for monitoring and container orchestration.
How:   GET / answers a fixed {"message": "Healthy"}; GET /health reports the
       version, uptime and current note count.
Who:   Docker health checks, load balancers, the frontend's startup check.

The service has no external dependencies (no database, no upstream API), so
if the process can answer, it is healthy.
"""

import logging
import time

from fastapi import APIRouter, Depends

from notes_backend import __version__
from notes_backend.dependencies import get_notes_store
from notes_backend.schemas.note import HealthMessage, HealthResponse
from notes_backend.store.notes_store import NotesStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/",
    response_model=HealthMessage,
    operation_id="Health",
    summary="Health check",
    description="Returns a simple health response.",
)
def root_health() -> HealthMessage:
    return HealthMessage(message="Healthy")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns service status, version, uptime and the number of notes held in memory.",
)
def health_check(store: NotesStore = Depends(get_notes_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=store.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
