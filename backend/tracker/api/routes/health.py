"""Health Probes — liveness and database readiness.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process can serve requests
    - GET /api/v1/health/ready answers 503 until a SELECT 1 succeeds
    - Neither check touches the tracker tables
"""

import logging
import time

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from tracker.config import get_settings
from tracker.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness():
    """Ready only when the database answers."""
    manager = database.db_manager
    started = time.perf_counter()
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "latency_ms": round((time.perf_counter() - started) * 1000, 2),
    }
