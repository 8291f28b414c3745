"""Health & Readiness Probes — is the process up, and can it serve admin traffic.

Invariants:
    - GET /api/health/ answers 200 whenever the process runs (liveness)
    - GET /api/health/ready answers 503 unless the database round-trips
    - The media host is reported but never gates readiness: a failing media
      host only delays asset cleanup
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.infrastructure import database, media_host

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": "store-admin-api", "version": "1.0.0"}


@router.get("/ready")
async def readiness_check():
    manager = database.db_manager
    checks = {
        "database": "healthy" if manager and await manager.health_check() else "unavailable",
        "media_host": "configured" if media_host.media_host else "unconfigured",
    }
    if checks["database"] != "healthy":
        logger.warning("Readiness check failed", extra={"error_code": "NOT_READY"})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
                "checks": checks,
            },
        )
    return {"status": "ready", "checks": checks}
