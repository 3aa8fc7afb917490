"""Health & Readiness Probes: liveness and readiness endpoints for container hosts.

Invariants:
    - GET /api/health always returns 200 if the process is up (liveness)
    - GET /api/health/ready returns 503 if the database is unreachable (readiness)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from inventory.api.dependencies import get_db_manager
from inventory.infrastructure.database import DatabaseSessionManager

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "asset-inventory"}


@router.get("/ready")
async def readiness_check(
    db: DatabaseSessionManager = Depends(get_db_manager),
):
    """Readiness probe, includes database connectivity."""
    if not await db.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
