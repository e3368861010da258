"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if MongoDB is unreachable (readiness)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from todo_api import __version__
from todo_api.api.dependencies import get_db_manager
from todo_api.infrastructure.database import MongoClientManager

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "todo-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(
    db_manager: MongoClientManager | None = Depends(get_db_manager),
):
    """Readiness probe — includes database connectivity."""
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
