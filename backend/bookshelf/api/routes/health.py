"""Health & Readiness Checks: liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up (liveness)
    - GET /api/v1/health/ready returns 503 until the store handle exists

Design Decisions:
    - Readiness takes the store lock like any action, so the record count is
      a consistent snapshot
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "bookshelf-ws"}


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness check: the record store is initialized."""
    handle = getattr(request.app.state, "record_store", None)
    if handle is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_uninitialized"},
        )
    async with handle.exclusive() as store:
        count = len(store)
    return {"status": "ready", "checks": {"records": count}}
