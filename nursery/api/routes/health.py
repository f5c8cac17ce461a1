"""
Health endpoints for process supervisors and load balancers.

- GET /health: the process is up (no database access)
- GET /health/ready: the inventory database answers a trivial query

Reference: https://kubernetes.io/docs/tasks/configure-pod-container/configure-liveness-readiness-startup-probes/
"""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel
from sqlalchemy import text

from nursery.core.database import connection_guard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Probe result; database is the SQLAlchemy dialect name (readiness only)."""
    status: str
    version: str
    database: Optional[str] = None


@router.get(
    "",
    response_model=HealthResponse,
    summary="Liveness probe",
    status_code=status.HTTP_200_OK,
)
async def health_check(request: Request) -> HealthResponse:
    return HealthResponse(status="healthy", version=request.app.version)


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness probe",
    description="Runs SELECT 1 against the inventory database.",
    status_code=status.HTTP_200_OK,
    responses={503: {"description": "Inventory database unavailable"}},
)
async def readiness_check(request: Request) -> HealthResponse:
    engine = request.app.state.engine
    try:
        async with connection_guard(request.app.state.db_lock), engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning(f"Readiness check failed on {engine.dialect.name}: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Inventory database unavailable",
        ) from e

    return HealthResponse(status="ready", version=request.app.version, database=engine.dialect.name)
