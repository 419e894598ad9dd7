"""Health check endpoints."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from kontactshare.dependencies import AppSettings

router = APIRouter(prefix="/health")


class LivenessResponse(BaseModel):
    """Liveness answer carrying the service name."""

    status: str
    message: str


class ReadinessResponse(BaseModel):
    """Service status with the database and upload directory checked."""

    status: str
    version: str
    environment: str
    database: str
    uploads: str


@router.get("", response_model=LivenessResponse, summary="Liveness check")
async def liveness(settings: AppSettings) -> LivenessResponse:
    """Answer as long as the process is serving requests."""
    return LivenessResponse(status="OK", message=f"{settings.app_name} is running")


@router.get("/detailed", response_model=ReadinessResponse, summary="Readiness check")
async def readiness(request: Request, settings: AppSettings) -> ReadinessResponse:
    """
    Check the database connection and that uploads can be stored and served.

    Returns:
        ``healthy`` only when every dependency is usable, ``degraded`` otherwise
    """
    db_ok = await request.app.state.db.check_connection()
    uploads_ok = request.app.state.photo_storage.is_writable()

    return ReadinessResponse(
        status="healthy" if db_ok and uploads_ok else "degraded",
        version=settings.app_version,
        environment=settings.environment,
        database="healthy" if db_ok else "unhealthy",
        uploads="healthy" if uploads_ok else "unhealthy",
    )
