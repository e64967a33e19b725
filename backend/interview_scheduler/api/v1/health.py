from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from interview_scheduler.core.config import settings
from interview_scheduler.db import engine

router = APIRouter()


@router.get("/", summary="Health check", tags=["health"])
def read_health() -> dict[str, str]:
    """Return basic service health information."""
    return {"status": "ok", "service": settings.PROJECT_NAME}


@router.get("/ready", summary="Readiness check", tags=["health"])
def read_ready():
    """Check that the database answers before accepting bookings."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ready", "database": "connected"}
    except Exception as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "database": "disconnected",
                "error": str(e) if settings.ENVIRONMENT != "production" else "Database connection failed",
            },
        )
