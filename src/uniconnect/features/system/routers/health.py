"""Health endpoints. Connectivity is checked on every request."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter(tags=["System"])

SERVICE_NAME = "uniconnect-backend"


async def _database_is_up(request: Request) -> bool:
    return await request.app.state.services.database.health_check()


@router.get("/health")
async def get_health(request: Request):
    """Overall service health."""
    database_up = await _database_is_up(request)
    return {
        "status": "ok" if database_up else "degraded",
        "service": SERVICE_NAME,
        "database": "up" if database_up else "down",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/db")
async def get_database_health(request: Request):
    """200 when the database answers, 503 otherwise."""
    if await _database_is_up(request):
        return {"database": "up"}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"database": "down"},
    )
