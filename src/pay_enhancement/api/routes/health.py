"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, status
from pydantic import BaseModel

from pay_enhancement.api.dependencies import Engine
from pay_enhancement.config import get_settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    engine_version: str
    pay_scales: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(engine: Engine) -> HealthResponse:
    """Check API health and that both pay scales are loaded."""
    loaded = len(engine.historical) > 0 and len(engine.current) > 0
    return HealthResponse(
        status="healthy" if loaded else "degraded",
        timestamp=datetime.now(timezone.utc),
        engine_version=get_settings().engine_version,
        pay_scales="loaded" if loaded else "empty",
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check() -> dict[str, str]:
    """Readiness check for container orchestration."""
    return {"status": "ready"}


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> dict[str, str]:
    """Liveness check for container orchestration."""
    return {"status": "alive"}
