"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from deployer import __version__
from deployer.api.deps import SettingsDep

router = APIRouter()


class HealthResponse(BaseModel):
    """Service status, including whether deployments can be submitted."""

    status: str = "healthy"
    version: str
    environment: str
    render_configured: bool
    render_plan: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """Report status; ``degraded`` when no Render API key is configured."""
    render_configured = bool(settings.render_api_key)
    return HealthResponse(
        status="healthy" if render_configured else "degraded",
        version=__version__,
        environment=settings.app_env,
        render_configured=render_configured,
        render_plan=settings.render_plan,
        timestamp=datetime.now(timezone.utc),
    )
