"""Health check endpoint."""

from fastapi import APIRouter, Depends

from api.schemas import HealthResponse
from config import Settings, get_settings

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Report service status and the size of the loaded lookup tables.",
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Return service health status."""
    return HealthResponse(
        service=settings.app_name.lower(),
        blocklist_entries=len(settings.blocked_urls),
        allowed_schemes=list(settings.allowed_schemes),
    )
