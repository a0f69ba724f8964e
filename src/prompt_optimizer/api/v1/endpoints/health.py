"""Health check endpoint."""

from fastapi import APIRouter

from prompt_optimizer.dependencies import SettingsDep
from prompt_optimizer.schemas.health import HealthResponse
from prompt_optimizer.services.model_limits import list_model_limits
from prompt_optimizer.text_processing.rewrite_rules import REWRITE_PASSES

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the API and the size of its rule and model catalogs",
)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """Check API health and return status.

    Args:
        settings: Injected application settings.

    Returns:
        HealthResponse: Health status information.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        environment=settings.environment,
        rewrite_passes=len(REWRITE_PASSES),
        models=len(list_model_limits()),
    )
