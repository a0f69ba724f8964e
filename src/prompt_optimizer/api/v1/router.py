"""Main API v1 router that combines all endpoint routers."""

from fastapi import APIRouter

from prompt_optimizer.api.v1.endpoints import analysis, health, models

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(health.router)
api_router.include_router(analysis.router)
api_router.include_router(models.router)
