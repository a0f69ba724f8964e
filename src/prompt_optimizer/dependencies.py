"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends

from prompt_optimizer.config import Settings, get_settings
from prompt_optimizer.services.optimizer import OptimizerService

# Common dependencies that can be injected into route handlers
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Module-level cache for OptimizerService singleton
_optimizer_service_cache: OptimizerService | None = None


def get_optimizer_service() -> OptimizerService:
    """Get or create a cached OptimizerService instance.

    Returns:
        OptimizerService instance.
    """
    global _optimizer_service_cache

    if _optimizer_service_cache is None:
        _optimizer_service_cache = OptimizerService()

    return _optimizer_service_cache


# Type aliases for dependency injection
OptimizerServiceDep = Annotated[OptimizerService, Depends(get_optimizer_service)]
