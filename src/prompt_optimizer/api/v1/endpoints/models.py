"""Model token limit endpoints."""

from fastapi import APIRouter

from prompt_optimizer.api.v1.endpoints.analysis import ensure_text_length
from prompt_optimizer.dependencies import OptimizerServiceDep, SettingsDep
from prompt_optimizer.schemas.analysis import ModelLimitItem, UsageRequest, UsageResponse
from prompt_optimizer.services.model_limits import (
    get_model_limit,
    list_model_limits,
    remaining,
    usage_percentage,
    usage_ratio,
)

router = APIRouter(tags=["models"])


@router.get(
    "/models",
    response_model=list[ModelLimitItem],
    summary="Model Limits",
    description="Returns the catalog of model token limits in display order",
)
async def model_limits() -> list[ModelLimitItem]:
    """List the model catalog.

    Returns:
        list[ModelLimitItem]: Catalog entries with their positions.
    """
    return [
        ModelLimitItem(index=index, name=model.name, limit=model.limit)
        for index, model in enumerate(list_model_limits())
    ]


@router.post(
    "/usage",
    response_model=UsageResponse,
    summary="Token Usage",
    description="Returns how much of a model's token limit the text would use",
)
async def token_usage(
    request: UsageRequest,
    optimizer_service: OptimizerServiceDep,
    settings: SettingsDep,
) -> UsageResponse:
    """Compute usage of the selected model's limit.

    Raises:
        NotFoundException: If ``model_index`` is not in the catalog.
    """
    ensure_text_length(request.text, settings)
    model = get_model_limit(request.model_index)
    tokens = optimizer_service.compute_stats(request.text).tokens_advanced
    return UsageResponse(
        model=ModelLimitItem(index=request.model_index, name=model.name, limit=model.limit),
        tokens=tokens,
        usage_ratio=usage_ratio(tokens, model.limit),
        usage_percentage=usage_percentage(tokens, model.limit),
        remaining=remaining(tokens, model.limit),
    )
