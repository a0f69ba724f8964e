"""Text statistics and prompt optimization endpoints."""

from fastapi import APIRouter, status

from prompt_optimizer.config import Settings
from prompt_optimizer.core.exceptions import ValidationException
from prompt_optimizer.core.logging import get_logger
from prompt_optimizer.dependencies import OptimizerServiceDep, SettingsDep
from prompt_optimizer.schemas.analysis import OptimizeResponse, StatsResponse, TextRequest

logger = get_logger(__name__)

router = APIRouter(tags=["analysis"])


def ensure_text_length(text: str, settings: Settings) -> None:
    """Reject texts longer than the configured maximum.

    Raises:
        ValidationException: If ``text`` exceeds ``settings.max_text_length``.
    """
    if len(text) > settings.max_text_length:
        raise ValidationException(
            f"Text is {len(text)} characters; the maximum is {settings.max_text_length}"
        )


@router.post(
    "/stats",
    response_model=StatsResponse,
    summary="Text Statistics",
    description="Returns character, word and line counts plus three token estimates",
    status_code=status.HTTP_200_OK,
)
async def text_stats(
    request: TextRequest,
    optimizer_service: OptimizerServiceDep,
    settings: SettingsDep,
) -> StatsResponse:
    """Compute statistics for the submitted text.

    Args:
        request: Request with the text to analyze.
        optimizer_service: Injected optimizer service.
        settings: Injected application settings.

    Returns:
        StatsResponse: Counts and token estimates.
    """
    ensure_text_length(request.text, settings)
    stats = optimizer_service.compute_stats(request.text)
    return StatsResponse.from_stats(stats)


@router.post(
    "/optimize",
    response_model=OptimizeResponse,
    summary="Optimize Prompt",
    description="Applies the rewrite rules to reduce the estimated token count",
    status_code=status.HTTP_200_OK,
)
async def optimize_prompt(
    request: TextRequest,
    optimizer_service: OptimizerServiceDep,
    settings: SettingsDep,
) -> OptimizeResponse:
    """Optimize the submitted prompt.

    The response only describes a candidate rewrite; adopting it is up to the
    caller.

    Args:
        request: Request with the prompt to optimize.
        optimizer_service: Injected optimizer service.
        settings: Injected application settings.

    Returns:
        OptimizeResponse: Rewritten text with token savings.

    Raises:
        EmptyTextException: If the text is blank.
        ValidationException: If the text is too long.
    """
    ensure_text_length(request.text, settings)
    logger.info(f"Optimize request: {len(request.text)} chars")

    result = optimizer_service.optimize(request.text)

    logger.info(
        f"Optimize completed: {result.original_tokens} -> {result.optimized_tokens} tokens "
        f"({result.reduction_percentage:.1f}%)"
    )
    return OptimizeResponse.from_result(result)
