"""Static catalog of model token limits and usage arithmetic."""

from prompt_optimizer.core.exceptions import NotFoundException, ValidationException
from prompt_optimizer.core.models import ModelLimit

MODEL_LIMITS: tuple[ModelLimit, ...] = (
    ModelLimit(name="GPT-3.5 Turbo", limit=4096),
    ModelLimit(name="GPT-4", limit=8192),
    ModelLimit(name="GPT-4 Turbo", limit=32768),
    ModelLimit(name="Claude 3 Sonnet", limit=200000),
)


def list_model_limits() -> tuple[ModelLimit, ...]:
    """Return the model catalog in display order."""
    return MODEL_LIMITS


def get_model_limit(index: int) -> ModelLimit:
    """Look up a catalog entry by position.

    Raises:
        NotFoundException: If ``index`` is outside the catalog.
    """
    if not 0 <= index < len(MODEL_LIMITS):
        raise NotFoundException(f"Unknown model index {index}")
    return MODEL_LIMITS[index]


def usage_ratio(tokens: int, limit: int) -> float:
    """Fraction of ``limit`` consumed by ``tokens``; above 1.0 means over budget."""
    if limit <= 0:
        raise ValidationException(f"Token limit must be positive, got {limit}")
    return tokens / limit


def usage_percentage(tokens: int, limit: int) -> float:
    return usage_ratio(tokens, limit) * 100


def remaining(tokens: int, limit: int) -> int:
    """Tokens left before reaching ``limit``, never negative."""
    return max(0, limit - tokens)
