"""Rewrite pipeline that trims a prompt and reports the token savings."""

from prompt_optimizer.core.exceptions import EmptyTextException
from prompt_optimizer.core.logging import get_logger
from prompt_optimizer.core.models import OptimizationResult, Strategy, TextStats
from prompt_optimizer.text_processing.rewrite_rules import (
    NORMALIZE_AFTER,
    REWRITE_PASSES,
    RewritePass,
    normalize_between_passes,
)
from prompt_optimizer.text_processing.token_estimator import compute_stats, tokens_advanced

logger = get_logger(__name__)


def run_passes(
    text: str, passes: tuple[RewritePass, ...] = REWRITE_PASSES
) -> tuple[str, list[Strategy]]:
    """Run the rewrite passes over ``text`` in order.

    Args:
        text: Text to rewrite.
        passes: Ordered passes to apply.

    Returns:
        The rewritten text and the strategies whose pass changed the text,
        in pass order.
    """
    applied: list[Strategy] = []
    for rewrite in passes:
        before = text
        text = rewrite(text)
        if text != before and rewrite.category not in applied:
            applied.append(rewrite.category)
        if rewrite.category in NORMALIZE_AFTER:
            text = normalize_between_passes(text)
    return text, applied


def optimize(text: str) -> OptimizationResult:
    """Produce a shorter candidate rewrite of ``text``.

    The caller's text is never modified; the result only describes a
    replacement the caller may choose to adopt.

    Args:
        text: Prompt to optimize. Must contain non-whitespace characters.

    Returns:
        OptimizationResult: Rewritten text, token counts and applied strategies.

    Raises:
        EmptyTextException: If ``text`` is blank.
    """
    if not text.strip():
        raise EmptyTextException("Cannot optimize blank text")

    original_tokens = tokens_advanced(text)
    optimized, applied = run_passes(text)

    # Silent normalization alone is not an optimization; keep the text as is.
    if not applied:
        optimized = text
        applied = [Strategy.NONE]

    optimized_tokens = tokens_advanced(optimized)

    result = OptimizationResult(
        original_text=text,
        optimized_text=optimized,
        original_tokens=original_tokens,
        optimized_tokens=optimized_tokens,
        applied_strategies=tuple(applied),
    )
    logger.debug(
        "Optimized %d-char text: %d -> %d tokens via %s",
        len(text),
        original_tokens,
        optimized_tokens,
        ", ".join(strategy.value for strategy in result.applied_strategies),
    )
    return result


class OptimizerService:
    """Service exposing text statistics and prompt optimization."""

    def compute_stats(self, text: str) -> TextStats:
        """Compute live statistics for ``text``."""
        return compute_stats(text)

    def optimize(self, text: str) -> OptimizationResult:
        """Optimize ``text``; see :func:`optimize`."""
        return optimize(text)
