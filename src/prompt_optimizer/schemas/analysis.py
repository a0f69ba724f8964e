"""Request and response schemas for text analysis endpoints."""

from pydantic import BaseModel, Field

from prompt_optimizer.core.models import OptimizationResult, TextStats


class TextRequest(BaseModel):
    """Request carrying the prompt text to analyze."""

    text: str = Field(..., description="Prompt text")


class UsageRequest(BaseModel):
    """Request model for the usage endpoint."""

    text: str = Field(..., description="Prompt text")
    model_index: int = Field(0, description="Position of the model in the catalog")

    model_config = {"protected_namespaces": ()}


class StatsResponse(BaseModel):
    """Descriptive counts and token estimates."""

    characters: int = Field(..., description="Number of characters")
    words: int = Field(..., description="Number of whitespace-separated words")
    lines: int = Field(..., description="Number of lines (at least 1)")
    tokens_char_based: int = Field(..., description="Estimate at ~4 characters per token")
    tokens_word_based: int = Field(..., description="Estimate at ~0.75 words per token")
    tokens_advanced: int = Field(..., description="Punctuation-weighted estimate")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "characters": 11,
                    "words": 2,
                    "lines": 1,
                    "tokens_char_based": 3,
                    "tokens_word_based": 3,
                    "tokens_advanced": 3,
                }
            ]
        }
    }

    @classmethod
    def from_stats(cls, stats: TextStats) -> "StatsResponse":
        return cls(
            characters=stats.characters,
            words=stats.words,
            lines=stats.lines,
            tokens_char_based=stats.tokens_char_based,
            tokens_word_based=stats.tokens_word_based,
            tokens_advanced=stats.tokens_advanced,
        )


class OptimizeResponse(BaseModel):
    """Candidate rewrite with its token savings."""

    original_text: str = Field(..., description="Text as submitted")
    optimized_text: str = Field(..., description="Rewritten text")
    original_tokens: int = Field(..., description="Advanced estimate of the original text")
    optimized_tokens: int = Field(..., description="Advanced estimate of the rewritten text")
    reduction: int = Field(..., description="original_tokens - optimized_tokens")
    reduction_percentage: float = Field(..., description="Reduction relative to original")
    applied_strategies: list[str] = Field(..., description="Strategies that changed the text")
    strategy_labels: list[str] = Field(..., description="Human readable strategy descriptions")

    @classmethod
    def from_result(cls, result: OptimizationResult) -> "OptimizeResponse":
        return cls(
            original_text=result.original_text,
            optimized_text=result.optimized_text,
            original_tokens=result.original_tokens,
            optimized_tokens=result.optimized_tokens,
            reduction=result.reduction,
            reduction_percentage=result.reduction_percentage,
            applied_strategies=[strategy.value for strategy in result.applied_strategies],
            strategy_labels=result.strategy_labels,
        )


class ModelLimitItem(BaseModel):
    """Catalog entry for a model token limit."""

    index: int = Field(..., description="Position in the catalog")
    name: str = Field(..., description="Model name")
    limit: int = Field(..., description="Token ceiling")


class UsageResponse(BaseModel):
    """Token usage of a text against a model limit."""

    model: ModelLimitItem = Field(..., description="Selected model")
    tokens: int = Field(..., description="Advanced token estimate of the text")
    usage_ratio: float = Field(..., description="tokens / limit; above 1.0 is over budget")
    usage_percentage: float = Field(..., description="usage_ratio * 100")
    remaining: int = Field(..., description="Tokens left before the limit, never negative")
