"""Domain models for text statistics, optimization results and model limits."""

from dataclasses import dataclass, field
from enum import Enum


class Strategy(str, Enum):
    """Rewrite categories, in the order the pipeline runs them."""

    WHITESPACE = "whitespace"
    REDUNDANCY = "redundancy"
    SIMPLIFICATION = "simplification"
    FILLER = "filler"
    PUNCTUATION = "punctuation"
    VOICE = "voice"
    NONE = "none"  # Sentinel: nothing fired

    @property
    def label(self) -> str:
        """Human readable description of the strategy."""
        return STRATEGY_LABELS[self]


STRATEGY_LABELS: dict[Strategy, str] = {
    Strategy.WHITESPACE: "Removed excessive whitespace",
    Strategy.REDUNDANCY: "Removed redundant phrases",
    Strategy.SIMPLIFICATION: "Simplified complex words",
    Strategy.FILLER: "Removed filler words",
    Strategy.PUNCTUATION: "Cleaned up punctuation",
    Strategy.VOICE: "Converted passive to active voice",
    Strategy.NONE: "No significant optimizations found",
}


@dataclass(frozen=True)
class TextStats:
    """Descriptive counts and token estimates for a piece of text."""

    characters: int
    words: int
    lines: int
    tokens_char_based: int
    tokens_word_based: int
    tokens_advanced: int


@dataclass(frozen=True)
class OptimizationResult:
    """Candidate rewrite of a text along with its token savings."""

    original_text: str
    optimized_text: str
    original_tokens: int
    optimized_tokens: int
    applied_strategies: tuple[Strategy, ...] = field(default_factory=tuple)

    @property
    def reduction(self) -> int:
        return self.original_tokens - self.optimized_tokens

    @property
    def reduction_percentage(self) -> float:
        if self.original_tokens <= 0:
            return 0.0
        return self.reduction / self.original_tokens * 100

    @property
    def strategy_labels(self) -> list[str]:
        return [strategy.label for strategy in self.applied_strategies]


@dataclass(frozen=True)
class ModelLimit:
    """Named token ceiling of a target model."""

    name: str
    limit: int

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise ValueError(f"Model limit must be positive, got {self.limit} for {self.name!r}")
