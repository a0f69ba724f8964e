"""Heuristic token estimation utilities.

None of these reproduce a real tokenizer. They are cheap approximations meant
to run on every keystroke. All estimates round up, so only text with zero
characters (or zero words, for the word-based heuristic) estimates to zero.
"""

import math
import re

from prompt_optimizer.core.models import TextStats

CHARS_PER_TOKEN = 4
WORDS_PER_TOKEN = 0.75

# Advanced estimator weights
ADVANCED_CHARS_PER_TOKEN = 3.8
PUNCTUATION_WEIGHT = 0.5
STRUCTURAL_WHITESPACE_WEIGHT = 0.3

_PUNCTUATION_PATTERN = re.compile(r"[.!?;:,]")
_STRUCTURAL_WHITESPACE_PATTERN = re.compile(r"[\n\t]")
_WHITESPACE_RUN_PATTERN = re.compile(r"\s+")


def char_count(text: str) -> int:
    """Number of code points in the text."""
    return len(text)


def word_count(text: str) -> int:
    """Number of whitespace-separated segments; 0 for blank text."""
    stripped = text.strip()
    if not stripped:
        return 0
    return len(_WHITESPACE_RUN_PATTERN.split(stripped))


def line_count(text: str) -> int:
    """Number of newline-delimited segments. The empty string has one line."""
    return text.count("\n") + 1


def tokens_char_based(text: str) -> int:
    """Approximate token count assuming roughly 4 characters per token."""
    return math.ceil(char_count(text) / CHARS_PER_TOKEN)


def tokens_word_based(text: str) -> int:
    """Approximate token count assuming roughly 0.75 words per token."""
    return math.ceil(word_count(text) / WORDS_PER_TOKEN)


def tokens_advanced(text: str) -> int:
    """Character-based estimate weighted for punctuation and structural whitespace.

    Each of ``. ! ? ; : ,`` adds half a character and each newline or tab adds
    0.3 of a character before dividing by 3.8 characters per token. This is the
    estimator used for optimization savings and model-limit usage.
    """
    punctuation = len(_PUNCTUATION_PATTERN.findall(text))
    structural = len(_STRUCTURAL_WHITESPACE_PATTERN.findall(text))
    weighted = (
        char_count(text)
        + punctuation * PUNCTUATION_WEIGHT
        + structural * STRUCTURAL_WHITESPACE_WEIGHT
    )
    return math.ceil(weighted / ADVANCED_CHARS_PER_TOKEN)


def compute_stats(text: str) -> TextStats:
    """Compute descriptive counts and all three token estimates for ``text``."""
    return TextStats(
        characters=char_count(text),
        words=word_count(text),
        lines=line_count(text),
        tokens_char_based=tokens_char_based(text),
        tokens_word_based=tokens_word_based(text),
        tokens_advanced=tokens_advanced(text),
    )
