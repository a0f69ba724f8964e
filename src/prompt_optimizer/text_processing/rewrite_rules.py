"""Ordered catalog of lexical rewrite rules.

Each pass is a pure ``str -> str`` transform tagged with the strategy it
belongs to. Passes run in catalog order; later passes rely on the whitespace
normalization done by earlier ones.
"""

from collections.abc import Callable
from dataclasses import dataclass
import re

from prompt_optimizer.core.logging import get_logger
from prompt_optimizer.core.models import Strategy

from .filler_words import is_filler_phrase, is_filler_word
from .normalize_text import collapse_excess_whitespace, collapse_whitespace

logger = get_logger(__name__)

Replacement = str | Callable[[re.Match[str]], str]


@dataclass(frozen=True)
class RewriteRule:
    """A single case-insensitive pattern and what to replace its matches with."""

    category: Strategy
    pattern: re.Pattern[str]
    replacement: Replacement = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class RewritePass:
    """A category tag paired with the transform that implements it."""

    category: Strategy
    transform: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.transform(text)


def _rule(category: Strategy, pattern: str, replacement: Replacement = "") -> RewriteRule:
    return RewriteRule(category, re.compile(pattern, re.IGNORECASE), replacement)


REDUNDANCY_RULES: tuple[RewriteRule, ...] = (
    _rule(Strategy.REDUNDANCY, r"\b(please|kindly)\s+"),
    _rule(Strategy.REDUNDANCY, r"\b(very|really|quite|extremely)\s+"),
    _rule(
        Strategy.REDUNDANCY,
        r"\b(I would like you to|I want you to|could you please|can you please)\s*",
    ),
    _rule(Strategy.REDUNDANCY, r"\b(in order to)\b", "to"),
    _rule(Strategy.REDUNDANCY, r"\b(due to the fact that)\b", "because"),
    _rule(Strategy.REDUNDANCY, r"\b(at this point in time)\b", "now"),
    _rule(Strategy.REDUNDANCY, r"\b(for the purpose of)\b", "to"),
)

SIMPLIFICATIONS: dict[str, str] = {
    "utilize": "use",
    "demonstrate": "show",
    "facilitate": "help",
    "implement": "do",
    "approximately": "about",
    "subsequently": "then",
    "therefore": "so",
}

SIMPLIFICATION_RULES: tuple[RewriteRule, ...] = tuple(
    _rule(Strategy.SIMPLIFICATION, rf"\b{word}\b", short)
    for word, short in SIMPLIFICATIONS.items()
)

_PUNCTUATION_RUN_PATTERN = re.compile(r"[.!?]{2,}")


def _present_tense(match: re.Match[str]) -> str:
    # "tested" -> "tests", "done" -> "dones"
    verb = match.group(1)
    if verb.lower().endswith("ed"):
        verb = verb[:-2]
    return f"{verb}s"


VOICE_RULES: tuple[RewriteRule, ...] = (
    _rule(Strategy.VOICE, r"\bis being\s+(\w+)\b", _present_tense),
    _rule(Strategy.VOICE, r"\bwas\s+(\w+ed)\s+by\s+(\w+)", r"\2 \1"),
    _rule(Strategy.VOICE, r"\bwere\s+(\w+ed)\s+by\s+(\w+)", r"\2 \1"),
)

_WORD_PATTERN = re.compile(r"\w+")


def apply_rules(text: str, rules: tuple[RewriteRule, ...]) -> str:
    """Apply each rule in order to the output of the previous one."""
    for rule in rules:
        text = rule.apply(text)
    return text


def remove_redundancy(text: str) -> str:
    """Drop politeness fillers, intensifiers and request preambles; shorten circumlocutions."""
    return apply_rules(text, REDUNDANCY_RULES)


def simplify_words(text: str) -> str:
    """Swap formal verbs and adverbs for shorter synonyms."""
    return apply_rules(text, SIMPLIFICATION_RULES)


def remove_filler_words(text: str) -> str:
    """Remove whole words (and two-word phrases) found in the filler vocabulary.

    Words are the ``\\w+`` tokens of the text. A removed token takes one
    trailing space with it; everything else, punctuation included, is kept.

    Args:
        text: Text to clean.

    Returns:
        Text with filler tokens removed.
    """
    matches = list(_WORD_PATTERN.finditer(text))
    pieces: list[str] = []
    cursor = 0
    index = 0
    while index < len(matches):
        match = matches[index]
        end: int | None = None
        if is_filler_word(match.group()):
            end = match.end()
        elif index + 1 < len(matches):
            following = matches[index + 1]
            if text[match.end() : following.start()] == " " and is_filler_phrase(
                match.group(), following.group()
            ):
                end = following.end()
                index += 1
        if end is not None:
            pieces.append(text[cursor : match.start()])
            if text.startswith(" ", end):
                end += 1
            cursor = end
        index += 1
    pieces.append(text[cursor:])
    return "".join(pieces)


def clean_punctuation(text: str) -> str:
    """Collapse runs of sentence-ending punctuation (``?!``, ``...``) into a single period."""
    return _PUNCTUATION_RUN_PATTERN.sub(".", text)


def convert_passive_voice(text: str) -> str:
    """Rewrite a narrow set of passive constructions into active voice."""
    return apply_rules(text, VOICE_RULES)


REWRITE_PASSES: tuple[RewritePass, ...] = (
    RewritePass(Strategy.WHITESPACE, collapse_excess_whitespace),
    RewritePass(Strategy.REDUNDANCY, remove_redundancy),
    RewritePass(Strategy.SIMPLIFICATION, simplify_words),
    RewritePass(Strategy.FILLER, remove_filler_words),
    RewritePass(Strategy.PUNCTUATION, clean_punctuation),
    RewritePass(Strategy.VOICE, convert_passive_voice),
)

# Passes followed by a silent whitespace collapse. It never counts as a
# whitespace strategy of its own.
NORMALIZE_AFTER: frozenset[Strategy] = frozenset({Strategy.FILLER, Strategy.VOICE})


def normalize_between_passes(text: str) -> str:
    """Unconditional whitespace collapse run after the filler and voice passes."""
    normalized = collapse_whitespace(text)
    if normalized != text:
        logger.debug(
            "Normalized whitespace between passes (%d -> %d chars)", len(text), len(normalized)
        )
    return normalized
