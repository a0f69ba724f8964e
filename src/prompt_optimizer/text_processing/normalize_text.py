"""Whitespace normalization used by the rewrite passes."""

import re

from prompt_optimizer.core.logging import get_logger

logger = get_logger(__name__)

# Regex patterns compiled once for efficiency
_WHITESPACE_PATTERN = re.compile(r"\s+")
_WHITESPACE_RUN_PATTERN = re.compile(r"\s{2,}")


def has_whitespace_run(value: str) -> bool:
    """Return True when the text contains two or more consecutive whitespace chars."""
    return _WHITESPACE_RUN_PATTERN.search(value) is not None


def collapse_whitespace(value: str) -> str:
    """Replace every whitespace run (newlines and tabs included) with one space and trim."""
    return _WHITESPACE_PATTERN.sub(" ", value).strip()


def collapse_excess_whitespace(value: str) -> str:
    """Collapse and trim whitespace, but only if the text has a run of two or more.

    Text whose whitespace is already single characters is returned untouched,
    including any leading/trailing space or lone newline.

    Args:
        value: Raw text.

    Returns:
        The collapsed text, or ``value`` itself when there is nothing to collapse.
    """
    if not has_whitespace_run(value):
        return value

    text = collapse_whitespace(value)
    logger.debug("Collapsed whitespace from %d to %d chars", len(value), len(text))
    return text
