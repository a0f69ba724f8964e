"""Tests for token estimator heuristics."""

import math

import pytest

from prompt_optimizer.core.models import TextStats
from prompt_optimizer.text_processing.token_estimator import (
    char_count,
    compute_stats,
    line_count,
    tokens_advanced,
    tokens_char_based,
    tokens_word_based,
    word_count,
)


def test_empty_text_stats() -> None:
    assert compute_stats("") == TextStats(
        characters=0,
        words=0,
        lines=1,
        tokens_char_based=0,
        tokens_word_based=0,
        tokens_advanced=0,
    )


def test_hello_world_stats() -> None:
    assert compute_stats("hello world") == TextStats(
        characters=11,
        words=2,
        lines=1,
        tokens_char_based=3,
        tokens_word_based=3,
        tokens_advanced=3,
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("   ", 0),
        ("\n\t", 0),
        ("one", 1),
        ("  one   two\nthree\tfour  ", 4),
    ],
)
def test_word_count(text: str, expected: int) -> None:
    assert word_count(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 1),
        ("single line", 1),
        ("a\nb", 2),
        ("trailing\n", 2),
        ("\n\n", 3),
    ],
)
def test_line_count(text: str, expected: int) -> None:
    assert line_count(text) == expected


def test_char_count_uses_code_points() -> None:
    assert char_count("café") == 4
    assert char_count("😀") == 1


def test_char_based_rounds_up() -> None:
    assert tokens_char_based("a") == 1
    assert tokens_char_based("abcd") == 1
    assert tokens_char_based("abcde") == 2


def test_word_based_rounds_up() -> None:
    assert tokens_word_based("one") == 2  # 1 / 0.75
    assert tokens_word_based("one two three") == 4


def test_advanced_weights_punctuation_and_structure() -> None:
    # 4 chars + 2 punctuation * 0.5 = 5 / 3.8
    assert tokens_advanced("a,b.") == math.ceil(5 / 3.8)
    # 8 chars + 1 newline * 0.3 + 1 tab * 0.3 = 8.6 / 3.8
    assert tokens_advanced("abc\nd\tef") == math.ceil(8.6 / 3.8)


def test_advanced_longer_sample() -> None:
    text = "Hello, world! How are you?\n" * 10
    punctuation = 3 * 10
    newlines = 10
    expected = math.ceil((len(text) + punctuation * 0.5 + newlines * 0.3) / 3.8)
    assert tokens_advanced(text) == expected


@pytest.mark.parametrize("text", ["", " ", "x", "a b c", "...", "\n\n\n", "Line one.\nLine two!"])
def test_estimates_never_negative(text: str) -> None:
    stats = compute_stats(text)
    assert stats.tokens_char_based >= 0
    assert stats.tokens_word_based >= 0
    assert stats.tokens_advanced >= 0
    assert stats.lines >= 1


def test_non_empty_text_never_estimates_zero() -> None:
    stats = compute_stats("x")
    assert stats.tokens_char_based == 1
    assert stats.tokens_word_based == 2
    assert stats.tokens_advanced == 1
