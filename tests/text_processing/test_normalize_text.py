"""Tests for whitespace normalization helpers."""

from prompt_optimizer.text_processing.normalize_text import (
    collapse_excess_whitespace,
    collapse_whitespace,
    has_whitespace_run,
)


def test_has_whitespace_run() -> None:
    assert has_whitespace_run("a  b")
    assert has_whitespace_run("a\n\nb")
    assert has_whitespace_run("a \tb")
    assert not has_whitespace_run("a b\nc")
    assert not has_whitespace_run("")


def test_collapse_whitespace_is_unconditional() -> None:
    assert collapse_whitespace("  Hello\nworld\t ") == "Hello world"
    assert collapse_whitespace("a b") == "a b"


def test_collapse_excess_whitespace_collapses_every_run_and_trims() -> None:
    assert collapse_excess_whitespace(" Hello    world\nagain ") == "Hello world again"


def test_collapse_excess_whitespace_leaves_single_whitespace_alone() -> None:
    text = " Hello world\nagain "
    assert collapse_excess_whitespace(text) is text
