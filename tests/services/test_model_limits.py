"""Tests for the model limit catalog."""

import pytest

from prompt_optimizer.core.exceptions import NotFoundException, ValidationException
from prompt_optimizer.core.models import ModelLimit
from prompt_optimizer.services.model_limits import (
    get_model_limit,
    list_model_limits,
    remaining,
    usage_percentage,
    usage_ratio,
)


def test_catalog_order_and_values() -> None:
    assert [(model.name, model.limit) for model in list_model_limits()] == [
        ("GPT-3.5 Turbo", 4096),
        ("GPT-4", 8192),
        ("GPT-4 Turbo", 32768),
        ("Claude 3 Sonnet", 200000),
    ]


def test_get_model_limit() -> None:
    assert get_model_limit(1) == ModelLimit(name="GPT-4", limit=8192)


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_get_model_limit_out_of_range(index: int) -> None:
    with pytest.raises(NotFoundException):
        get_model_limit(index)


def test_model_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ModelLimit(name="broken", limit=0)


def test_usage_ratio() -> None:
    assert usage_ratio(0, 4096) == 0
    assert usage_ratio(2048, 4096) == 0.5
    assert usage_ratio(8192, 4096) == 2.0
    assert usage_percentage(1024, 4096) == 25.0


def test_usage_ratio_rejects_non_positive_limit() -> None:
    with pytest.raises(ValidationException):
        usage_ratio(10, 0)


def test_remaining_never_negative() -> None:
    assert remaining(96, 4096) == 4000
    assert remaining(4096, 4096) == 0
    assert remaining(5000, 4096) == 0
