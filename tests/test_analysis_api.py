"""Tests for the stats and optimize endpoints."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from prompt_optimizer.config import Settings, get_settings
from prompt_optimizer.main import app


@pytest.fixture
def limited_client(test_settings: Settings) -> Iterator[TestClient]:
    """Client whose settings cap request text at 64 characters."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_stats_endpoint(client: TestClient):
    response = client.post("/api/v1/stats", json={"text": "hello world"})
    assert response.status_code == 200
    assert response.json() == {
        "characters": 11,
        "words": 2,
        "lines": 1,
        "tokens_char_based": 3,
        "tokens_word_based": 3,
        "tokens_advanced": 3,
    }


def test_stats_endpoint_accepts_empty_text(client: TestClient):
    response = client.post("/api/v1/stats", json={"text": ""})
    assert response.status_code == 200
    data = response.json()
    assert data["lines"] == 1
    assert data["tokens_advanced"] == 0


def test_stats_endpoint_requires_text(client: TestClient):
    response = client.post("/api/v1/stats", json={})
    assert response.status_code == 422


def test_optimize_endpoint(client: TestClient):
    response = client.post(
        "/api/v1/optimize", json={"text": "Please kindly utilize this   approach."}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["original_text"] == "Please kindly utilize this   approach."
    assert data["optimized_text"] == "use this approach."
    assert data["applied_strategies"] == ["whitespace", "redundancy", "simplification"]
    assert data["strategy_labels"] == [
        "Removed excessive whitespace",
        "Removed redundant phrases",
        "Simplified complex words",
    ]
    assert data["reduction"] == data["original_tokens"] - data["optimized_tokens"]
    assert data["reduction_percentage"] > 0


def test_optimize_endpoint_sentinel(client: TestClient):
    response = client.post("/api/v1/optimize", json={"text": "go"})
    assert response.status_code == 200
    data = response.json()
    assert data["applied_strategies"] == ["none"]
    assert data["reduction"] == 0
    assert data["reduction_percentage"] == 0


def test_optimize_endpoint_rejects_blank_text(client: TestClient):
    response = client.post("/api/v1/optimize", json={"text": "   "})
    assert response.status_code == 422
    assert response.json()["type"] == "EmptyTextException"


def test_text_length_limit(limited_client: TestClient):
    response = limited_client.post("/api/v1/optimize", json={"text": "x" * 65})
    assert response.status_code == 422
    assert response.json()["type"] == "ValidationException"

    response = limited_client.post("/api/v1/stats", json={"text": "x" * 64})
    assert response.status_code == 200
