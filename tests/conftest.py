import pytest
from fastapi.testclient import TestClient

from prompt_optimizer.config import Settings
from prompt_optimizer.main import app
from prompt_optimizer.services.optimizer import OptimizerService


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(max_text_length=64)


@pytest.fixture
def optimizer_service() -> OptimizerService:
    return OptimizerService()
