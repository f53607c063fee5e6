"""
Pytest fixtures shared by all tests.

Provider keys are cleared BEFORE importing app modules so the module-level
Settings never picks up real credentials from the environment.
"""

import os

os.environ["OPENAI_API_KEY"] = ""
os.environ["GEMINI_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.services.ai import UNAVAILABLE, ProviderResult
from app.services.generate import GenerateSequenceService


class FakeAI:
    """Stands in for AIService; records prompts and returns a fixed outcome."""

    def __init__(self, outcome: ProviderResult = UNAVAILABLE, configured: bool = False):
        self.outcome = outcome
        self.configured = configured
        self.prompts: list[str] = []

    def is_configured(self) -> bool:
        return self.configured

    async def complete(self, prompt: str) -> ProviderResult:
        self.prompts.append(prompt)
        return self.outcome


async def failing_fetch(url: str) -> str:
    raise ConnectionError(f"cannot reach {url}")


def static_fetch(html: str):
    async def fetch(url: str) -> str:
        return html

    return fetch


@pytest.fixture
def offline_settings() -> Settings:
    return Settings(openai_api_key="", gemini_api_key="", _env_file=None)


@pytest.fixture
def fake_ai() -> FakeAI:
    return FakeAI()


@pytest.fixture
def offline_service(offline_settings, fake_ai) -> GenerateSequenceService:
    return GenerateSequenceService(offline_settings, fetch_html=failing_fetch, ai=fake_ai)


@pytest.fixture
def client(offline_service):
    """FastAPI test client with network collaborators replaced."""
    from app.api.routes import get_generate_service
    from main import app

    app.dependency_overrides[get_generate_service] = lambda: offline_service
    yield TestClient(app)
    app.dependency_overrides.clear()
