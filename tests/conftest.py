"""
Shared fixtures for the test suite.

Environment is pinned before the application is imported so the
cached Settings never pick up a developer's .env values.
"""
import os

os.environ["APP_ENV"] = "testing"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["OFFICIAL_EMAIL"] = "tester@example.edu"
os.environ["GEMINI_API_KEY"] = "test-key"
os.environ.pop("AI_TIMEOUT_SECONDS", None)

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.core.config import get_settings
from src.services.bfhl_service import BFHLService, get_bfhl_service, reset_bfhl_service


class StubGeminiClient:
    """Records questions and returns a canned answer (or raises)."""

    def __init__(self, answer: str = "Paris", error: Exception = None):
        self.answer = answer
        self.error = error
        self.questions = []

    async def ask(self, question: str) -> str:
        self.questions.append(question)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def stub_ai():
    return StubGeminiClient()


@pytest.fixture
def client(stub_ai):
    """TestClient whose /bfhl service talks to the stub AI client."""
    app.dependency_overrides[get_bfhl_service] = lambda: BFHLService(stub_ai)
    yield TestClient(app)
    app.dependency_overrides.clear()
    reset_bfhl_service()
