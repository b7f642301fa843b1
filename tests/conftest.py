# conftest.py

import os

import pytest
from fastapi.testclient import TestClient

# --- Environment Configuration ---

def pytest_configure(config):
    """
    Sets deterministic environment variables for the whole test session,
    before any application module reads them.
    """
    os.environ["OPENROUTER_API_KEY"] = "sk-or-testplaceholderkey"
    os.environ["LOG_LEVEL"] = "INFO"
    for name in ("PORT", "HOST", "MODEL", "STATIC_DIR", "OPENROUTER_BASE_URL"):
        os.environ.pop(name, None)


# --- Fakes and Fixtures ---

class FakeCompleter:
    """Stands in for the upstream LLM; records every question it sees."""

    def __init__(self, answer="A short, helpful answer.", error=None):
        self.answer = answer
        self.error = error
        self.questions = []

    def complete(self, question):
        self.questions.append(question)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def test_settings():
    from completion_api.config import Settings

    return Settings(_env_file=None)


@pytest.fixture
def completer_factory():
    return FakeCompleter


@pytest.fixture
def fake_completer(completer_factory):
    return completer_factory()


@pytest.fixture
def client(test_settings, fake_completer):
    from completion_api.api.main import create_app

    app = create_app(test_settings, completer=fake_completer)
    with TestClient(app) as test_client:
        yield test_client
