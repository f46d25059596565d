from types import SimpleNamespace

import pytest

from chatbox.credentials import has_api_key, InMemoryCredentialStore
from chatbox.extractors import StaticExtractor
from chatbox.providers.llm_client import LLMClient


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: calls the live completion provider")


def _build_fake_response(content: str | None = None, no_choices: bool = False) -> SimpleNamespace:
    if no_choices:
        return SimpleNamespace(choices=[])
    message = SimpleNamespace(content=content, tool_calls=None)
    choice = SimpleNamespace(message=message)
    return SimpleNamespace(choices=[choice])


class DummyClient(LLMClient):
    """Records every call and answers with a prepared response or error."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.model_name = "dummy-model"
        self.calls = []

    def chat_completion(self, messages, model, temperature=1.0, **kwargs):
        self.calls.append({"messages": messages, "model": model, "temperature": temperature, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_response():
    return _build_fake_response


@pytest.fixture
def dummy_client():
    return DummyClient


@pytest.fixture
def credentials():
    return InMemoryCredentialStore("sk-test")


@pytest.fixture
def static_extractor():
    return StaticExtractor(
        problem_statement="Two Sum",
        programming_language="Python",
        user_code="def f(): pass",
    )


def _is_live_enabled(provider: str | None = None) -> bool:
    if provider:
        return has_api_key(provider)
    return True


@pytest.fixture(scope="session")
def live_enabled():
    return _is_live_enabled
