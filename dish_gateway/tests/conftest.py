from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from dish_gateway.app import create_app
from dish_gateway.config import GatewayConfig
from dish_gateway.llm.client import get_completion_client
from dish_gateway.llm.config import LLMConfig


class FakeCompletionClient:
    """Stands in for CompletionClient and records every prompt it receives."""

    def __init__(self, reply: str = "Mushroom Risotto", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, user_message, system_prompt, max_tokens=None):
        self.calls.append({
            "user_message": user_message,
            "system_prompt": system_prompt,
            "max_tokens": max_tokens,
        })
        if self.error is not None:
            raise self.error
        return self.reply

    async def aclose(self):
        pass


@pytest.fixture
def fake_llm() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def make_client(fake_llm):
    """Build a TestClient for an app created with the given config overrides."""

    def _make(**overrides) -> TestClient:
        overrides.setdefault("api_key", "")
        overrides.setdefault("cors_origins", ("http://localhost:3000",))
        overrides.setdefault("llm", LLMConfig(provider="groq", api_key="test-key"))
        app = create_app(GatewayConfig(**overrides))
        app.dependency_overrides[get_completion_client] = lambda: fake_llm
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
