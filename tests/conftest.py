"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- A scriptable fake provider (no network calls)
- Generation clients in ready / not-ready mode
- Test client (FastAPI TestClient)
"""

import os

# Never pick up a real key from the developer's environment or .env
os.environ["OPENAI_API_KEY"] = ""

import pytest
from typing import Generator, List, Optional

from fastapi.testclient import TestClient

from app.ai.content import GenerationClient, ServiceConfig
from app.ai.providers.base import AIProvider, AIResponse, ProviderType
from app.deps import get_generation_client
from app.main import app


# ---------------------------------------------------------------------------
# FAKE PROVIDER
# ---------------------------------------------------------------------------

class FakeProvider(AIProvider):
    """
    Provider double that records calls and replays a scripted outcome.

    Set exactly one of:
    - content: returned as a successful reply
    - error: returned as an unsuccessful AIResponse
    - exception: raised from generate()
    """

    provider_type = ProviderType.OPENAI

    def __init__(
        self,
        content: str = "",
        error: Optional[str] = None,
        exception: Optional[Exception] = None,
    ):
        self.model = "gpt-test"
        self.content = content
        self.error = error
        self.exception = exception
        self.calls: List[dict] = []

    async def generate(self, prompt, system_prompt=None, temperature=0.7, max_tokens=1024, **kwargs):
        self.calls.append({
            "prompt": prompt,
            "system_prompt": system_prompt,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.exception is not None:
            raise self.exception
        if self.error is not None:
            return self._create_error_response(error=self.error, model=self.model)
        return AIResponse(content=self.content, provider=self.provider_type, model=self.model)


# ---------------------------------------------------------------------------
# CLIENT FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def ready_client(fake_provider: FakeProvider) -> GenerationClient:
    """Generation client with a credential, wired to the fake provider."""
    return GenerationClient(
        config=ServiceConfig.from_credential("sk-test"),
        provider=fake_provider,
    )


@pytest.fixture
def unready_client(fake_provider: FakeProvider) -> GenerationClient:
    """Generation client without a credential; the fake provider must stay unused."""
    return GenerationClient(
        config=ServiceConfig.from_credential(""),
        provider=fake_provider,
    )


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """HTTP test client using a not-ready generation client."""
    app.dependency_overrides[get_generation_client] = lambda: GenerationClient(
        config=ServiceConfig.from_credential(None)
    )

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
