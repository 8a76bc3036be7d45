"""Fixtures compartidas: gateway fake y app de prueba."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from workflow_copilot.config import Settings
from workflow_copilot.errors import CompletionError


class FakeGateway:
    """Gateway de completions que devuelve una respuesta fija y registra las llamadas."""

    def __init__(self, response: str = "{}", error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[dict] = []

    def complete(self, messages, *, temperature, max_tokens):
        self.calls.append(
            {"messages": messages, "temperature": temperature, "max_tokens": max_tokens}
        )
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def make_gateway():
    """Fábrica de gateways fake: `make_gateway(response)` o `make_gateway(error=...)`."""
    return FakeGateway


@pytest.fixture
def gateway(make_gateway):
    return make_gateway()


@pytest.fixture
def failing_gateway(make_gateway):
    return make_gateway(error=CompletionError("Rate limit reached"))


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test", service_name="Test Copilot", temperature=0.5)


@pytest.fixture
def make_client(settings):
    """Construye un TestClient con el gateway indicado."""

    def _make(gateway, app_settings: Optional[Settings] = None):
        return TestClient(create_app(settings=app_settings or settings, gateway=gateway))

    return _make


@pytest.fixture
def client(make_client, gateway):
    """TestClient sobre una app con el gateway fake."""
    return make_client(gateway)
