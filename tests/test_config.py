"""
Tests de la carga de configuración desde el entorno.

Verifica:
1) Defaults cuando no hay variables
2) Conversión de tipos (PORT, OPENAI_TEMPERATURE) y LOG_LEVEL en mayúsculas
3) CORS_ORIGINS como lista separada por comas, con fallback a "*"
4) Que `get_settings()` cachea hasta `cache_clear()`
"""

import pytest

from workflow_copilot.config import DEFAULT_SERVICE_NAME, get_settings

ENV_VARS = [
    "OPENAI_API_KEY",
    "OPENAI_MODEL_TEXT",
    "OPENAI_TEMPERATURE",
    "PORT",
    "CORS_ORIGINS",
    "LOG_LEVEL",
    "SERVICE_NAME",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Entorno sin variables del servicio y cache de settings limpio."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = get_settings()

    assert settings.openai_api_key == ""
    assert settings.openai_model_text == "gpt-4"
    assert settings.temperature == 0.7
    assert settings.port == 3001
    assert settings.cors_origins == ["*"]
    assert settings.log_level == "INFO"
    assert settings.service_name == DEFAULT_SERVICE_NAME


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_MODEL_TEXT", "gpt-4o-mini")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.2")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SERVICE_NAME", "Copilot staging")

    settings = get_settings()

    assert settings.openai_api_key == "sk-env"
    assert settings.openai_model_text == "gpt-4o-mini"
    assert settings.temperature == 0.2
    assert settings.port == 8080
    assert isinstance(settings.port, int)
    assert settings.log_level == "DEBUG"
    assert settings.service_name == "Copilot staging"


def test_cors_origins_comma_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", " http://localhost:5678 ,https://n8n.example.com,, ")

    assert get_settings().cors_origins == ["http://localhost:5678", "https://n8n.example.com"]


@pytest.mark.parametrize("raw", ["", " , ,"])
def test_cors_origins_empty_falls_back_to_any(monkeypatch, raw):
    monkeypatch.setenv("CORS_ORIGINS", raw)

    assert get_settings().cors_origins == ["*"]


def test_invalid_port_raises(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")

    with pytest.raises(ValueError):
        get_settings()


def test_settings_are_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("PORT", "9999")

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().port == 9999
