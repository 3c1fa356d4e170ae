"""Tests for configuration, auth headers and client construction."""

import httpx
import pytest

from tranzakt import AuthMode, ClientConfig, ConfigurationError, Settings, Tranzakt
from tranzakt.core.auth import build_auth_headers
from tranzakt.core.config import DEFAULT_BASE_URL


def test_bearer_headers():
    assert build_auth_headers("sk_123") == {
        "Authorization": "Bearer sk_123",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


def test_api_key_headers():
    assert build_auth_headers("sk_123", AuthMode.API_KEY) == {
        "x-api-key": "sk_123",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


def test_empty_secret_rejected():
    with pytest.raises(ConfigurationError):
        build_auth_headers("  ")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TRANZAKT_SECRET_KEY", "sk_env")
    monkeypatch.setenv("TRANZAKT_BASE_URL", "https://sandbox.example.com")
    monkeypatch.setenv("TRANZAKT_AUTH_MODE", "api_key")
    monkeypatch.setenv("TRANZAKT_HTTP_TIMEOUT", "12.5")
    monkeypatch.setenv("TRANZAKT_MAX_PAGES", "7")

    settings = Settings()

    assert settings.secret_key == "sk_env"
    assert settings.base_url == "https://sandbox.example.com"
    assert settings.auth_mode is AuthMode.API_KEY
    assert settings.http_timeout == 12.5
    assert settings.max_pages == 7
    assert settings.max_items == 1000


def test_settings_defaults(monkeypatch):
    for name in ("SECRET_KEY", "BASE_URL", "AUTH_MODE", "HTTP_TIMEOUT"):
        monkeypatch.delenv(f"TRANZAKT_{name}", raising=False)

    settings = Settings()

    assert settings.secret_key is None
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.auth_mode is AuthMode.BEARER
    assert settings.http_timeout is None


@pytest.mark.asyncio
async def test_from_env_builds_client(monkeypatch):
    monkeypatch.setenv("TRANZAKT_SECRET_KEY", "sk_env")
    monkeypatch.setenv("TRANZAKT_BASE_URL", "https://sandbox.example.com")
    monkeypatch.setenv("TRANZAKT_AUTH_MODE", "api_key")
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": "col-9"})

    async with Tranzakt.from_env(Settings(), transport=httpx.MockTransport(handler)) as client:
        assert client.config.base_url == "https://sandbox.example.com"
        await client.get_collection("col-9")

    assert str(seen[0].url) == "https://sandbox.example.com/collections/col-9"
    assert seen[0].headers["x-api-key"] == "sk_env"


def test_from_env_requires_secret(monkeypatch):
    monkeypatch.delenv("TRANZAKT_SECRET_KEY", raising=False)

    with pytest.raises(ConfigurationError):
        Tranzakt.from_env(Settings())


def test_client_config_is_frozen():
    config = ClientConfig(secret_key="sk")

    assert config.base_url == DEFAULT_BASE_URL
    with pytest.raises(ValueError):
        config.base_url = "https://elsewhere.example.com"


def test_clients_do_not_share_origin():
    first = Tranzakt("sk_a", base_url="https://a.example.com")
    second = Tranzakt("sk_b", base_url="https://b.example.com", auth_mode=AuthMode.API_KEY)

    assert first.processor.base_url == "https://a.example.com"
    assert second.processor.base_url == "https://b.example.com"
    assert first.headers["Authorization"] == "Bearer sk_a"
    assert second.headers["x-api-key"] == "sk_b"
