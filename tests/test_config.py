"""Tests for configuration handling."""

import pytest

from qstash_client import QStashClient, Settings
from qstash_client.config import DEFAULT_BASE_URL


class TestSettings:
    """Test Settings defaults and environment loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("QSTASH_URL", raising=False)
        monkeypatch.delenv("QSTASH_TOKEN", raising=False)

        settings = Settings(_env_file=None)

        assert settings.url == DEFAULT_BASE_URL
        assert settings.token.get_secret_value() == ""
        assert settings.timeout_seconds == 30.0
        assert settings.log_format == "console"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("QSTASH_TOKEN", "env-token")
        monkeypatch.setenv("QSTASH_URL", "http://localhost:8080")
        monkeypatch.setenv("QSTASH_TIMEOUT_SECONDS", "5")

        settings = Settings(_env_file=None)

        assert settings.token.get_secret_value() == "env-token"
        assert settings.url == "http://localhost:8080"
        assert settings.timeout_seconds == 5.0

    def test_token_is_not_printed(self):
        settings = Settings(_env_file=None, token="secret-token")
        assert "secret-token" not in repr(settings)


class TestClientConfiguration:
    """Test how the client combines arguments and settings."""

    @pytest.mark.asyncio
    async def test_settings_are_used(self, settings):
        client = QStashClient(settings=settings)
        assert client.base_url == settings.url
        await client.close()

    @pytest.mark.asyncio
    async def test_arguments_override_settings(self, settings):
        client = QStashClient("other", base_url="http://localhost:8080/", settings=settings)

        http = await client.http._get_client()

        assert client.base_url == "http://localhost:8080"
        assert http.headers["Authorization"] == "Bearer other"
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, settings):
        async with QStashClient(settings=settings) as client:
            await client.http._get_client()

        assert client.http._client is None
