"""Testes das settings por domínio (carregamento de env e validate)."""

from __future__ import annotations

import pytest

from config.settings import (
    DEFAULT_COMMAND_PREFIX,
    LEAKOSINT_API_URL,
    BaseSettings,
    DiscordSettings,
    LeakOsintSettings,
    RevoltSettings,
    StoreSettings,
)
from config.settings.base.core import _load_base_from_env
from config.settings.base.store import _load_store_from_env
from config.settings.leakosint import _load_from_env as load_leakosint
from config.settings.revolt import _load_from_env as load_revolt


class TestBaseSettings:
    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert _load_base_from_env().environment == "production"
        monkeypatch.setenv("ENVIRONMENT", "stage")
        assert _load_base_from_env().environment == "staging"
        monkeypatch.setenv("ENVIRONMENT", "anything")
        assert _load_base_from_env().environment == "development"

    def test_public_url_joins_paths(self) -> None:
        settings = BaseSettings(public_base_url="https://breaches.example.com/")
        assert settings.public_url("/files/abc") == "https://breaches.example.com/files/abc"

    def test_public_url_none_without_base(self) -> None:
        assert BaseSettings().public_url("/files/abc") is None

    def test_validate_rejects_non_http_base_url(self) -> None:
        errors = BaseSettings(public_base_url="ftp://x").validate()
        assert any("PUBLIC_BASE_URL" in e for e in errors)


class TestStoreSettings:
    def test_unknown_backend_falls_back_to_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BREACH_STORE_BACKEND", "postgres")
        assert _load_store_from_env().backend == "memory"

    def test_memory_forbidden_in_production(self) -> None:
        errors = StoreSettings(backend="memory").validate(BaseSettings(environment="production"))
        assert any("proibido em production" in e for e in errors)

    def test_redis_requires_url(self) -> None:
        errors = StoreSettings(backend="redis").validate(BaseSettings())
        assert any("REDIS_URL" in e for e in errors)
        assert StoreSettings(backend="redis").validate(BaseSettings(redis_url="redis://x")) == []


class TestLeakOsintSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("LEAKOSINT_API_TOKEN", "LEAKOSINT_API_URL", "LEAKOSINT_REQUEST_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)
        settings = load_leakosint()
        assert settings.api_url == LEAKOSINT_API_URL
        assert settings.request_timeout_seconds == 30.0
        assert settings.default_limit == 100

    def test_missing_token_is_reported(self) -> None:
        assert "LEAKOSINT_API_TOKEN não configurado" in LeakOsintSettings().validate()
        assert LeakOsintSettings(api_token="t").validate() == []

    def test_non_positive_timeout_is_reported(self) -> None:
        errors = LeakOsintSettings(api_token="t", request_timeout_seconds=0).validate()
        assert len(errors) == 1


class TestChannelSettings:
    def test_discord_key_length(self) -> None:
        assert DiscordSettings(public_key="ab").validate() == [
            "DISCORD_PUBLIC_KEY deve ter 64 caracteres hex"
        ]
        assert DiscordSettings(public_key="a" * 64).validate() == []

    def test_revolt_prefix_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REVOLT_COMMAND_PREFIX", raising=False)
        assert load_revolt().command_prefix == DEFAULT_COMMAND_PREFIX
        monkeypatch.setenv("REVOLT_COMMAND_PREFIX", "!leak")
        assert load_revolt().command_prefix == "!leak"

    def test_revolt_requires_token(self) -> None:
        assert RevoltSettings().validate() == ["REVOLT_WEBHOOK_TOKEN não configurado"]
