"""Testes dos loaders de settings a partir do ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    DEFAULT_ALLOWED_ORIGINS,
    AppSettings,
    BaseSettings,
    GoogleDriveSettings,
    SupabaseSettings,
    get_base_settings,
    get_compulife_settings,
    get_drive_settings,
    get_supabase_settings,
    load_app_settings,
)
from config.settings.base.core import parse_origins

_CACHED_LOADERS = (get_base_settings, get_compulife_settings, get_drive_settings, get_supabase_settings)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    for loader in _CACHED_LOADERS:
        loader.cache_clear()
    yield
    for loader in _CACHED_LOADERS:
        loader.cache_clear()


def test_base_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "12")

    settings = get_base_settings()

    assert settings.is_production
    assert settings.allowed_origins == ("https://a.example", "https://b.example")
    assert settings.upstream_timeout_seconds == 12.0


def test_unknown_environment_falls_back_to_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "qa")
    assert get_base_settings().is_development


def test_parse_origins_defaults() -> None:
    assert parse_origins(None) == DEFAULT_ALLOWED_ORIGINS
    assert parse_origins(" , ") == DEFAULT_ALLOWED_ORIGINS


def test_wildcard_origin_rejected_only_in_production() -> None:
    assert BaseSettings(allowed_origins=("*",)).validate() == []
    assert BaseSettings(environment="production", allowed_origins=("*",)).validate()


def test_compulife_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COMPULIFE_AUTH_ID", raising=False)
    monkeypatch.delenv("REMOTE_IP", raising=False)

    settings = get_compulife_settings()

    assert settings.auth_id == ""
    assert settings.remote_ip == "162.220.232.99"
    assert not settings.configured


def test_drive_missing_lists_in_order() -> None:
    settings = GoogleDriveSettings(client_secret="s")
    assert settings.missing() == [
        "GOOGLE_CLIENT_ID",
        "GOOGLE_REFRESH_TOKEN",
        "GOOGLE_DRIVE_FOLDER_ID",
    ]
    assert not settings.configured


def test_supabase_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://proj.supabase.co/")
    monkeypatch.setenv("SUPABASE_KEY", "k")
    monkeypatch.delenv("SUPABASE_BUCKET", raising=False)

    settings = get_supabase_settings()

    assert settings.bucket == "uploads"
    assert settings.storage_url == "https://proj.supabase.co/storage/v1"
    assert settings.configured


def test_supabase_requires_bucket() -> None:
    assert "SUPABASE_BUCKET não pode ser vazio" in SupabaseSettings(url="u", key="k", bucket="").validate()


def test_app_settings_are_immutable() -> None:
    settings = AppSettings()
    with pytest.raises(AttributeError):
        settings.base = BaseSettings()  # type: ignore[misc]


def test_load_app_settings_reads_every_section(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPULIFE_AUTH_ID", "abc")
    monkeypatch.setenv("GOOGLE_CLIENT_ID", "cid")

    settings = load_app_settings()

    assert settings.compulife.auth_id == "abc"
    assert settings.drive.client_id == "cid"
