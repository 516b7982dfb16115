"""Unit tests for settings validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from streamify.config import DEFAULT_FRONTEND_URL, Settings


def _settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_defaults(monkeypatch):
    for name in ("PORT", "NODE_ENV", "FRONTEND_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = _settings()
    assert settings.PORT == 5000
    assert settings.is_development
    assert settings.allowed_origin == DEFAULT_FRONTEND_URL
    assert settings.log_level == "DEBUG"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FRONTEND_URL", "https://app.example")
    settings = _settings()
    assert settings.PORT == 8080
    assert settings.allowed_origin == "https://app.example"


def test_production_requires_frontend_url(monkeypatch):
    monkeypatch.delenv("FRONTEND_URL", raising=False)
    with pytest.raises(ValidationError):
        _settings(NODE_ENV="production", JWT_SECRET_KEY="real-secret")


def test_production_requires_jwt_secret(monkeypatch):
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        _settings(NODE_ENV="production", FRONTEND_URL="https://app.example")


def test_production_settings():
    settings = _settings(
        NODE_ENV="production",
        FRONTEND_URL="https://app.example",
        JWT_SECRET_KEY="real-secret",
    )
    assert settings.is_production
    assert settings.log_level == "INFO"


def test_invalid_port():
    with pytest.raises(ValidationError):
        _settings(PORT=70000)


def test_unknown_mode_rejected():
    with pytest.raises(ValidationError):
        _settings(NODE_ENV="staging")


def test_frontend_dist_dir_relative_to_working_directory(monkeypatch):
    monkeypatch.delenv("FRONTEND_DIST_DIR", raising=False)
    settings = _settings()
    assert settings.FRONTEND_DIST_DIR == Path("frontend") / "dist"
    assert not settings.FRONTEND_DIST_DIR.is_absolute()
