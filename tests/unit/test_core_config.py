from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings
from core.logging import configure_logging


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("UPLOAD_DIR", raising=False)
    settings = Settings(_env_file=None)

    assert settings.document_model_id == "prebuilt-layout"
    assert settings.qa_model_provider == "azure_openai"
    assert settings.qa_temperature == 0.3
    assert settings.qa_max_tokens == 1500
    assert settings.geometry_prefix_match == "first"
    assert settings.upload_dir == "uploads"
    assert settings.port == 3000


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GEOMETRY_PREFIX_MATCH", "longest")
    monkeypatch.setenv("AZURE_OPENAI_KEY", "s3cret")

    settings = get_settings()

    assert settings.port == 8080
    assert settings.geometry_prefix_match == "longest"
    assert settings.azure_openai_key.get_secret_value() == "s3cret"
    assert "s3cret" not in settings.model_dump_json()


def test_invalid_prefix_strategy_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("GEOMETRY_PREFIX_MATCH", "shortest")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_configure_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug")
        configure_logging("WARNING")

        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
