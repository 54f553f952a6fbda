from __future__ import annotations

import pytest
from pydantic import ValidationError

from tradebook.core.config import DEFAULT_LOCAL_CANDIDATES, TradebookConfig
from tradebook.core.exceptions import ConfigurationError


def test_defaults() -> None:
    config = TradebookConfig()

    assert config.sheet_id is None
    assert config.has_remote_source is False
    assert config.sheet_url() is None
    assert config.sheet_gid == "0"
    assert config.local_candidates == DEFAULT_LOCAL_CANDIDATES
    assert config.request_timeout == 30.0


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRADEBOOK_SHEET_ID", "abc123")
    monkeypatch.setenv("TRADEBOOK_SHEET_GID", "99")
    monkeypatch.setenv("TRADEBOOK_LOCAL_CANDIDATES", '["a.csv", "b.csv"]')
    monkeypatch.setenv("TRADEBOOK_REQUEST_TIMEOUT", "5")

    config = TradebookConfig()

    assert config.has_remote_source is True
    assert config.sheet_url() == "https://docs.google.com/spreadsheets/d/abc123/export?format=csv&gid=99"
    assert config.local_candidates == ["a.csv", "b.csv"]
    assert config.request_timeout == 5.0


def test_blank_sheet_id_means_no_remote(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRADEBOOK_SHEET_ID", "  ")

    assert TradebookConfig().sheet_id is None


def test_keyword_arguments_beat_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRADEBOOK_SHEET_ID", "from-env")

    assert TradebookConfig(sheet_id="from-cli").sheet_id == "from-cli"


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        TradebookConfig(request_timeout=0)


def test_from_overrides_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRADEBOOK_REQUEST_TIMEOUT", "-1")

    with pytest.raises(ConfigurationError) as exc_info:
        TradebookConfig.from_overrides(sheet_id="abc")

    error = exc_info.value
    assert error.error_code == "CONFIGURATION_ERROR"
    assert "request_timeout" in error.message
    assert error.details["errors"][0]["field"] == "request_timeout"


def test_from_overrides_applies_keywords() -> None:
    config = TradebookConfig.from_overrides(sheet_gid="12", local_candidates=["x.csv"])

    assert config.sheet_gid == "12"
    assert config.local_candidates == ["x.csv"]
