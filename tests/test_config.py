"""Tests for configuration parsing."""

import pytest
from pydantic import ValidationError

from exercise_tracker.config import Settings, parse_cors_origins


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.timezone == "UTC"


def test_settings_reads_port_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "4100")

    assert Settings(_env_file=None).port == 4100


@pytest.mark.parametrize("raw", [None, "", "*", " * "])
def test_parse_cors_origins_allows_all(raw: str | None) -> None:
    assert parse_cors_origins(raw) == ["*"]


def test_parse_cors_origins_splits_list() -> None:
    raw = "https://a.example/, https://b.example,,https://a.example"

    assert parse_cors_origins(raw) == ["https://a.example", "https://b.example"]


def test_settings_accepts_known_timezone() -> None:
    assert Settings(_env_file=None, timezone="Asia/Tokyo").timezone == "Asia/Tokyo"


@pytest.mark.parametrize("zone", ["Mars/Olympus", "../etc/passwd"])
def test_settings_rejects_unknown_timezone(zone: str) -> None:
    with pytest.raises(ValidationError, match="timezone"):
        Settings(_env_file=None, timezone=zone)
