"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from spurious_correlations.config import Settings, get_settings, reset_settings
from spurious_correlations.schemas import Granularity


class TestSettings:
    """Defaults and environment overrides."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.months_back == 36
        assert settings.granularity == Granularity.MONTHLY
        assert settings.pair_count == 50
        assert settings.seed is None
        assert settings.pool_file is None

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPURIOUS_MONTHS_BACK", "60")
        monkeypatch.setenv("SPURIOUS_GRANULARITY", "daily")
        monkeypatch.setenv("SPURIOUS_SEED", "7")
        monkeypatch.setenv("SPURIOUS_POOL_FILE", "/tmp/pool.json")

        settings = Settings()

        assert settings.months_back == 60
        assert settings.granularity == Granularity.DAILY
        assert settings.seed == 7
        assert settings.pool_file == Path("/tmp/pool.json")

    def test_rejects_bad_granularity(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPURIOUS_GRANULARITY", "weekly")
        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_zero_pairs(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPURIOUS_PAIR_COUNT", "0")
        with pytest.raises(ValidationError):
            Settings()


class TestGetSettings:
    """Cached global instance."""

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("SPURIOUS_MONTHS_BACK", "12")
        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.months_back == 12
