"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import Mock

import pytest

from spurious_correlations.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from ambient SPURIOUS_* variables and cached settings."""
    for name in ("MONTHS_BACK", "GRANULARITY", "PAIR_COUNT", "SEED", "POOL_FILE", "DEBUG"):
        monkeypatch.delenv(f"SPURIOUS_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def json_response() -> Callable[..., Mock]:
    """Build a mock ``requests.Response`` returning ``payload`` from ``.json()``."""

    def _make(payload: Any, status: int = 200, reason: str = "OK") -> Mock:
        resp = Mock()
        resp.status_code = status
        resp.ok = 200 <= status < 300
        resp.reason = reason
        resp.json.return_value = payload
        return resp

    return _make
