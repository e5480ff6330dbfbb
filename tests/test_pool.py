"""Tests for the default pool and pool files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from spurious_correlations.pairs import max_unique_pairs
from spurious_correlations.pool import DEFAULT_POOL, load_pool
from spurious_correlations.schemas import Provider, UsgsQuakesSpec, WikipediaSpec


class TestDefaultPool:
    """Built-in specs."""

    def test_covers_every_provider(self) -> None:
        assert {spec.provider for spec in DEFAULT_POOL} == {p.value for p in Provider}

    def test_labels_unique(self) -> None:
        n = len(DEFAULT_POOL)
        assert max_unique_pairs(DEFAULT_POOL) == n * (n - 1) // 2

    def test_enough_pairs_for_default_batch(self) -> None:
        assert max_unique_pairs(DEFAULT_POOL) >= 50


class TestLoadPool:
    """JSON pool files."""

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "pool.json"
        path.write_text(
            json.dumps(
                [
                    {"provider": "wp", "title": "Corgi"},
                    {"provider": "usgs_quakes", "min_magnitude": 5.0},
                ]
            )
        )

        assert load_pool(path) == [
            WikipediaSpec(title="Corgi"),
            UsgsQuakesSpec(min_magnitude=5.0),
        ]

    def test_not_an_array(self, tmp_path: Path) -> None:
        path = tmp_path / "pool.json"
        path.write_text(json.dumps({"provider": "wp", "title": "Corgi"}))

        with pytest.raises(ValueError, match="JSON array"):
            load_pool(path)

    def test_invalid_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "pool.json"
        path.write_text(json.dumps([{"provider": "wp"}]))

        with pytest.raises(ValidationError):
            load_pool(path)
