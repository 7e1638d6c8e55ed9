"""Root pytest configuration for probrange package tests."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
import yaml
from click.testing import CliRunner

from probrange.random_source import SeededRandomSource

LOOT_PROPORTIONS = [0.04, 0.08, 0.2, 0.08, 0.17]
LOOT_PROBABILITIES = [0.01, 0.36, 0.34, 0.2, 0.06, 0.03]


class ScriptedSource:
    """Random source returning pre-scripted values and recording calls."""

    def __init__(self, values: list[int]) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def uniform(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.values.pop(0)


@pytest.fixture
def loot_proportions() -> list[float]:
    """Proportions of the reference loot table."""
    return list(LOOT_PROPORTIONS)


@pytest.fixture
def loot_probabilities() -> list[float]:
    """Probabilities of the reference loot table."""
    return list(LOOT_PROBABILITIES)


@pytest.fixture
def decimal_probabilities() -> list[Decimal]:
    """Reference loot table probabilities as Decimals."""
    return [Decimal(str(p)) for p in LOOT_PROBABILITIES]


@pytest.fixture
def seeded_source() -> SeededRandomSource:
    """Deterministic random source."""
    return SeededRandomSource(12345)


@pytest.fixture
def scripted_source() -> Callable[[list[int]], ScriptedSource]:
    """Factory for scripted random sources."""
    return ScriptedSource


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def loot_config_data() -> dict[str, Any]:
    """Configuration mapping with a weighted table, a uniform table and a
    table whose interval is too small for its proportions.
    """
    return {
        "logging": {"level": "WARNING", "use_rich": False},
        "tables": {
            "gold": {
                "min": 1,
                "max": 1000,
                "proportions": list(LOOT_PROPORTIONS),
                "probabilities": list(LOOT_PROBABILITIES),
                "seed": 42,
            },
            "plain": {"min": 50, "max": 70},
            "tiny": {
                "min": 1,
                "max": 10,
                "proportions": list(LOOT_PROPORTIONS),
                "probabilities": list(LOOT_PROBABILITIES),
            },
        },
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Factory writing a configuration mapping to a YAML file."""

    def _write(data: dict[str, Any], name: str = "loot.yaml") -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        return path

    return _write


@pytest.fixture
def loot_config_file(
    write_config: Callable[[dict[str, Any]], Path], loot_config_data: dict[str, Any]
) -> Path:
    """YAML file holding the loot configuration."""
    return write_config(loot_config_data)
