"""Shared pytest fixtures for the musicmeta test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from musicmeta.config.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration at a per-test file and drop the cached instance."""

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("MUSICMETA_CONFIG", str(config_path))
    Config.reset()
    try:
        yield config_path
    finally:
        Config.reset()
