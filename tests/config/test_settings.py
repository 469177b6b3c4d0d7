"""Tests for settings module behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from musicmeta.config.config import HTTP_TIMEOUT_DEFAULT, Config
from musicmeta.config.settings import http_timeout


def test_http_timeout_uses_configured_value(isolated_config: Path) -> None:
    """A positive configured timeout is returned as a float."""
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("http_timeout = 4\n", encoding="utf-8")

    assert http_timeout() == 4.0


@pytest.mark.parametrize("configured", [0, -1.5])
def test_http_timeout_falls_back_for_non_positive(configured: float) -> None:
    """Non-positive timeouts fall back to the default."""
    Config.load().http_timeout = configured

    assert http_timeout() == HTTP_TIMEOUT_DEFAULT
