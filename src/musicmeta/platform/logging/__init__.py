"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger and its setup helpers.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, console_level_for, logger, setup_logger

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "console_level_for",
    "logger",
    "setup_logger",
]
