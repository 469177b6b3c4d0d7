"""Command line interface package."""

from musicmeta.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
