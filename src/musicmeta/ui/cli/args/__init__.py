"""Command line argument handling package."""

from musicmeta.ui.cli.args.options import CLIArgs, InitConfigArgs, ParseArgs
from musicmeta.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "InitConfigArgs", "ParseArgs"]
