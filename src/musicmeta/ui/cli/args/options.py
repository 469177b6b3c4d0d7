"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class ParseArgs:
    """Command line arguments for the ``parse`` subcommand."""

    command: Literal["parse"]
    source: str
    content_type: str | None
    native: bool
    merge: bool
    skip_covers: bool
    json: bool
    verbose: bool
    quiet: bool

    @property
    def is_url(self) -> bool:
        return self.source.startswith(("http://", "https://"))


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    force: bool


CLIArgs = ParseArgs | InitConfigArgs

__all__ = ["CLIArgs", "InitConfigArgs", "ParseArgs"]
