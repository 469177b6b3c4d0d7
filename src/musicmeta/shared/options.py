"""
Summary: Options bundle accepted by every parse entry point.
Why: Carry caller hints (content type, path, size) and output switches through dispatch.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ports import TokenParser

ParserLoader = Callable[[str], "TokenParser | None | Awaitable[TokenParser | None]"]


@dataclass(slots=True)
class ParseOptions:
    """Parsing options.

    Attributes:
        path: File name or path of the audio source, used to pick a parser by extension.
        content_type: MIME type, extension or file name of the audio data.
        file_size: Total size in bytes when the tokenizer cannot tell.
        native: Include the native tags in the result.
        merge_tag_headers: Fill fields from every tag header, highest priority first.
        skip_covers: Do not decode embedded pictures.
        load_parser: Custom parser loader called with the resolved parser id.
    """

    path: str | None = None
    content_type: str | None = None
    file_size: int | None = None
    native: bool = False
    merge_tag_headers: bool = False
    skip_covers: bool = False
    load_parser: ParserLoader | None = None

    @classmethod
    def from_config(cls, **overrides: object) -> "ParseOptions":
        """Build options seeded with the configured defaults.

        Args:
            **overrides: Field values taking precedence over the configuration.

        Returns:
            ParseOptions: Options with configuration defaults applied.
        """
        from musicmeta.config.config import Config

        configuration = Config.load()
        options = cls(
            native=configuration.include_native,
            merge_tag_headers=configuration.merge_tag_headers,
            skip_covers=configuration.skip_covers,
        )
        for name, value in overrides.items():
            setattr(options, name, value)
        return options


__all__ = ["ParseOptions", "ParserLoader"]
