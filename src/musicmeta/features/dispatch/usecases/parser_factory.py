"""
Summary: Select and run the format-specific parser for a tokenizer.
Why: Declared content type, file name and byte signature are tried in a fixed order before one parser runs.
"""

from __future__ import annotations

from typing import final

from musicmeta.config.settings import SNIFF_BUFFER_SIZE
from musicmeta.platform.logging import logger
from musicmeta.shared.errors import UnsupportedFormatError
from musicmeta.shared.models import NativeAudioMetadata
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.ports import Tokenizer

from ..domain.parser_ids import (
    ParserId,
    get_parser_id_for_extension,
    get_parser_id_for_mime_type,
)
from .parser_loader import load_parser
from .sniffing import guess_mime_type


@final
class ParserFactory:
    """Dispatch a tokenizer to exactly one format-specific parser."""

    @staticmethod
    def resolve_declared(options: ParseOptions) -> ParserId | None:
        """Resolve a parser from the caller's content type, then from the path.

        Args:
            options: Parse options carrying ``content_type`` and ``path``.

        Returns:
            ParserId | None: Resolved parser, or ``None`` when neither hint helps.
        """
        if options.content_type:
            parser_id = get_parser_id_for_mime_type(
                options.content_type
            ) or get_parser_id_for_extension(options.content_type)
            if parser_id is not None:
                logger.debug("Resolved parser %s from content type %s", parser_id, options.content_type)
                return parser_id
            logger.debug("No parser found for MIME-type: %s", options.content_type)

        if options.path:
            parser_id = get_parser_id_for_extension(options.path)
            if parser_id is not None:
                logger.debug("Resolved parser %s from path %s", parser_id, options.path)
                return parser_id
            logger.debug("No parser found for path: %s", options.path)

        return None

    @staticmethod
    async def sniff(tokenizer: Tokenizer) -> ParserId:
        """Resolve a parser from the stream's leading bytes without consuming them.

        Raises:
            UnsupportedFormatError: If no signature matches or the guessed type is unsupported.
        """
        logger.debug("Try to determine type based on content...")
        header = await tokenizer.peek_buffer(SNIFF_BUFFER_SIZE)
        guessed = guess_mime_type(header)
        if guessed is None:
            raise UnsupportedFormatError("Failed to guess MIME-type")
        parser_id = get_parser_id_for_mime_type(guessed)
        if parser_id is None:
            raise UnsupportedFormatError(f"Guessed MIME-type not supported: {guessed}")
        return parser_id

    @staticmethod
    async def parse(tokenizer: Tokenizer, options: ParseOptions | None = None) -> NativeAudioMetadata:
        """Parse native metadata from ``tokenizer``.

        Args:
            tokenizer: Byte source positioned at the start of the audio data.
            options: Parse options.

        Returns:
            NativeAudioMetadata: The parser's output, unchanged.

        Raises:
            UnsupportedFormatError: If the format cannot be determined.
            ParserLoadError: If the resolved parser cannot be loaded.
        """
        opts = options or ParseOptions()
        parser_id = ParserFactory.resolve_declared(opts)
        if parser_id is None:
            parser_id = await ParserFactory.sniff(tokenizer)

        parser = await load_parser(parser_id, opts)
        return await parser.parse(tokenizer, opts)


__all__ = ["ParserFactory"]
