"""
Summary: Lazy resolution of a parser implementation for a resolved parser id.
Why: Only the parser that is actually needed gets imported, and callers may plug in their own loader.
"""

from __future__ import annotations

import importlib
import inspect
from types import MappingProxyType
from typing import Final, Mapping

from musicmeta.platform.logging import logger
from musicmeta.shared.errors import ParserLoadError
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.ports import TokenParser

from ..domain.parser_ids import ParserId

_PARSERS_PACKAGE: Final[str] = "musicmeta.features.parsers"

# Parser id -> (module, class) resolved on first use.
BUILTIN_PARSERS: Final[Mapping[ParserId, tuple[str, str]]] = MappingProxyType(
    {
        ParserId.MPEG: (f"{_PARSERS_PACKAGE}.mpeg", "MpegParser"),
        ParserId.APEV2: (f"{_PARSERS_PACKAGE}.apev2", "MonkeysAudioParser"),
        ParserId.MP4: (f"{_PARSERS_PACKAGE}.mp4", "MP4Parser"),
        ParserId.ASF: (f"{_PARSERS_PACKAGE}.asf", "AsfParser"),
        ParserId.FLAC: (f"{_PARSERS_PACKAGE}.flac", "FlacParser"),
        ParserId.OGG: (f"{_PARSERS_PACKAGE}.ogg", "OggParser"),
        ParserId.AIFF: (f"{_PARSERS_PACKAGE}.aiff", "AiffParser"),
        ParserId.RIFF: (f"{_PARSERS_PACKAGE}.riff", "WaveParser"),
        ParserId.WAVPACK: (f"{_PARSERS_PACKAGE}.wavpack", "WavPackParser"),
    }
)


def load_builtin_parser(parser_id: ParserId) -> TokenParser:
    """Import and instantiate the bundled parser for ``parser_id``.

    Raises:
        ParserLoadError: If no bundled parser exists or its module cannot be imported.
    """
    try:
        module_name, class_name = BUILTIN_PARSERS[parser_id]
    except KeyError as exc:
        raise ParserLoadError(str(parser_id), f'No bundled parser for "{parser_id}".') from exc

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ParserLoadError(
            str(parser_id), f'Failed to import parser module "{module_name}": {exc}'
        ) from exc

    parser_class = getattr(module, class_name, None)
    if parser_class is None:
        raise ParserLoadError(
            str(parser_id), f'Parser module "{module_name}" does not define {class_name}.'
        )
    return parser_class()


async def load_parser(parser_id: ParserId, options: ParseOptions) -> TokenParser:
    """Resolve the parser through ``options.load_parser`` when given, else the bundled table.

    Raises:
        ParserLoadError: If the loader returns nothing, fails to import the parser,
            or the bundled parser cannot be loaded.
    """
    logger.debug("Lazy loading parser: %s", parser_id)

    if options.load_parser is None:
        return load_builtin_parser(parser_id)

    try:
        resolved = options.load_parser(parser_id)
        if inspect.isawaitable(resolved):
            resolved = await resolved
    except ImportError as exc:
        raise ParserLoadError(
            str(parser_id), f'options.load_parser failed to import parser "{parser_id}": {exc}'
        ) from exc
    if resolved is None:
        raise ParserLoadError(
            str(parser_id), f'options.load_parser failed to resolve parser "{parser_id}".'
        )
    return resolved


__all__ = ["BUILTIN_PARSERS", "load_builtin_parser", "load_parser"]
