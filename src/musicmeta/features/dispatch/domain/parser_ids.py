"""
Summary: Parser identifiers and the MIME-type / file-extension lookup tables.
Why: Fix the closed set of supported containers and how callers' hints map onto them.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from musicmeta.platform.logging import logger

from .mime_type import parse_mime_type


class ParserId(str, Enum):
    """Format-specific parsers known to the dispatcher."""

    MPEG = "mpeg"
    APEV2 = "apev2"
    MP4 = "mp4"
    ASF = "asf"
    FLAC = "flac"
    OGG = "ogg"
    AIFF = "aiff"
    RIFF = "riff"
    WAVPACK = "wavpack"

    def __str__(self) -> str:
        return self.value


EXTENSION_MAP: Final[Mapping[str, ParserId]] = MappingProxyType(
    {
        "mp2": ParserId.MPEG,
        "mp3": ParserId.MPEG,
        "m2a": ParserId.MPEG,
        "ape": ParserId.APEV2,
        "aac": ParserId.MP4,
        "mp4": ParserId.MP4,
        "m4a": ParserId.MP4,
        "m4b": ParserId.MP4,
        "m4pa": ParserId.MP4,
        "m4v": ParserId.MP4,
        "m4r": ParserId.MP4,
        "3gp": ParserId.MP4,
        "wma": ParserId.ASF,
        "wmv": ParserId.ASF,
        "asf": ParserId.ASF,
        "flac": ParserId.FLAC,
        "ogg": ParserId.OGG,
        "ogv": ParserId.OGG,
        "oga": ParserId.OGG,
        "ogx": ParserId.OGG,
        "opus": ParserId.OGG,
        "aif": ParserId.AIFF,
        "aiff": ParserId.AIFF,
        "aifc": ParserId.AIFF,
        "wav": ParserId.RIFF,
        "wv": ParserId.WAVPACK,
        "wvp": ParserId.WAVPACK,
    }
)

# Keyed by (major type, subtype without the ``x-`` prefix).
MIME_TYPE_MAP: Final[Mapping[tuple[str, str], ParserId]] = MappingProxyType(
    {
        ("audio", "mpeg"): ParserId.MPEG,
        ("audio", "flac"): ParserId.FLAC,
        ("audio", "ape"): ParserId.APEV2,
        ("audio", "monkeys-audio"): ParserId.APEV2,
        ("audio", "mp4"): ParserId.MP4,
        ("audio", "aac"): ParserId.MP4,
        ("audio", "aacp"): ParserId.MP4,
        ("audio", "m4a"): ParserId.MP4,
        ("audio", "ogg"): ParserId.OGG,
        ("audio", "ms-wma"): ParserId.ASF,
        ("audio", "ms-wmv"): ParserId.ASF,
        ("audio", "ms-asf"): ParserId.ASF,
        ("audio", "aiff"): ParserId.AIFF,
        ("audio", "aif"): ParserId.AIFF,
        ("audio", "aifc"): ParserId.AIFF,
        ("audio", "vnd.wave"): ParserId.RIFF,
        ("audio", "wav"): ParserId.RIFF,
        ("audio", "wave"): ParserId.RIFF,
        ("audio", "wavpack"): ParserId.WAVPACK,
        ("video", "ms-asf"): ParserId.ASF,
        ("video", "ms-wmv"): ParserId.ASF,
        ("video", "ogg"): ParserId.OGG,
        ("application", "vnd.ms-asf"): ParserId.ASF,
        ("application", "ogg"): ParserId.OGG,
    }
)


def get_parser_id_for_extension(file_path: str | None) -> ParserId | None:
    """Resolve a parser from the text after the last ``.`` of a path, file name or extension."""

    if not file_path:
        return None
    _, dot, extension = file_path.rpartition(".")
    if not dot:
        return None
    return EXTENSION_MAP.get(extension.lower())


def get_parser_id_for_mime_type(mime_type: str | None) -> ParserId | None:
    """Resolve a parser from a MIME type such as ``audio/x-flac; rate=44100``."""

    if not mime_type:
        return None
    parsed = parse_mime_type(mime_type)
    if parsed is None:
        logger.debug("Invalid MIME-type: %s", mime_type)
        return None
    major, subtype = parsed
    subtype = subtype.removeprefix("x-")
    return MIME_TYPE_MAP.get((major, subtype))


__all__ = [
    "ParserId",
    "EXTENSION_MAP",
    "MIME_TYPE_MAP",
    "get_parser_id_for_extension",
    "get_parser_id_for_mime_type",
]
