"""
Summary: Read audio tags from many container formats into one normalized record.
Why: Expose the parse entry points and display helpers at the package root.
"""

from musicmeta.api import (
    parse,
    parse_buffer,
    parse_file,
    parse_native_tags,
    parse_stream,
    parse_url,
)
from musicmeta.features.normalization import join_artists, order_tags, rating_to_stars
from musicmeta.shared import (
    AudioMetadata,
    CommonTags,
    MusicMetadataError,
    ParseOptions,
    ParserLoadError,
    UnmappedTagFormatError,
    UnsupportedFormatError,
)

__version__ = "0.1.0"

__all__ = [
    "AudioMetadata",
    "CommonTags",
    "MusicMetadataError",
    "ParseOptions",
    "ParserLoadError",
    "UnmappedTagFormatError",
    "UnsupportedFormatError",
    "join_artists",
    "order_tags",
    "parse",
    "parse_buffer",
    "parse_file",
    "parse_native_tags",
    "parse_stream",
    "parse_url",
    "rating_to_stars",
]
