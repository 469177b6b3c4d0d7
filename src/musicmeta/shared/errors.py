"""
Summary: Exception hierarchy raised by the metadata pipeline.
Why: Let callers tell detection, loading and mapping failures apart from parser errors.
"""

from __future__ import annotations


class MusicMetadataError(Exception):
    """Base exception for errors raised by musicmeta itself."""


class UnsupportedFormatError(MusicMetadataError, ValueError):
    """Raised when no content type, extension or signature resolves to a parser."""


class ParserLoadError(MusicMetadataError):
    """Raised when a parser was identified but could not be loaded."""

    def __init__(self, parser_id: str, message: str) -> None:
        super().__init__(message)
        self.parser_id: str = parser_id


class UnmappedTagFormatError(MusicMetadataError):
    """Raised when a parser emits a tag format the mapper registry does not know."""

    def __init__(self, tag_type: str) -> None:
        super().__init__(f"No generic tag mapper defined for tag-format: {tag_type}")
        self.tag_type: str = tag_type


__all__ = [
    "MusicMetadataError",
    "UnsupportedFormatError",
    "ParserLoadError",
    "UnmappedTagFormatError",
]
