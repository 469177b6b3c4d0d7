"""
Summary: Closed set of tag container identifiers and their priority order.
Why: Let dispatch, mapping and normalization agree on one vocabulary of tag formats.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class TagType(str, Enum):
    """Tag container families a format parser may report."""

    ID3V1 = "ID3v1"
    ID3V22 = "ID3v2.2"
    ID3V23 = "ID3v2.3"
    ID3V24 = "ID3v2.4"
    ITUNES = "iTunes"
    VORBIS = "vorbis"
    APEV2 = "APEv2"
    ASF = "asf"
    EXIF = "exif"

    def __str__(self) -> str:
        return self.value


# Richer and newer containers first; ID3v1 is the last resort.
TAG_PRIORITY: Final[tuple[TagType, ...]] = (
    TagType.APEV2,
    TagType.VORBIS,
    TagType.ID3V24,
    TagType.ID3V23,
    TagType.ID3V22,
    TagType.EXIF,
    TagType.ASF,
    TagType.ITUNES,
    TagType.ID3V1,
)


__all__ = ["TagType", "TAG_PRIORITY"]
