"""RIFF ``LIST/INFO`` mapper (reported under the ``exif`` tag format)."""

from __future__ import annotations

from typing import Final

from musicmeta.shared.tag_types import TagType

from ._base_mapper import CommonTagMapper

__all__ = ["RIFF_INFO_TAG_MAP", "RiffInfoTagMapper"]

RIFF_INFO_TAG_MAP: Final[dict[str, str]] = {
    "IART": "artist",
    "ICRD": "date",
    "INAM": "title",
    "TITL": "title",
    "IPRD": "album",
    "ITRK": "track",
    "IPRT": "track",
    "ICMT": "comment",
    "ICNT": "releasecountry",
    "GNRE": "genre",
    "IGNR": "genre",
    "IWRI": "writer",
    "IMUS": "composer",
    "IPRO": "producer",
    "IENG": "engineer",
    "ICOP": "copyright",
    "ILNG": "language",
    "YEAR": "year",
    "ISFT": "encodedby",
    "CODE": "encodedby",
    "TURL": "website",
}


class RiffInfoTagMapper(CommonTagMapper):
    def __init__(self) -> None:
        super().__init__((TagType.EXIF,), RIFF_INFO_TAG_MAP)
