"""ID3v1 mapper: the parser already emits canonical ids."""

from __future__ import annotations

from typing import Final

from musicmeta.shared.tag_types import TagType

from ._base_mapper import CommonTagMapper

__all__ = ["ID3V1_TAG_MAP", "ID3v1TagMapper"]

ID3V1_TAG_MAP: Final[dict[str, str]] = {
    "title": "title",
    "artist": "artist",
    "album": "album",
    "year": "year",
    "comment": "comment",
    "track": "track",
    "genre": "genre",
}


class ID3v1TagMapper(CommonTagMapper):
    def __init__(self) -> None:
        super().__init__((TagType.ID3V1,), ID3V1_TAG_MAP)
