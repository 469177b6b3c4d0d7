"""
Summary: Registry dispatching native tags to the mapper of their tag format.
Why: The normalizer only knows tag formats; which table applies is decided here, once.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import final

from musicmeta.shared.errors import UnmappedTagFormatError
from musicmeta.shared.models import Tag
from musicmeta.shared.tag_types import TagType

from ._base_mapper import CommonFields, GenericTagMapper
from .apev2 import APEv2TagMapper
from .asf import AsfTagMapper
from .id3v1 import ID3v1TagMapper
from .id3v2 import ID3v22TagMapper, ID3v24TagMapper
from .mp4 import MP4TagMapper
from .riff_info import RiffInfoTagMapper
from .vorbis import VorbisTagMapper


def default_mappers() -> list[GenericTagMapper]:
    """One instance of every bundled mapper."""

    return [
        ID3v1TagMapper(),
        ID3v22TagMapper(),
        ID3v24TagMapper(),
        MP4TagMapper(),
        VorbisTagMapper(),
        APEv2TagMapper(),
        AsfTagMapper(),
        RiffInfoTagMapper(),
    ]


@final
class CombinedTagMapper:
    """Maps tags of any registered tag format; read-only after construction."""

    def __init__(self, mappers: Iterable[GenericTagMapper] | None = None) -> None:
        table: dict[TagType, GenericTagMapper] = {}
        for mapper in default_mappers() if mappers is None else mappers:
            for tag_type in mapper.tag_types:
                table[TagType(tag_type)] = mapper
        self._tag_mappers: Mapping[TagType, GenericTagMapper] = MappingProxyType(table)

    @property
    def tag_mappers(self) -> Mapping[TagType, GenericTagMapper]:
        return self._tag_mappers

    def set_generic_tag(self, common: CommonFields, tag_type: TagType | str, tag: Tag) -> None:
        """Apply ``tag`` through the mapper registered for ``tag_type``.

        Raises:
            UnmappedTagFormatError: If no mapper is registered for ``tag_type``.
        """
        try:
            mapper = self._tag_mappers[TagType(tag_type)]
        except (KeyError, ValueError) as exc:
            raise UnmappedTagFormatError(str(tag_type)) from exc
        mapper.set_generic_tag(common, tag)


__all__ = ["CombinedTagMapper", "default_mappers"]
