"""WavPack parser: APEv2 tags on ``.wv`` streams."""

from __future__ import annotations

from typing import ClassVar
from typing_extensions import override

from mutagen import FileType
from mutagen.wavpack import WavPack

from musicmeta.shared.models import NativeTags
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.tag_types import TagType

from ._ape import ape_items_to_tags
from ._base import MutagenParser

__all__ = ["WavPackParser"]


class WavPackParser(MutagenParser):
    """Parser for WavPack streams."""

    FILE_CLASS: ClassVar[type[FileType] | None] = WavPack
    DATA_FORMAT: ClassVar[str] = "WavPack"

    @override
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        if audio.tags is None:
            return {}
        return {TagType.APEV2: ape_items_to_tags(audio.tags, skip_covers=options.skip_covers)}
