"""Monkey's Audio parser: APEv2 tags on ``.ape`` streams."""

from __future__ import annotations

from typing import ClassVar
from typing_extensions import override

from mutagen import FileType
from mutagen.monkeysaudio import MonkeysAudio

from musicmeta.shared.models import NativeTags
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.tag_types import TagType

from ._ape import ape_items_to_tags
from ._base import MutagenParser

__all__ = ["MonkeysAudioParser"]


class MonkeysAudioParser(MutagenParser):
    """Parser for Monkey's Audio streams."""

    FILE_CLASS: ClassVar[type[FileType] | None] = MonkeysAudio
    DATA_FORMAT: ClassVar[str] = "Monkey's Audio"
    LOSSLESS: ClassVar[bool | None] = True

    @override
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        if audio.tags is None:
            return {}
        return {TagType.APEV2: ape_items_to_tags(audio.tags, skip_covers=options.skip_covers)}
