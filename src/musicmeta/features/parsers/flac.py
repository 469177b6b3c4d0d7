"""FLAC parser: Vorbis comment block plus PICTURE blocks."""

from __future__ import annotations

from typing import ClassVar
from typing_extensions import override

from mutagen import FileType
from mutagen.flac import FLAC

from musicmeta.shared.models import AudioFormat, NativeTags
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.tag_types import TagType

from ._base import MutagenParser
from ._vorbis import comments_to_tags, flac_picture_to_tag

__all__ = ["FlacParser"]


class FlacParser(MutagenParser):
    """Parser for native FLAC streams."""

    FILE_CLASS: ClassVar[type[FileType] | None] = FLAC
    DATA_FORMAT: ClassVar[str] = "FLAC"
    LOSSLESS: ClassVar[bool | None] = True

    @override
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        has_pictures = bool(audio.pictures) and not options.skip_covers
        if audio.tags is None and not has_pictures:
            return {}

        tags = comments_to_tags(audio.tags or [], skip_covers=options.skip_covers)
        if has_pictures:
            tags.extend(flac_picture_to_tag(picture) for picture in audio.pictures)
        return {TagType.VORBIS: tags}

    @override
    def _describe(self, audio: FileType) -> AudioFormat:
        audio_format = super()._describe(audio)
        info = audio.info
        audio_format.number_of_samples = info.total_samples or None
        if info.md5_signature:
            audio_format.audio_md5 = info.md5_signature.to_bytes(16, "big")
        if audio.tags is not None:
            audio_format.encoder = audio.tags.vendor or None
        return audio_format
