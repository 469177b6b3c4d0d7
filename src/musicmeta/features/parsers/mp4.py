"""MPEG-4 parser: iTunes style ``ilst`` atoms."""

from __future__ import annotations

from typing import Any, ClassVar
from typing_extensions import override

from mutagen import FileType
from mutagen.mp4 import MP4, AtomDataType, MP4Cover, MP4FreeForm

from musicmeta.shared.models import AudioFormat, NativeTags, Picture, Tag
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.tag_types import TagType

from ._base import MutagenParser

__all__ = ["MP4Parser"]

_COVER_MIME: dict[int, str] = {
    MP4Cover.FORMAT_JPEG: "image/jpeg",
    MP4Cover.FORMAT_PNG: "image/png",
}

_TEXT_FORMATS = (AtomDataType.UTF8, AtomDataType.IMPLICIT)


def _pair_to_text(pair: tuple[int, int]) -> str:
    number, total = pair
    return f"{number}/{total}" if total else str(number)


def _atom_value(key: str, value: Any) -> Any:
    if key in ("trkn", "disk"):
        return _pair_to_text(value)
    if isinstance(value, MP4FreeForm):
        if value.dataformat in _TEXT_FORMATS:
            return bytes(value).decode("utf-8", "replace")
        return bytes(value)
    return value


class MP4Parser(MutagenParser):
    """Parser for MPEG-4 audio (M4A, M4B, AAC in MP4, ALAC)."""

    FILE_CLASS: ClassVar[type[FileType] | None] = MP4
    DATA_FORMAT: ClassVar[str] = "MPEG-4"

    @override
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        if audio.tags is None:
            return {}

        tags: list[Tag] = []
        for key, values in audio.tags.items():
            if not isinstance(values, list):
                values = [values]
            if key == "covr":
                if options.skip_covers:
                    continue
                tags.extend(
                    Tag(key, Picture(format=_COVER_MIME.get(cover.imageformat, "image/jpeg"), data=bytes(cover)))
                    for cover in values
                )
                continue
            tags.extend(Tag(key, _atom_value(key, value)) for value in values)
        return {TagType.ITUNES: tags}

    @override
    def _describe(self, audio: FileType) -> AudioFormat:
        audio_format = super()._describe(audio)
        info = audio.info
        audio_format.codec_profile = info.codec_description or info.codec or None
        audio_format.lossless = info.codec == "alac"
        return audio_format
