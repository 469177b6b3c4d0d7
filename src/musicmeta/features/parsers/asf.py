"""ASF (WMA/WMV) parser: content description and extended content attributes."""

from __future__ import annotations

import struct
from typing import ClassVar
from typing_extensions import override

from mutagen import FileType
from mutagen.asf import ASF

from musicmeta.platform.logging import logger
from musicmeta.shared.models import AudioFormat, NativeTags, Picture, Tag
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.tag_types import TagType

from ._base import MutagenParser, picture_type_name

__all__ = ["AsfParser", "parse_wm_picture"]

_PICTURE_KEY = "WM/Picture"


def _read_utf16z(data: bytes, offset: int) -> tuple[str, int]:
    """Read a NUL terminated UTF-16LE string; return it and the offset past the terminator."""
    end = offset
    while end + 1 < len(data) and data[end : end + 2] != b"\x00\x00":
        end += 2
    return data[offset:end].decode("utf-16-le", "replace"), end + 2


def parse_wm_picture(data: bytes) -> Picture | None:
    """Decode a ``WM/Picture`` blob: type, size, mime, description, image data."""
    if len(data) < 5:
        return None
    picture_type, size = struct.unpack_from("<BI", data)
    mime, offset = _read_utf16z(data, 5)
    description, offset = _read_utf16z(data, offset)
    image = data[offset : offset + size]
    if len(image) != size:
        logger.debug("Truncated WM/Picture: expected %d bytes, got %d", size, len(image))
        return None
    return Picture(
        format=mime,
        data=image,
        description=description or None,
        type=picture_type_name(picture_type),
    )


class AsfParser(MutagenParser):
    """Parser for Advanced Systems Format containers."""

    FILE_CLASS: ClassVar[type[FileType] | None] = ASF
    DATA_FORMAT: ClassVar[str] = "ASF/audio"

    @override
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        if audio.tags is None:
            return {}

        tags: list[Tag] = []
        for key, attribute in audio.tags:
            if key == _PICTURE_KEY:
                if options.skip_covers:
                    continue
                picture = parse_wm_picture(attribute.value)
                if picture is not None:
                    tags.append(Tag(key, picture))
                continue
            tags.append(Tag(key, attribute.value))
        return {TagType.ASF: tags}

    @override
    def _describe(self, audio: FileType) -> AudioFormat:
        audio_format = super()._describe(audio)
        info = audio.info
        audio_format.codec_profile = getattr(info, "codec_name", None) or None
        audio_format.lossless = "lossless" in (audio_format.codec_profile or "").lower()
        return audio_format
