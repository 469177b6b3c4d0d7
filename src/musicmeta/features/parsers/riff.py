"""RIFF/WAVE parser: ``LIST/INFO`` chunk and the optional ``id3 `` chunk.

Where: src/musicmeta/features/parsers/riff.py
What: Report INFO chunk entries as ``exif`` tags and an embedded ID3v2 tag under its version.
Why: mutagen's WAVE type only exposes the ID3 chunk; INFO needs its own chunk walk.
"""

from __future__ import annotations

import io
from typing import Any, ClassVar
from typing_extensions import override

from mutagen import FileType
from mutagen._riff import RiffFile
from mutagen.wave import WAVE

from musicmeta.platform.logging import logger
from musicmeta.shared.models import NativeTags, Tag
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.tag_types import TagType

from ._base import MutagenParser
from ._id3 import frames_to_tags, id3v2_tag_type

__all__ = ["WaveParser", "read_info_chunk"]


def _decode_info_value(raw: bytes) -> str:
    text = raw.split(b"\x00", 1)[0]
    try:
        return text.decode("utf-8").strip()
    except UnicodeDecodeError:
        return text.decode("latin-1").strip()


def read_info_chunk(data: bytes) -> list[Tag] | None:
    """Collect entries of every ``LIST`` chunk named ``INFO``; ``None`` when there is none."""
    riff = RiffFile(io.BytesIO(data))
    tags: list[Tag] | None = None
    for chunk in riff.root.subchunks():
        if chunk.id != "LIST" or getattr(chunk, "name", None) != "INFO":
            continue
        if tags is None:
            tags = []
        for entry in chunk.subchunks():
            value = _decode_info_value(entry.read())
            if value:
                tags.append(Tag(entry.id, value))
    logger.debug("RIFF INFO entries: %s", None if tags is None else len(tags))
    return tags


class WaveParser(MutagenParser):
    """Parser for RIFF/WAVE streams."""

    FILE_CLASS: ClassVar[type[FileType] | None] = WAVE
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"translate": False}
    DATA_FORMAT: ClassVar[str] = "WAVE"
    LOSSLESS: ClassVar[bool | None] = True

    @override
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        native: NativeTags = {}
        info = read_info_chunk(data)
        if info is not None:
            native[TagType.EXIF] = info
        if audio.tags is not None:
            native[id3v2_tag_type(audio.tags)] = frames_to_tags(
                audio.tags.values(), skip_covers=options.skip_covers
            )
        return native
