"""AIFF / AIFF-C parser: ID3v2 tags stored in the ``ID3`` chunk."""

from __future__ import annotations

from typing import Any, ClassVar
from typing_extensions import override

from mutagen import FileType
from mutagen.aiff import AIFF

from musicmeta.shared.models import NativeTags
from musicmeta.shared.options import ParseOptions

from ._base import MutagenParser
from ._id3 import frames_to_tags, id3v2_tag_type

__all__ = ["AiffParser"]


class AiffParser(MutagenParser):
    """Parser for Audio Interchange File Format streams."""

    FILE_CLASS: ClassVar[type[FileType] | None] = AIFF
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"translate": False}
    DATA_FORMAT: ClassVar[str] = "AIFF"
    LOSSLESS: ClassVar[bool | None] = True

    @override
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        if audio.tags is None:
            return {}
        return {
            id3v2_tag_type(audio.tags): frames_to_tags(audio.tags.values(), skip_covers=options.skip_covers)
        }
