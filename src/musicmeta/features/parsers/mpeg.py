"""MPEG audio (MP3/MP2) parser: ID3v2 header, APEv2 trailer and ID3v1 trailer."""

from __future__ import annotations

from typing import Any, ClassVar
from typing_extensions import override

from mutagen import FileType
from mutagen.mp3 import MP3, BitrateMode

from musicmeta.config.settings import ID3V1_TAG_SIZE
from musicmeta.shared.models import AudioFormat, NativeTags
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.tag_types import TagType

from ._ape import load_apev2_tags
from ._base import MutagenParser
from ._id3 import frames_to_tags, id3v2_tag_type, parse_id3v1

__all__ = ["MpegParser"]


class MpegParser(MutagenParser):
    """Parser for MPEG 1/2/2.5 layer I-III streams."""

    FILE_CLASS: ClassVar[type[FileType] | None] = MP3
    # Keep v2.2/v2.3 frame ids; ID3v1 is read separately.
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"translate": False, "load_v1": False}
    DATA_FORMAT: ClassVar[str] = "MPEG"
    LOSSLESS: ClassVar[bool | None] = False

    @override
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        native: NativeTags = {}
        if audio.tags is not None:
            native[id3v2_tag_type(audio.tags)] = frames_to_tags(
                audio.tags.values(), skip_covers=options.skip_covers
            )

        ape = load_apev2_tags(data, skip_covers=options.skip_covers)
        if ape is not None:
            native[TagType.APEV2] = ape

        if len(data) >= ID3V1_TAG_SIZE:
            id3v1 = parse_id3v1(data[-ID3V1_TAG_SIZE:])
            if id3v1 is not None:
                native[TagType.ID3V1] = id3v1
        return native

    @override
    def _describe(self, audio: FileType) -> AudioFormat:
        audio_format = super()._describe(audio)
        info = audio.info
        audio_format.codec_profile = "VBR" if info.bitrate_mode == BitrateMode.VBR else "CBR"
        audio_format.data_format = f"MPEG {info.version} Layer {info.layer}"
        return audio_format
