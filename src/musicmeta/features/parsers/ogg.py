"""Ogg parser covering Vorbis, Opus, FLAC, Speex and Theora streams."""

from __future__ import annotations

import io
from typing import ClassVar
from typing_extensions import override

import mutagen
from mutagen import FileType
from mutagen.ogg import error as OggError
from mutagen.oggflac import OggFLAC
from mutagen.oggopus import OggOpus
from mutagen.oggspeex import OggSpeex
from mutagen.oggtheora import OggTheora
from mutagen.oggvorbis import OggVorbis

from musicmeta.shared.models import AudioFormat, NativeTags
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.tag_types import TagType

from ._base import MutagenParser
from ._vorbis import comments_to_tags

__all__ = ["OggParser"]

_CODECS: dict[type[FileType], str] = {
    OggVorbis: "Ogg/Vorbis I",
    OggOpus: "Ogg/Opus",
    OggFLAC: "Ogg/FLAC",
    OggSpeex: "Ogg/Speex",
    OggTheora: "Ogg/Theora",
}


class OggParser(MutagenParser):
    """Parser for Ogg bitstreams; the codec is picked from the first page."""

    DATA_FORMAT: ClassVar[str] = "Ogg"

    @override
    def _open(self, fileobj: io.BytesIO) -> FileType:
        audio = mutagen.File(fileobj, options=list(_CODECS))
        if audio is None:
            raise OggError("No supported codec found in Ogg stream")
        return audio

    @override
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        if audio.tags is None:
            return {}
        return {TagType.VORBIS: comments_to_tags(audio.tags, skip_covers=options.skip_covers)}

    @override
    def _describe(self, audio: FileType) -> AudioFormat:
        audio_format = super()._describe(audio)
        audio_format.data_format = _CODECS.get(type(audio), self.DATA_FORMAT)
        audio_format.lossless = isinstance(audio, OggFLAC)
        if audio.tags is not None:
            audio_format.encoder = getattr(audio.tags, "vendor", None) or None
        return audio_format
