"""
Summary: Guess a MIME type from the leading bytes of an audio stream.
Why: Streams without a content type or file name still need a parser; mutagen's scorers know the signatures.
"""

from __future__ import annotations

from typing import Final

from mutagen import FileType
from mutagen.aiff import AIFF
from mutagen.asf import ASF
from mutagen.dsf import DSF
from mutagen.flac import FLAC
from mutagen.monkeysaudio import MonkeysAudio
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.musepack import Musepack
from mutagen.oggflac import OggFLAC
from mutagen.oggopus import OggOpus
from mutagen.oggspeex import OggSpeex
from mutagen.oggtheora import OggTheora
from mutagen.oggvorbis import OggVorbis
from mutagen.trueaudio import TrueAudio
from mutagen.wave import WAVE
from mutagen.wavpack import WavPack

from musicmeta.platform.logging import logger

# Order breaks ties between equal scores.
SIGNATURES: Final[tuple[tuple[type[FileType], str], ...]] = (
    (MP3, "audio/mpeg"),
    (FLAC, "audio/flac"),
    (MP4, "audio/mp4"),
    (OggVorbis, "audio/ogg"),
    (OggOpus, "audio/ogg"),
    (OggFLAC, "audio/ogg"),
    (OggSpeex, "audio/ogg"),
    (OggTheora, "video/ogg"),
    (ASF, "audio/x-ms-asf"),
    (AIFF, "audio/aiff"),
    (WAVE, "audio/wav"),
    (WavPack, "audio/wavpack"),
    (MonkeysAudio, "audio/ape"),
    (TrueAudio, "audio/x-tta"),
    (Musepack, "audio/x-musepack"),
    (DSF, "audio/x-dsf"),
)


def _is_mpeg_frame_sync(header: bytes) -> bool:
    """MPEG audio frame header: 11 sync bits and a non-reserved layer (ADTS AAC uses layer 0)."""

    if len(header) < 2 or header[0] != 0xFF:
        return False
    return (header[1] & 0xE0) == 0xE0 and (header[1] >> 1) & 0x03 != 0


def guess_mime_type(header: bytes) -> str | None:
    """Return the MIME type whose signature best matches ``header``, or ``None``."""

    if not header:
        return None

    best_mime: str | None = None
    best_score = 0
    for kind, mime in SIGNATURES:
        score = kind.score("", None, header)
        if score > best_score:
            best_mime, best_score = mime, score

    if best_mime is None and _is_mpeg_frame_sync(header):
        best_mime = "audio/mpeg"

    logger.debug("Signature sniffing guessed %s", best_mime)
    return best_mime


__all__ = ["SIGNATURES", "guess_mime_type"]
