"""Shared base class for the mutagen backed format parsers.

Where: src/musicmeta/features/parsers/_base.py
What: Buffer the tokenizer, open the stream with mutagen and describe the audio format.
Why: Every container follows the same load, collect and describe sequence; only tag collection differs.
"""

from __future__ import annotations

import abc
import io
from typing import Any, ClassVar
from typing_extensions import override

from mutagen import FileType, MutagenError

from musicmeta.platform.logging import logger
from musicmeta.shared.models import AudioFormat, NativeAudioMetadata, NativeTags
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.ports import TokenParser, Tokenizer

__all__ = [
    "MutagenParser",
    "PICTURE_TYPES",
    "picture_type_name",
]

# Picture type names shared by ID3 APIC, FLAC PICTURE and WM/Picture.
PICTURE_TYPES: tuple[str, ...] = (
    "Other",
    "32x32 pixels 'file icon' (PNG only)",
    "Other file icon",
    "Cover (front)",
    "Cover (back)",
    "Leaflet page",
    "Media (e.g. label side of CD)",
    "Lead artist/lead performer/soloist",
    "Artist/performer",
    "Conductor",
    "Band/Orchestra",
    "Composer",
    "Lyricist/text writer",
    "Recording Location",
    "During recording",
    "During performance",
    "Movie/video screen capture",
    "A bright coloured fish",
    "Illustration",
    "Band/artist logotype",
    "Publisher/Studio logotype",
)


def picture_type_name(index: int | None) -> str | None:
    """Map a numeric picture type to its name; out of range values yield ``None``."""
    if index is None:
        return None
    index = int(index)
    if 0 <= index < len(PICTURE_TYPES):
        return PICTURE_TYPES[index]
    return None


class MutagenParser(TokenParser, abc.ABC):
    """Base class for parsers that delegate container decoding to mutagen."""

    FILE_CLASS: ClassVar[type[FileType] | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    DATA_FORMAT: ClassVar[str] = ""
    LOSSLESS: ClassVar[bool | None] = None

    def _open(self, fileobj: io.BytesIO) -> FileType:
        """Load the buffered stream with ``FILE_CLASS``."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        return self.FILE_CLASS(fileobj, **self.FILE_INIT_PARAMS)

    @abc.abstractmethod
    def _collect_native(self, audio: FileType, data: bytes, options: ParseOptions) -> NativeTags:
        """Translate the loaded container's tags into native tag lists."""
        raise NotImplementedError

    def _describe(self, audio: FileType) -> AudioFormat:
        """Build the format descriptor from mutagen's stream info."""
        info = audio.info
        bits = getattr(info, "bits_per_sample", None)
        return AudioFormat(
            data_format=self.DATA_FORMAT or None,
            duration=getattr(info, "length", None),
            bitrate=getattr(info, "bitrate", None) or None,
            sample_rate=getattr(info, "sample_rate", None) or None,
            bits_per_sample=bits or None,
            encoder=getattr(info, "encoder_info", None) or None,
            codec_profile=getattr(info, "codec", None) or None,
            lossless=self.LOSSLESS,
            number_of_channels=getattr(info, "channels", None) or None,
        )

    @override
    async def parse(self, tokenizer: Tokenizer, options: ParseOptions) -> NativeAudioMetadata:
        """Read the rest of ``tokenizer`` into memory and decode it with mutagen.

        The whole remaining source is buffered, so a URL body is downloaded in
        full before decoding starts and memory use grows with the file size.
        """
        data = await tokenizer.read_remaining()
        logger.debug("Buffered %d bytes for %s", len(data), type(self).__name__)
        try:
            audio = self._open(io.BytesIO(data))
            native = self._collect_native(audio, data, options)
        except MutagenError as exc:
            logger.error(
                "Failed to parse %s stream %s: %s",
                self.DATA_FORMAT or type(self).__name__.removesuffix("Parser"),
                options.path or "<stream>",
                exc,
            )
            raise

        audio_format = self._describe(audio)
        logger.debug("Collected tag formats %s from %s", list(native), audio_format.data_format)
        return NativeAudioMetadata(format=audio_format, native=native)
