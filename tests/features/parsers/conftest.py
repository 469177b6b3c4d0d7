"""Fixtures writing small synthetic audio files with mutagen."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from mutagen.flac import FLAC
from mutagen.flac import Picture as FlacPicture
from mutagen.id3 import ID3, Frame

# MPEG-1 Layer III, 128 kbit/s, 44.1 kHz, joint stereo, no padding: 417 byte frames.
MPEG_FRAME_HEADER: bytes = b"\xff\xfb\x90\x64"
MPEG_FRAME_SIZE: int = 417


def mpeg_frames(count: int = 8) -> bytes:
    """Silent MPEG audio frames; mutagen wants several consecutive frames to sync."""

    frame = MPEG_FRAME_HEADER + b"\x00" * (MPEG_FRAME_SIZE - len(MPEG_FRAME_HEADER))
    return frame * count


def id3v1_block(
    title: str = "",
    artist: str = "",
    album: str = "",
    year: str = "",
    comment: str = "",
    track: int = 0,
    genre: int = 255,
) -> bytes:
    """ID3v1.1 trailer."""

    def pad(text: str, size: int) -> bytes:
        return text.encode("latin-1")[:size].ljust(size, b"\x00")

    return (
        b"TAG"
        + pad(title, 30)
        + pad(artist, 30)
        + pad(album, 30)
        + pad(year, 4)
        + pad(comment, 28)
        + bytes([0, track, genre])
    )


def flac_stream_header(sample_rate: int = 44100, channels: int = 2, bits: int = 16, samples: int = 44100) -> bytes:
    """``fLaC`` marker followed by a lone STREAMINFO block."""

    info = bytearray()
    info += (4096).to_bytes(2, "big")  # min block size
    info += (4096).to_bytes(2, "big")  # max block size
    info += (0).to_bytes(3, "big")  # min frame size
    info += (0).to_bytes(3, "big")  # max frame size
    packed = (sample_rate << 44) | ((channels - 1) << 41) | ((bits - 1) << 36) | samples
    info += packed.to_bytes(8, "big")
    info += bytes(range(16))  # MD5 signature
    return b"fLaC" + bytes([0x80]) + len(info).to_bytes(3, "big") + bytes(info)


@pytest.fixture
def make_mp3(tmp_path: Path) -> Callable[..., Path]:
    """Write an MP3 with the given ID3v2 frames and an optional raw ID3v1 trailer."""

    def _make(
        *frames: Frame,
        name: str = "track.mp3",
        v2_version: int = 4,
        trailer: bytes = b"",
    ) -> Path:
        path = tmp_path / name
        _ = path.write_bytes(mpeg_frames())
        if frames:
            tags = ID3()
            for frame in frames:
                tags.add(frame)
            tags.save(str(path), v1=0, v2_version=v2_version)
        if trailer:
            with open(path, "ab") as handle:
                _ = handle.write(trailer)
        return path

    return _make


@pytest.fixture
def make_flac(tmp_path: Path) -> Callable[..., Path]:
    """Write a FLAC stream carrying the given Vorbis comments and pictures."""

    def _make(
        comments: list[tuple[str, str]],
        pictures: list[FlacPicture] | None = None,
        name: str = "track.flac",
    ) -> Path:
        path = tmp_path / name
        _ = path.write_bytes(flac_stream_header())
        audio = FLAC(str(path))
        audio.add_tags()
        assert audio.tags is not None
        for key, value in comments:
            audio.tags.append((key, value))
        for picture in pictures or []:
            audio.add_picture(picture)
        audio.save()
        return path

    return _make


@pytest.fixture
def mpeg_stream() -> bytes:
    """Untagged MPEG audio."""

    return mpeg_frames()


@pytest.fixture
def make_id3v1() -> Callable[..., bytes]:
    """Factory for raw ID3v1.1 trailers."""

    return id3v1_block
