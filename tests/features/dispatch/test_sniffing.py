"""Tests for signature based MIME-type guessing."""

from __future__ import annotations

import pytest

from musicmeta.features.dispatch.usecases.sniffing import guess_mime_type


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (b"ID3\x04\x00\x00\x00\x00\x00\x00", "audio/mpeg"),
        (b"\xff\xfb\x90\x64" + b"\x00" * 12, "audio/mpeg"),
        (b"\xff\xe3\x18\xc4" + b"\x00" * 12, "audio/mpeg"),
        (b"fLaC\x00\x00\x00\x22", "audio/flac"),
        (b"\x00\x00\x00\x20ftypM4A \x00\x00\x00\x00", "audio/mp4"),
        (b"OggS\x00\x02" + b"\x00" * 22 + b"\x01vorbis", "audio/ogg"),
        (b"OggS\x00\x02" + b"\x00" * 22 + b"OpusHead", "audio/ogg"),
        (b"RIFF\x24\x00\x00\x00WAVEfmt ", "audio/wav"),
        (b"FORM\x00\x00\x00\x00AIFF", "audio/aiff"),
        (b"wvpk\x00\x00\x00\x00", "audio/wavpack"),
        (b"MAC \x96\x0f\x00\x00", "audio/ape"),
        (b"TTA1\x01\x00", "audio/x-tta"),
    ],
)
def test_guess_mime_type(header: bytes, expected: str) -> None:
    assert guess_mime_type(header) == expected


@pytest.mark.parametrize(
    "header",
    [
        b"",
        b"plain text, not audio",
        # ADTS AAC frame sync: layer bits are zero.
        b"\xff\xf1\x50\x80" + b"\x00" * 12,
    ],
)
def test_guess_mime_type_misses(header: bytes) -> None:
    assert guess_mime_type(header) is None
