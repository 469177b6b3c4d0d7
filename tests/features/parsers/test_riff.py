"""Tests for RIFF/WAVE files carrying a ``LIST/INFO`` chunk."""

from __future__ import annotations

import asyncio
import struct

from musicmeta import parse_buffer
from musicmeta.features.parsers.riff import read_info_chunk
from musicmeta.shared.models import Tag
from musicmeta.shared.tag_types import TagType


def _chunk(chunk_id: bytes, payload: bytes) -> bytes:
    pad = b"\x00" if len(payload) % 2 else b""
    return chunk_id + struct.pack("<I", len(payload)) + payload + pad


def _wave(info: dict[str, str] | None) -> bytes:
    fmt = struct.pack("<HHIIHH", 1, 2, 44100, 44100 * 4, 4, 16)
    chunks = _chunk(b"fmt ", fmt) + _chunk(b"data", b"\x00" * 4 * 441)
    if info is not None:
        entries = b"".join(
            _chunk(key.encode("ascii"), value.encode("utf-8") + b"\x00") for key, value in info.items()
        )
        chunks += _chunk(b"LIST", b"INFO" + entries)
    return b"RIFF" + struct.pack("<I", 4 + len(chunks)) + b"WAVE" + chunks


def test_read_info_chunk() -> None:
    tags = read_info_chunk(_wave({"INAM": "Song", "IART": "Björk", "ICMT": ""}))

    assert tags == [Tag("INAM", "Song"), Tag("IART", "Björk")]
    assert read_info_chunk(_wave(None)) is None


def test_wave_file() -> None:
    data = _wave({"INAM": "Song", "IART": "Artist", "ICRD": "2004", "IGNR": "Rock", "ITRK": "3"})

    result = asyncio.run(parse_buffer(data, "audio/wav"))

    assert result.format.data_format == "WAVE"
    assert result.format.sample_rate == 44100
    assert result.format.number_of_channels == 2
    assert result.format.bits_per_sample == 16
    assert result.format.lossless is True
    assert result.format.tag_types == [TagType.EXIF]
    assert result.common.title == "Song"
    assert result.common.artist == "Artist"
    assert result.common.date == "2004"
    assert result.common.year == 2004
    assert result.common.genre == ["Rock"]
    assert result.common.track.no == 3


def test_wave_is_sniffed() -> None:
    result = asyncio.run(parse_buffer(_wave({"INAM": "Sniffed"})))

    assert result.format.data_format == "WAVE"
    assert result.common.title == "Sniffed"
