"""End-to-end tests for MPEG audio files with ID3v2, ID3v1 and APEv2 tags."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest
from mutagen import MutagenError
from mutagen.apev2 import APEv2
from mutagen.id3 import APIC, COMM, POPM, TALB, TCON, TDRC, TIT2, TPE1, TRCK, TXXX, TYER

from musicmeta import ParseOptions, parse_buffer, parse_file
from musicmeta.features.parsers.mpeg import MpegParser
from musicmeta.features.tokenizer import from_buffer
from musicmeta.shared.models import Rating, TrackNo
from musicmeta.shared.tag_types import TagType


def test_id3v24_file(make_mp3: Callable[..., Path]) -> None:
    path = make_mp3(
        TIT2(encoding=3, text=["Song"]),
        TPE1(encoding=3, text=["A feat. B"]),
        TXXX(encoding=3, desc="ARTISTS", text=["A", "B"]),
        TALB(encoding=3, text=["Album"]),
        TRCK(encoding=3, text=["3/12"]),
        TDRC(encoding=3, text=["2016-04-12"]),
        TCON(encoding=3, text=["(17)"]),
        COMM(encoding=3, lang="eng", desc="", text=["nice"]),
        POPM(email="user@example.com", rating=128, count=1),
        APIC(encoding=3, mime="image/jpeg", type=3, desc="front", data=b"\xff\xd8\xff\xe0"),
    )

    result = asyncio.run(parse_file(path))

    assert result.format.data_format == "MPEG 1 Layer 3"
    assert result.format.sample_rate == 44100
    assert result.format.bitrate == 128000
    assert result.format.number_of_channels == 2
    assert result.format.lossless is False
    assert result.format.tag_types == [TagType.ID3V24]
    assert result.format.duration is not None and result.format.duration > 0

    common = result.common
    assert common.title == "Song"
    assert common.artist == "A feat. B"
    assert common.artists == ["A", "B"]
    assert common.album == "Album"
    assert common.track == TrackNo(no=3, of=12)
    assert common.date == "2016-04-12"
    assert common.year == 2016
    assert common.genre == ["Rock"]
    assert common.comment == ["nice"]
    assert common.rating == [Rating(128 / 255, "user@example.com")]
    assert common.picture is not None
    assert common.picture[0].format == "image/jpeg"
    assert common.picture[0].type == "Cover (front)"
    assert common.picture[0].description == "front"
    assert result.native is None


def test_id3v23_file(make_mp3: Callable[..., Path]) -> None:
    path = make_mp3(
        TIT2(encoding=1, text=["Old"]),
        TYER(encoding=1, text=["1999"]),
        v2_version=3,
    )

    result = asyncio.run(parse_file(path, ParseOptions(native=True)))

    assert result.format.tag_types == [TagType.ID3V23]
    assert result.common.year == 1999
    assert result.native is not None
    assert [tag.id for tag in result.native[TagType.ID3V23]] == ["TIT2", "TYER"]


def test_skip_covers(make_mp3: Callable[..., Path]) -> None:
    path = make_mp3(
        TIT2(encoding=3, text=["Song"]),
        APIC(encoding=3, mime="image/png", type=3, desc="", data=b"\x89PNG"),
    )

    result = asyncio.run(parse_file(path, ParseOptions(skip_covers=True)))

    assert result.common.title == "Song"
    assert result.common.picture is None


def test_id3v1_trailer_and_merge(
    make_mp3: Callable[..., Path], make_id3v1: Callable[..., bytes]
) -> None:
    trailer = make_id3v1(title="V1 title", album="V1 album", year="1987", track=7, genre=17)
    path = make_mp3(TIT2(encoding=3, text=["V2 title"]), trailer=trailer)

    plain = asyncio.run(parse_file(path, ParseOptions(native=True)))
    merged = asyncio.run(parse_file(path, ParseOptions(merge_tag_headers=True)))

    assert plain.format.tag_types == [TagType.ID3V24, TagType.ID3V1]
    assert plain.native is not None
    assert {tag.id: tag.value for tag in plain.native[TagType.ID3V1]} == {
        "title": "V1 title",
        "album": "V1 album",
        "year": "1987",
        "track": "7",
        "genre": "Rock",
    }
    assert plain.common.title == "V2 title"
    assert plain.common.album is None

    assert merged.common.title == "V2 title"
    assert merged.common.album == "V1 album"
    assert merged.common.year == 1987
    assert merged.common.track == TrackNo(no=7)
    assert merged.common.genre == ["Rock"]


def test_apev2_trailer(make_mp3: Callable[..., Path]) -> None:
    path = make_mp3(TIT2(encoding=3, text=["ID3 title"]))
    ape = APEv2()
    ape["Title"] = "APE title"
    ape["Artist"] = ["X", "Y"]
    ape.save(str(path))

    result = asyncio.run(parse_file(path))

    assert result.format.tag_types == [TagType.ID3V24, TagType.APEV2]
    assert result.common.title == "APE title"
    assert result.common.artists == ["X", "Y"]


def test_untagged_stream_is_sniffed(mpeg_stream: bytes) -> None:
    result = asyncio.run(parse_buffer(mpeg_stream))

    assert result.format.data_format == "MPEG 1 Layer 3"
    assert result.format.tag_types == []
    assert result.common.title is None
    assert result.common.track == TrackNo()


def test_corrupt_stream_raises() -> None:
    with pytest.raises(MutagenError):
        _ = asyncio.run(parse_buffer(b"\x00" * 2048, "audio/mpeg"))


def test_parser_buffers_the_whole_source(mpeg_stream: bytes) -> None:
    async def scenario() -> tuple[int, int]:
        async with from_buffer(mpeg_stream) as tokenizer:
            _ = await MpegParser().parse(tokenizer, ParseOptions())
            return tokenizer.position, len(await tokenizer.read_remaining())

    position, left = asyncio.run(scenario())

    assert position == len(mpeg_stream)
    assert left == 0
