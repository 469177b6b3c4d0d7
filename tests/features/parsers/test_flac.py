"""End-to-end tests for FLAC files."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

from mutagen.flac import Picture as FlacPicture

from musicmeta import ParseOptions, parse_file, parse_stream
from musicmeta.shared.models import Rating, TrackNo
from musicmeta.shared.tag_types import TagType

COMMENTS: list[tuple[str, str]] = [
    ("TITLE", "Song"),
    ("ARTIST", "A"),
    ("ARTIST", "B"),
    ("TRACKNUMBER", "2"),
    ("TRACKTOTAL", "10"),
    ("DATE", "2020"),
    ("GENRE", "Jazz"),
    ("RATING:user@example.com", "60"),
]


def _cover() -> FlacPicture:
    picture = FlacPicture()
    picture.type = 3
    picture.mime = "image/png"
    picture.desc = "cover"
    picture.data = b"\x89PNG\r\n"
    return picture


def test_flac_file(make_flac: Callable[..., Path]) -> None:
    path = make_flac(COMMENTS, [_cover()])

    result = asyncio.run(parse_file(path))

    audio_format = result.format
    assert audio_format.data_format == "FLAC"
    assert audio_format.lossless is True
    assert audio_format.sample_rate == 44100
    assert audio_format.bits_per_sample == 16
    assert audio_format.number_of_channels == 2
    assert audio_format.number_of_samples == 44100
    assert audio_format.duration == 1.0
    assert audio_format.audio_md5 == bytes(range(16))
    assert audio_format.encoder is not None
    assert audio_format.tag_types == [TagType.VORBIS]

    common = result.common
    assert common.title == "Song"
    assert common.artist == "A"
    assert common.artists == ["A", "B"]
    assert common.track == TrackNo(no=2, of=10)
    assert common.date == "2020"
    assert common.year == 2020
    assert common.genre == ["Jazz"]
    assert common.rating == [Rating(0.6, "user@example.com")]
    assert common.picture is not None
    assert len(common.picture) == 1
    assert common.picture[0].format == "image/png"
    assert common.picture[0].type == "Cover (front)"
    assert common.picture[0].description == "cover"
    assert common.picture[0].data == b"\x89PNG\r\n"


def test_flac_skip_covers(make_flac: Callable[..., Path]) -> None:
    path = make_flac(COMMENTS, [_cover()])

    result = asyncio.run(parse_file(path, ParseOptions(skip_covers=True, native=True)))

    assert result.common.picture is None
    assert result.native is not None
    assert all(tag.id != "METADATA_BLOCK_PICTURE" for tag in result.native[TagType.VORBIS])


def test_flac_stream_is_sniffed(make_flac: Callable[..., Path]) -> None:
    path = make_flac([("TITLE", "Streamed")], name="no-extension")

    with open(path, "rb") as stream:
        result = asyncio.run(parse_stream(stream))
        assert not stream.closed

    assert result.format.data_format == "FLAC"
    assert result.common.title == "Streamed"
