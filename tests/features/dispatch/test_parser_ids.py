"""Tests for the MIME-type and extension lookup tables."""

from __future__ import annotations

import pytest

from musicmeta.features.dispatch.domain import (
    ParserId,
    get_parser_id_for_extension,
    get_parser_id_for_mime_type,
    parse_mime_type,
)


@pytest.mark.parametrize(
    ("mime_type", "expected"),
    [
        ("audio/mpeg", ParserId.MPEG),
        ("audio/x-flac", ParserId.FLAC),
        ("audio/flac; rate=44100", ParserId.FLAC),
        ("AUDIO/MP4", ParserId.MP4),
        ("audio/x-m4a", ParserId.MP4),
        ("audio/aacp", ParserId.MP4),
        ("audio/ogg", ParserId.OGG),
        ("application/ogg", ParserId.OGG),
        ("video/x-ms-asf", ParserId.ASF),
        ("audio/x-ms-wma", ParserId.ASF),
        ("audio/x-aiff", ParserId.AIFF),
        ("audio/vnd.wave", ParserId.RIFF),
        ("audio/x-wav", ParserId.RIFF),
        ("audio/x-wavpack", ParserId.WAVPACK),
        ("audio/x-monkeys-audio", ParserId.APEV2),
    ],
)
def test_mime_type_lookup(mime_type: str, expected: ParserId) -> None:
    assert get_parser_id_for_mime_type(mime_type) == expected


@pytest.mark.parametrize(
    "mime_type",
    [None, "", "audio/x-tta", "text/plain", "not a mime type", "audio/"],
)
def test_mime_type_lookup_misses(mime_type: str | None) -> None:
    assert get_parser_id_for_mime_type(mime_type) is None


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("song.mp3", ParserId.MPEG),
        ("/music/Artist/Album/01 Track.FLAC", ParserId.FLAC),
        (".m4a", ParserId.MP4),
        ("m4b", None),
        ("archive.tar.opus", ParserId.OGG),
        ("voice.wv", ParserId.WAVPACK),
        ("take.aifc", ParserId.AIFF),
        ("clip.wav", ParserId.RIFF),
        ("music.wma", ParserId.ASF),
        ("image.jpg", None),
        ("", None),
        (None, None),
    ],
)
def test_extension_lookup(path: str | None, expected: ParserId | None) -> None:
    """Only the text after the last dot counts; no dot means no match."""
    assert get_parser_id_for_extension(path) == expected


def test_parse_mime_type_lowercases_and_drops_parameters() -> None:
    assert parse_mime_type("Audio/X-FLAC ; charset=binary") == ("audio", "x-flac")
    assert parse_mime_type("audio") is None


def test_parser_id_str_is_value() -> None:
    assert str(ParserId.WAVPACK) == "wavpack"
