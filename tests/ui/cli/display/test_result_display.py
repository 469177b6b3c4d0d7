"""Tests for metadata rendering."""

from __future__ import annotations

import json

from rich.console import Console

from musicmeta.shared.models import (
    AudioFormat,
    AudioMetadata,
    CommonTags,
    Picture,
    Rating,
    Tag,
    TrackNo,
)
from musicmeta.shared.tag_types import TagType
from musicmeta.ui.cli.display import MetadataDisplay, metadata_to_dict


def _metadata() -> AudioMetadata:
    return AudioMetadata(
        format=AudioFormat(
            data_format="FLAC",
            tag_types=[TagType.VORBIS],
            sample_rate=44100,
            audio_md5=b"\x00" * 16,
        ),
        common=CommonTags(
            title="Song",
            track=TrackNo(no=2, of=10),
            rating=[Rating(0.5, "user@example.com")],
            picture=[Picture(format="image/png", data=b"\x89PNG", type="Cover (front)")],
        ),
        native={TagType.VORBIS: [Tag("TITLE", "Song"), Tag("ARTIST", "A"), Tag("ARTIST", "B")]},
    )


def test_metadata_to_dict() -> None:
    result = metadata_to_dict(_metadata())

    assert result["format"] == {
        "data_format": "FLAC",
        "tag_types": ["vorbis"],
        "sample_rate": 44100,
        "audio_md5": "<16 bytes>",
    }
    assert result["common"]["title"] == "Song"
    assert result["common"]["track"] == {"no": 2, "of": 10}
    assert result["common"]["disk"] == {"no": None, "of": None}
    assert result["common"]["rating"] == [{"rating": 0.5, "source": "user@example.com", "stars": 3}]
    assert result["common"]["picture"] == [
        {"format": "image/png", "type": "Cover (front)", "description": None, "size": 4}
    ]
    assert result["native"] == {"vorbis": {"TITLE": ["Song"], "ARTIST": ["A", "B"]}}
    _ = json.dumps(result)


def test_show_json() -> None:
    console = Console(record=True, width=120)

    MetadataDisplay(console).show_json(_metadata())

    parsed = json.loads(console.export_text())
    assert parsed["common"]["title"] == "Song"


def test_show_tables() -> None:
    console = Console(record=True, width=160)

    MetadataDisplay(console).show_tables(_metadata(), "song.flac")

    output = console.export_text()
    assert "Format: song.flac" in output
    assert "Common tags" in output
    assert "2/10" in output
    assert "3/5 (user@example.com)" in output
    assert "image/png (4 bytes)" in output
    assert "Native tags: vorbis" in output
    assert "A; B" in output
