"""
Summary: Verify how the parser factory picks exactly one parser for a stream.
Why: Content type must beat path, path must beat sniffing, and sniffing must never consume bytes.
"""

from __future__ import annotations

import asyncio

import pytest

from musicmeta.features.dispatch import ParserFactory, ParserId
from musicmeta.features.tokenizer import from_buffer
from musicmeta.shared.errors import UnsupportedFormatError
from musicmeta.shared.models import AudioFormat, NativeAudioMetadata
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.ports import Tokenizer

ID3_HEADER: bytes = b"ID3\x04\x00\x00\x00\x00\x00\x00"


class _RecordingParser:
    def __init__(self) -> None:
        self.positions: list[int] = []

    async def parse(self, tokenizer: Tokenizer, options: ParseOptions) -> NativeAudioMetadata:
        _ = options
        self.positions.append(tokenizer.position)
        return NativeAudioMetadata(format=AudioFormat(data_format="recorded"))


def _run(data: bytes, **option_values: object) -> tuple[list[str], _RecordingParser, NativeAudioMetadata]:
    requested: list[str] = []
    parser = _RecordingParser()

    def loader(parser_id: str) -> _RecordingParser:
        requested.append(parser_id)
        return parser

    options = ParseOptions(load_parser=loader)
    for name, value in option_values.items():
        setattr(options, name, value)

    async def _parse() -> NativeAudioMetadata:
        async with from_buffer(data) as tokenizer:
            return await ParserFactory.parse(tokenizer, options)

    result = asyncio.run(_parse())
    return requested, parser, result


def test_content_type_beats_path_and_signature() -> None:
    requested, _, _ = _run(ID3_HEADER, content_type="audio/flac", path="song.ogg")
    assert requested == [ParserId.FLAC]


def test_content_type_may_be_an_extension() -> None:
    requested, _, _ = _run(ID3_HEADER, content_type=".m4a")
    assert requested == [ParserId.MP4]


def test_unknown_content_type_falls_back_to_path() -> None:
    requested, _, _ = _run(ID3_HEADER, content_type="application/octet-stream", path="song.ogg")
    assert requested == [ParserId.OGG]


def test_sniffing_is_last_resort_and_does_not_consume() -> None:
    requested, parser, result = _run(ID3_HEADER, path="noextension")

    assert requested == [ParserId.MPEG]
    assert parser.positions == [0]
    assert result.format.data_format == "recorded"


def test_no_signature_raises() -> None:
    with pytest.raises(UnsupportedFormatError, match="Failed to guess MIME-type"):
        _ = _run(b"just some text")


def test_unsupported_guess_raises() -> None:
    with pytest.raises(UnsupportedFormatError, match="Guessed MIME-type not supported: audio/x-dsf"):
        _ = _run(b"DSD \x1c\x00\x00\x00\x00\x00\x00\x00")


def test_resolve_declared_without_hints() -> None:
    assert ParserFactory.resolve_declared(ParseOptions()) is None
