"""
Summary: Public parse entry points over files, streams, buffers, URLs and tokenizers.
Why: Callers pick a byte source; acquiring and releasing it stays out of the engine.
"""

from __future__ import annotations

import dataclasses
import os
from typing import BinaryIO

import requests

from musicmeta.config.settings import http_timeout
from musicmeta.features.normalization import MusicMetadataParser
from musicmeta.features.tokenizer import from_buffer, from_file, from_stream, from_url
from musicmeta.shared.models import AudioMetadata, NativeAudioMetadata
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.ports import Tokenizer

__all__ = [
    "parse",
    "parse_buffer",
    "parse_file",
    "parse_native_tags",
    "parse_stream",
    "parse_url",
]

_engine = MusicMetadataParser()


def _copy_options(options: ParseOptions | None, **changes: object) -> ParseOptions:
    """Copy ``options`` so entry points never mutate the caller's instance."""
    base = options if options is not None else ParseOptions()
    return dataclasses.replace(base, **changes)


async def parse(tokenizer: Tokenizer, options: ParseOptions | None = None) -> AudioMetadata:
    """Parse from an already opened tokenizer; the caller closes it."""
    return await _engine.parse(tokenizer, options)


def parse_native_tags(
    native_data: NativeAudioMetadata,
    include_native: bool = False,
    merge_tag_headers: bool = False,
) -> AudioMetadata:
    """Normalize native tags produced elsewhere."""
    return _engine.parse_native_tags(native_data, include_native, merge_tag_headers)


async def parse_file(path: str | os.PathLike[str], options: ParseOptions | None = None) -> AudioMetadata:
    """Parse a local audio file.

    Args:
        path: Path to the audio file; its extension helps select the parser.
        options: Parse options; ``path`` is replaced with ``path``.

    Returns:
        AudioMetadata: Normalized metadata.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    opts = _copy_options(options, path=os.fspath(path))
    async with await from_file(path) as tokenizer:
        return await _engine.parse(tokenizer, opts)


async def parse_stream(
    stream: BinaryIO,
    mime_type: str | None = None,
    options: ParseOptions | None = None,
) -> AudioMetadata:
    """Parse a caller-owned binary stream; the stream is left open.

    ``mime_type`` takes precedence over ``options.content_type``.
    """
    opts = _copy_options(options)
    if mime_type:
        opts.content_type = mime_type
    tokenizer = from_stream(stream, file_size=opts.file_size, content_type=opts.content_type)
    async with tokenizer:
        return await _engine.parse(tokenizer, opts)


async def parse_buffer(
    data: bytes,
    mime_type: str | None = None,
    options: ParseOptions | None = None,
) -> AudioMetadata:
    """Parse audio held in memory."""
    opts = _copy_options(options)
    if mime_type:
        opts.content_type = mime_type
    async with from_buffer(data, content_type=opts.content_type) as tokenizer:
        return await _engine.parse(tokenizer, opts)


async def parse_url(
    url: str,
    options: ParseOptions | None = None,
    session: requests.Session | None = None,
) -> AudioMetadata:
    """Fetch ``url`` and parse the response body.

    The response ``Content-Type`` wins over ``options.content_type``; the
    response is closed when parsing ends.

    Raises:
        requests.HTTPError: If the server answers with an error status.
    """
    tokenizer = await from_url(url, session=session, timeout=http_timeout())
    async with tokenizer:
        opts = _copy_options(options)
        if tokenizer.content_type:
            opts.content_type = tokenizer.content_type
        if opts.path is None:
            opts.path = url.split("?", 1)[0]
        return await _engine.parse(tokenizer, opts)
