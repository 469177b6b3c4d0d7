"""
Summary: Factories opening tokenizers over files, streams, buffers and URLs.
Why: Entry points acquire byte sources here and release them through the tokenizer's ``close``.
"""

from __future__ import annotations

import asyncio
import io
import os
from pathlib import Path
from typing import BinaryIO

import requests

from musicmeta.platform.logging import logger

from .reader_tokenizer import ReaderTokenizer


async def from_file(path: str | os.PathLike[str]) -> ReaderTokenizer:
    """Open a local file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    file_path = Path(path)
    handle: BinaryIO = await asyncio.to_thread(open, file_path, "rb")
    try:
        size = (await asyncio.to_thread(os.fstat, handle.fileno())).st_size
    except OSError:
        handle.close()
        raise
    logger.debug("Opened %s (%d bytes)", file_path, size)
    return ReaderTokenizer(handle, file_size=size, closer=handle.close)


def from_stream(
    stream: BinaryIO,
    *,
    file_size: int | None = None,
    content_type: str | None = None,
) -> ReaderTokenizer:
    """Wrap a caller-owned binary stream; closing the tokenizer leaves the stream open."""

    return ReaderTokenizer(stream, file_size=file_size, content_type=content_type)


def from_buffer(data: bytes, *, content_type: str | None = None) -> ReaderTokenizer:
    """Wrap bytes already held in memory."""

    return ReaderTokenizer(io.BytesIO(data), file_size=len(data), content_type=content_type)


async def from_url(
    url: str,
    *,
    session: requests.Session | None = None,
    timeout: float = 15.0,
) -> ReaderTokenizer:
    """Issue a streamed GET and expose the body as a tokenizer.

    The response ``Content-Type`` and ``Content-Length`` become the tokenizer's
    content type and file size.

    Raises:
        requests.HTTPError: If the server answers with an error status.
        requests.RequestException: On connection problems.
    """
    client = session or requests
    response: requests.Response = await asyncio.to_thread(
        client.get, url, stream=True, timeout=(5.0, timeout)
    )
    try:
        response.raise_for_status()
    except requests.HTTPError:
        response.close()
        raise

    content_type = response.headers.get("Content-Type")
    length_header = response.headers.get("Content-Length")
    file_size = int(length_header) if length_header and length_header.isdigit() else None
    logger.debug("Fetched %s (content-type=%s, size=%s)", url, content_type, file_size)

    response.raw.decode_content = True
    return ReaderTokenizer(
        response.raw,
        file_size=file_size,
        content_type=content_type,
        closer=response.close,
    )


__all__ = ["from_file", "from_stream", "from_buffer", "from_url"]
