"""
Summary: Peekable async tokenizer over any blocking binary reader.
Why: Files, sockets and HTTP bodies all reduce to ``read(n)``; peeking and async hand-off live here once.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from types import TracebackType
from typing import BinaryIO, Self
from typing_extensions import override

from musicmeta.shared.ports import Tokenizer


class ReaderTokenizer(Tokenizer):
    """Tokenizer reading from a blocking binary reader in a worker thread.

    Peeked bytes are buffered and handed out again by the next read, so a
    peek never moves ``position``.
    """

    def __init__(
        self,
        reader: BinaryIO,
        *,
        file_size: int | None = None,
        content_type: str | None = None,
        closer: Callable[[], None] | None = None,
    ) -> None:
        self.file_size = file_size
        self.content_type = content_type
        self._reader = reader
        self._closer = closer
        self._peeked = b""
        self._position = 0
        self._closed = False

    @property
    @override
    def position(self) -> int:
        return self._position

    async def _fill(self, length: int) -> None:
        while len(self._peeked) < length:
            chunk = await asyncio.to_thread(self._reader.read, length - len(self._peeked))
            if not chunk:
                break
            self._peeked += chunk

    @override
    async def peek_buffer(self, length: int) -> bytes:
        await self._fill(length)
        return self._peeked[:length]

    @override
    async def read_buffer(self, length: int) -> bytes:
        await self._fill(length)
        data, self._peeked = self._peeked[:length], self._peeked[length:]
        self._position += len(data)
        return data

    @override
    async def read_remaining(self) -> bytes:
        rest = await asyncio.to_thread(self._reader.read)
        data = self._peeked + (rest or b"")
        self._peeked = b""
        self._position += len(data)
        return data

    @override
    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._closer is not None:
            await asyncio.to_thread(self._closer)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


__all__ = ["ReaderTokenizer"]
