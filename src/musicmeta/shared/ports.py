"""
Summary: Protocols for the byte-stream tokenizer and the format-specific tag parsers.
Why: Keep dispatch and the entry points independent from concrete byte sources and parsers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .models import NativeAudioMetadata

if TYPE_CHECKING:
    from .options import ParseOptions


@runtime_checkable
class Tokenizer(Protocol):
    """Peekable asynchronous byte source."""

    file_size: int | None
    content_type: str | None

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        ...

    async def peek_buffer(self, length: int) -> bytes:
        """Return up to ``length`` upcoming bytes without consuming them."""
        ...

    async def read_buffer(self, length: int) -> bytes:
        """Consume and return up to ``length`` bytes."""
        ...

    async def read_remaining(self) -> bytes:
        """Consume and return everything up to the end of the source."""
        ...

    async def close(self) -> None:
        """Release the underlying resource."""
        ...


@runtime_checkable
class TokenParser(Protocol):
    """Format-specific parser producing native tags from a tokenizer."""

    async def parse(self, tokenizer: Tokenizer, options: ParseOptions) -> NativeAudioMetadata:
        """Decode the stream into a format descriptor and native tags."""
        ...


__all__ = ["Tokenizer", "TokenParser"]
