"""Minimal MIME type parsing (``type/subtype`` with optional parameters)."""

from __future__ import annotations

import re
from typing import Final

# RFC 6838 restricted-name characters.
_TOKEN: Final[str] = r"[A-Za-z0-9][A-Za-z0-9!#$&^_.+-]{0,126}"
_MIME_RE: Final[re.Pattern[str]] = re.compile(rf"^\s*({_TOKEN})/({_TOKEN})\s*(?:;.*)?$")


def parse_mime_type(value: str) -> tuple[str, str] | None:
    """Split a MIME type into lowercased ``(type, subtype)``; ``None`` if malformed."""

    match = _MIME_RE.match(value)
    if match is None:
        return None
    return match.group(1).lower(), match.group(2).lower()


__all__ = ["parse_mime_type"]
