"""Tag value helpers.

Where: src/musicmeta/features/mapping/usecases/_tag_utils.py
What: Pure conversions applied while mapping native values onto canonical fields.
Why: Every tag format shares the same number, genre, picture and flag conventions.
"""

from __future__ import annotations

import re
from typing import Any

from mutagen.id3 import TCON

from musicmeta.shared.models import Picture, TrackNo

__all__ = [
    "fix_picture_mime_type",
    "normalize_track",
    "parse_genre",
    "parse_slash_separated",
    "parse_year",
    "to_bool",
    "to_float",
    "to_int",
]

_GENRE_GROUP = re.compile(r"\((.*?)\)")

_TRUE_WORDS = frozenset({"1", "true", "yes", "y"})


def to_int(value: Any) -> int | None:
    """Parse an integer; ``None`` for anything that is not a whole number."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.lstrip("-").isdigit():
        return int(text)
    return None


def to_float(value: Any) -> float | None:
    """Parse a float; ``None`` if conversion fails."""
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def to_bool(value: Any) -> bool:
    """Interpret flags stored as booleans, integers or words such as ``"1"`` / ``"true"``."""
    if isinstance(value, (bool, int)):
        return bool(value)
    return str(value).strip().lower() in _TRUE_WORDS


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total); parts that are not digits become ``None``.
    """
    parts: list[str] = [part.strip() for part in value.split(sep="/")] if value else []
    num: int | None = int(parts[0]) if parts and parts[0].isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None
    return num, total


def normalize_track(value: Any) -> TrackNo:
    """Turn ``3``, ``"3"``, ``"3/12"`` or ``(3, 12)`` into a ``TrackNo``."""
    if isinstance(value, TrackNo):
        return value
    if isinstance(value, tuple):
        number, total = (list(value) + [None, None])[:2]
        return TrackNo(no=to_int(number) or None, of=to_int(total) or None)
    if isinstance(value, int) and not isinstance(value, bool):
        return TrackNo(no=value)
    number, total = parse_slash_separated(str(value))
    return TrackNo(no=number, of=total)


def parse_year(date_str: str) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    date_str = str(date_str).strip()
    return int(date_str[:4]) if len(date_str) >= 4 and date_str[:4].isdigit() else None


def parse_genre(value: str) -> str | None:
    """Resolve ID3 style genre references.

    ``"(17)"`` becomes ``"Rock"``, ``"(4)(Eurodisco)"`` becomes ``"Disco/Eurodisco"``
    and a bare ``"17"`` is looked up as well. Unknown numeric references are dropped.
    """
    parts = [part for part in _GENRE_GROUP.split(str(value).strip()) if part != ""]
    names: list[str] = []
    for part in parts:
        if part.isdigit():
            index = int(part)
            if index >= len(TCON.GENRES):
                continue
            part = TCON.GENRES[index]
        names.append(part)
    return "/".join(names) or None


def fix_picture_mime_type(picture: Picture) -> Picture:
    """Normalize the picture format to a lowercase ``image/*`` MIME type."""
    mime = picture.format.strip().lower()
    if mime in ("jpg", "image/jpg", "jpeg"):
        mime = "image/jpeg"
    elif mime and "/" not in mime:
        mime = f"image/{mime}"
    if mime == picture.format:
        return picture
    return Picture(format=mime, data=picture.data, description=picture.description, type=picture.type)
