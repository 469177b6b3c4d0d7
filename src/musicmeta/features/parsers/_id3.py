"""ID3 helpers shared by the MPEG, AIFF and WAVE parsers.

Where: src/musicmeta/features/parsers/_id3.py
What: Flatten mutagen ID3 frames into native tags and pick the ID3v2 tag format.
Why: Three containers embed ID3v2; frame translation must not diverge between them.
"""

from __future__ import annotations

from collections.abc import Iterable

from mutagen.id3 import (
    APIC,
    COMM,
    ID3,
    POPM,
    PRIV,
    TCON,
    TXXX,
    UFID,
    USLT,
    WXXX,
    Frame,
    PairedTextFrame,
    ParseID3v1,
    TextFrame,
    UrlFrame,
)

from musicmeta.platform.logging import logger
from musicmeta.shared.models import Picture, Tag
from musicmeta.shared.tag_types import TagType

from ._base import picture_type_name

__all__ = [
    "id3v2_tag_type",
    "frames_to_tags",
    "parse_id3v1",
]

_ID3V1_IDS: dict[str, str] = {
    "TIT2": "title",
    "TPE1": "artist",
    "TALB": "album",
    "TDRC": "year",
    "COMM": "comment",
    "TRCK": "track",
    "TCON": "genre",
}


def id3v2_tag_type(tags: ID3) -> TagType:
    """Tag format for the loaded header's minor version."""
    minor = tags.version[1]
    if minor == 2:
        return TagType.ID3V22
    if minor == 3:
        return TagType.ID3V23
    return TagType.ID3V24


def _frame_to_tags(frame: Frame, skip_covers: bool) -> list[Tag]:
    frame_id: str = frame.FrameID

    # APIC/PIC, COMM/COM and TXXX/TXX before TextFrame: they subclass it or share its shape.
    if isinstance(frame, APIC):
        if skip_covers:
            return []
        picture = Picture(
            format=frame.mime,
            data=frame.data,
            description=frame.desc or None,
            type=picture_type_name(frame.type),
        )
        return [Tag(frame_id, picture)]
    if isinstance(frame, COMM):
        return [
            Tag(frame_id, {"language": frame.lang, "description": frame.desc, "text": str(text)})
            for text in frame.text
        ]
    if isinstance(frame, USLT):
        return [Tag(frame_id, {"language": frame.lang, "description": frame.desc, "text": frame.text})]
    if isinstance(frame, TXXX):
        return [Tag(f"{frame_id}:{frame.desc}", str(text)) for text in frame.text]
    if isinstance(frame, TextFrame):
        return [Tag(frame_id, str(text)) for text in frame.text]
    if isinstance(frame, PairedTextFrame):
        return [Tag(f"{frame_id}:{role}", person) for role, person in frame.people]
    if isinstance(frame, WXXX):
        return [Tag(f"{frame_id}:{frame.desc}", frame.url)]
    if isinstance(frame, UrlFrame):
        return [Tag(frame_id, frame.url)]
    if isinstance(frame, POPM):
        return [
            Tag(
                frame_id,
                {"email": frame.email, "rating": frame.rating, "count": getattr(frame, "count", 0)},
            )
        ]
    if isinstance(frame, UFID):
        return [Tag(frame_id, {"owner": frame.owner, "identifier": frame.data})]
    if isinstance(frame, PRIV):
        return [Tag(frame_id, {"owner": frame.owner, "data": frame.data})]

    logger.debug("Skipping unsupported ID3 frame %s", frame_id)
    return []


def frames_to_tags(frames: Iterable[Frame], *, skip_covers: bool = False) -> list[Tag]:
    """Flatten ID3v2 frames into native tags, one tag per value, in file order."""
    tags: list[Tag] = []
    for frame in frames:
        tags.extend(_frame_to_tags(frame, skip_covers))
    return tags


def parse_id3v1(trailer: bytes) -> list[Tag] | None:
    """Decode a trailing 128 byte ID3v1 block; ``None`` when no ``TAG`` header is present."""
    frames = ParseID3v1(trailer)
    if frames is None:
        return None

    tags: list[Tag] = []
    for frame_id, name in _ID3V1_IDS.items():
        frame = frames.get(frame_id)
        if frame is None:
            continue
        value = str(frame.text[0])
        if frame_id == "TCON":
            index = int(value)
            if index >= len(TCON.GENRES):
                continue
            value = TCON.GENRES[index]
        tags.append(Tag(name, value))
    return tags
