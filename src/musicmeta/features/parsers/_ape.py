"""APEv2 helpers shared by the MPEG, Monkey's Audio and WavPack parsers.

Where: src/musicmeta/features/parsers/_ape.py
What: Load an optional APEv2 tag and flatten its items into native tags.
Why: APEv2 appears both as a primary container and as a trailer on MP3 files.
"""

from __future__ import annotations

import io

from mutagen.apev2 import APENoHeaderError, APEv2, APEBinaryValue, APETextValue

from musicmeta.platform.logging import logger
from musicmeta.shared.models import Picture, Tag

__all__ = ["ape_items_to_tags", "load_apev2_tags"]

_COVER_PREFIX = "cover art"


def _binary_to_tag(key: str, value: bytes, skip_covers: bool) -> Tag | None:
    if not key.lower().startswith(_COVER_PREFIX):
        return Tag(key, value)
    if skip_covers:
        return None
    # "<file name>\0<image data>"
    name, _, data = value.partition(b"\x00")
    extension = name.decode("utf-8", "replace").rpartition(".")[2].lower()
    description = key[len(_COVER_PREFIX):].strip(" ()") or None
    return Tag(key, Picture(format=extension or "jpeg", data=data, description=description))


def ape_items_to_tags(tags: APEv2, *, skip_covers: bool = False) -> list[Tag]:
    """Flatten APEv2 items; multi-value text items yield one tag per value."""
    result: list[Tag] = []
    for key, value in tags.items():
        if isinstance(value, APETextValue):
            result.extend(Tag(key, text) for text in value)
        elif isinstance(value, APEBinaryValue):
            tag = _binary_to_tag(key, value.value, skip_covers)
            if tag is not None:
                result.append(tag)
        else:
            result.append(Tag(key, str(value)))
    return result


def load_apev2_tags(data: bytes, *, skip_covers: bool = False) -> list[Tag] | None:
    """Read an APEv2 tag from anywhere mutagen finds one; ``None`` if absent."""
    try:
        tags = APEv2(io.BytesIO(data))
    except APENoHeaderError:
        logger.debug("No APEv2 tag present")
        return None
    return ape_items_to_tags(tags, skip_covers=skip_covers)
