"""Vorbis comment helpers shared by the FLAC and Ogg parsers.

Where: src/musicmeta/features/parsers/_vorbis.py
What: Flatten Vorbis comments and FLAC picture blocks into native tags.
Why: FLAC and every Ogg codec store tags as Vorbis comments with the same picture encoding.
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterable

from mutagen import MutagenError
from mutagen.flac import Picture as FlacPicture

from musicmeta.platform.logging import logger
from musicmeta.shared.models import Picture, Tag

from ._base import picture_type_name

__all__ = ["PICTURE_BLOCK_KEY", "comments_to_tags", "flac_picture_to_tag"]

PICTURE_BLOCK_KEY = "METADATA_BLOCK_PICTURE"


def flac_picture_to_tag(picture: FlacPicture) -> Tag:
    """Wrap a FLAC PICTURE block as a ``METADATA_BLOCK_PICTURE`` tag."""
    return Tag(
        PICTURE_BLOCK_KEY,
        Picture(
            format=picture.mime,
            data=picture.data,
            description=picture.desc or None,
            type=picture_type_name(picture.type),
        ),
    )


def _decode_picture_block(value: str) -> Tag | None:
    try:
        picture = FlacPicture(base64.b64decode(value))
    except (binascii.Error, MutagenError) as exc:
        logger.debug("Ignoring undecodable %s: %s", PICTURE_BLOCK_KEY, exc)
        return None
    return flac_picture_to_tag(picture)


def comments_to_tags(comments: Iterable[tuple[str, str]], *, skip_covers: bool = False) -> list[Tag]:
    """Convert ``(key, value)`` comment pairs, decoding base64 picture blocks."""
    tags: list[Tag] = []
    for key, value in comments:
        if key.upper() == PICTURE_BLOCK_KEY:
            if skip_covers:
                continue
            tag = _decode_picture_block(value)
            if tag is not None:
                tags.append(tag)
            continue
        tags.append(Tag(key, value))
    return tags
