"""Display helpers over normalized and native tags.

Where: src/musicmeta/features/normalization/usecases/tag_utils.py
What: Join artist names, group native tags by id and turn ratings into stars.
Why: Consumers need the same presentation rules the engine applies to ``artist``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

from musicmeta.shared.models import Tag

__all__ = ["join_artists", "order_tags", "rating_to_stars"]


def join_artists(artists: Sequence[str]) -> str:
    """Join names as ``"A, B & C"``; one or two names are joined with ``" & "`` only."""
    if len(artists) > 2:
        return ", ".join(artists[:-1]) + " & " + artists[-1]
    return " & ".join(artists)


def order_tags(tags: Iterable[Tag]) -> dict[str, list[Any]]:
    """Group native tags by id, keeping first-seen id order and value order."""
    ordered: dict[str, list[Any]] = {}
    for tag in tags:
        ordered.setdefault(tag.id, []).append(tag.value)
    return ordered


def rating_to_stars(rating: float | None) -> int:
    """Convert a ``[0, 1]`` rating to 1..5 stars (``0`` when there is no rating).

    Rounds half up, so ``0.5`` gives 3 stars and ``0.125`` gives 2.
    """
    if rating is None:
        return 0
    return 1 + math.floor(rating * 4 + 0.5)
