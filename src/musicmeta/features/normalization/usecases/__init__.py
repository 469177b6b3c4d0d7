"""Use cases of the normalization engine."""

from .normalizer import (
    MusicMetadataParser,
    default_common,
    is_unset,
    merge_missing,
    reconcile_artists,
)
from .tag_utils import join_artists, order_tags, rating_to_stars

__all__ = [
    "MusicMetadataParser",
    "default_common",
    "is_unset",
    "join_artists",
    "merge_missing",
    "order_tags",
    "rating_to_stars",
    "reconcile_artists",
]
