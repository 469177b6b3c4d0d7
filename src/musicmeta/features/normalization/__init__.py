# Where: musicmeta.features.normalization.__init__
# What: Expose the normalization engine and its display helpers.
# Why: Provide a cohesive import surface for the public API and tests.

from .usecases import MusicMetadataParser, join_artists, order_tags, rating_to_stars

__all__ = ["MusicMetadataParser", "join_artists", "order_tags", "rating_to_stars"]
