# Where: musicmeta.features.mapping.__init__
# What: Expose the mapper registry and canonical field metadata.
# Why: Provide a cohesive import surface for the normalization engine and tests.

from .domain import COMMON_FIELDS, MULTIPLE_FIELDS, is_singleton
from .usecases import CombinedTagMapper, CommonTagMapper, GenericTagMapper, default_mappers

__all__ = [
    "COMMON_FIELDS",
    "MULTIPLE_FIELDS",
    "CombinedTagMapper",
    "CommonTagMapper",
    "GenericTagMapper",
    "default_mappers",
    "is_singleton",
]
