"""Domain facts about canonical tag fields."""

from .common_tags import COMMON_FIELDS, MULTIPLE_FIELDS, is_singleton

__all__ = ["COMMON_FIELDS", "MULTIPLE_FIELDS", "is_singleton"]
