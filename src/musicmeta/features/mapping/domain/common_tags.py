"""
Summary: Cardinality of the canonical tag fields, derived from ``CommonTags``.
Why: Mappers and the normalizer must agree on which fields accumulate lists.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Final

from musicmeta.shared.models import CommonTags

COMMON_FIELDS: Final[frozenset[str]] = frozenset(f.name for f in fields(CommonTags))

MULTIPLE_FIELDS: Final[frozenset[str]] = frozenset(
    f.name for f in fields(CommonTags) if f.metadata.get("multiple", False)
)


def is_singleton(name: str) -> bool:
    """True when ``name`` holds one value; ``artist`` still accumulates during mapping."""

    return name in COMMON_FIELDS and name not in MULTIPLE_FIELDS


__all__ = ["COMMON_FIELDS", "MULTIPLE_FIELDS", "is_singleton"]
