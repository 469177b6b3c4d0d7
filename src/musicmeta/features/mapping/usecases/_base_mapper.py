"""Shared base class for generic tag mappers.

Where: src/musicmeta/features/mapping/usecases/_base_mapper.py
What: Translate one native tag into canonical fields of a mutable accumulator.
Why: Each tag format only supplies its id table and a ``post_map`` hook; value conventions live here once.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from musicmeta.platform.logging import logger
from musicmeta.shared.models import Picture, Tag, TrackNo
from musicmeta.shared.tag_types import TagType

from ..domain.common_tags import MULTIPLE_FIELDS
from ._tag_utils import (
    fix_picture_mime_type,
    normalize_track,
    parse_genre,
    parse_year,
    to_bool,
    to_float,
    to_int,
)

__all__ = ["CommonFields", "CommonTagMapper", "GenericTagMapper"]

CommonFields = dict[str, Any]

_TOTALS: dict[str, str] = {"totaltracks": "track", "totaldiscs": "disk"}
_INT_FIELDS = frozenset({"discogs_release_id"})
_YEAR_FIELDS = frozenset({"year", "originalyear"})
_FLOAT_FIELDS = frozenset({"replaygain_track_peak", "average_level", "peak_level"})
_BOOL_FIELDS = frozenset({"compilation", "gapless"})


@runtime_checkable
class GenericTagMapper(Protocol):
    """Maps native tags of one or more tag formats onto canonical fields."""

    tag_types: tuple[TagType, ...]

    def set_generic_tag(self, common: CommonFields, tag: Tag) -> None:
        """Apply ``tag`` to the ``common`` accumulator."""
        ...


class CommonTagMapper(GenericTagMapper):
    """Table driven mapper from native tag ids to canonical field names."""

    def __init__(
        self,
        tag_types: Sequence[TagType],
        tag_map: Mapping[str, str],
        *,
        case_insensitive: bool = False,
    ) -> None:
        self.tag_types = tuple(tag_types)
        self.case_insensitive = case_insensitive
        self.tag_map: Mapping[str, str] = MappingProxyType(dict(tag_map))
        self._lookup: dict[str, str] = {
            self._key(native_id): name for native_id, name in tag_map.items()
        }

    def _key(self, tag_id: str) -> str:
        return tag_id.lower() if self.case_insensitive else tag_id

    def get_common_name(self, tag_id: str) -> str | None:
        """Canonical field for a native id, ``None`` when the id is not mapped."""
        return self._lookup.get(self._key(tag_id))

    def post_map(self, tag: Tag) -> Tag | None:
        """Format-specific rewrite before the table lookup; ``None`` drops the tag."""
        return tag

    def set_generic_tag(self, common: CommonFields, tag: Tag) -> None:
        mapped = self.post_map(tag)
        if mapped is None:
            return

        name = self.get_common_name(mapped.id)
        if name is None:
            logger.debug("No common mapping for %s tag %r", self.tag_types[0], mapped.id)
            return

        value = mapped.value
        if name == "genre":
            value = parse_genre(value)
            if value is None:
                return
        elif name == "picture":
            if not isinstance(value, Picture):
                logger.debug("Ignoring non-picture value for %r", mapped.id)
                return
            value = fix_picture_mime_type(value)
        elif name in _TOTALS:
            target = _TOTALS[name]
            current: TrackNo = common.get(target) or TrackNo()
            common[target] = TrackNo(no=current.no, of=to_int(value))
            return
        elif name in ("track", "disk"):
            parsed = normalize_track(value)
            current = common.get(name) or TrackNo()
            totals = [of for of in (current.of, parsed.of) if of is not None]
            common[name] = TrackNo(
                no=parsed.no if parsed.no is not None else current.no,
                of=max(totals) if totals else None,
            )
            return
        elif name in _YEAR_FIELDS:
            value = parse_year(value)
            if value is None:
                return
        elif name in _INT_FIELDS:
            value = to_int(value)
            if value is None:
                return
        elif name in _FLOAT_FIELDS:
            value = to_float(value)
            if value is None:
                return
        elif name in _BOOL_FIELDS:
            value = to_bool(value)
        elif name == "date":
            year = parse_year(value)
            if year is not None:
                common["year"] = year

        self._store(common, name, value)

    @staticmethod
    def _store(common: CommonFields, name: str, value: Any) -> None:
        if name == "artist" or name in MULTIPLE_FIELDS:
            common.setdefault(name, []).append(value)
        else:
            common[name] = value
