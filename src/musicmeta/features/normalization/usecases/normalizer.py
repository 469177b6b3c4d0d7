"""
Summary: Turn a parser's native tag collection into one normalized metadata record.
Why: Tag formats are visited in a fixed priority so the same input always yields the same record.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, final

from musicmeta.features.dispatch import ParserFactory
from musicmeta.features.mapping import CombinedTagMapper, MULTIPLE_FIELDS
from musicmeta.features.mapping.usecases import CommonFields
from musicmeta.platform.logging import logger
from musicmeta.shared.errors import UnmappedTagFormatError
from musicmeta.shared.models import (
    AudioMetadata,
    CommonTags,
    NativeAudioMetadata,
    NativeTags,
    TrackNo,
)
from musicmeta.shared.options import ParseOptions
from musicmeta.shared.ports import Tokenizer
from musicmeta.shared.tag_types import TAG_PRIORITY, TagType

from .tag_utils import join_artists

__all__ = [
    "MusicMetadataParser",
    "default_common",
    "is_unset",
    "merge_missing",
    "reconcile_artists",
]


def default_common() -> CommonFields:
    """Fresh accumulator: ``track`` and ``disk`` present but empty."""
    return {"track": TrackNo(), "disk": TrackNo()}


def is_unset(value: Any) -> bool:
    """``None``, a blank string, an empty list and an empty ``TrackNo`` count as not populated."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, TrackNo):
        return value.is_empty()
    if isinstance(value, list):
        return not value
    return False


def merge_missing(target: CommonFields, fragment: Mapping[str, Any]) -> None:
    """Copy each populated field of ``fragment`` into ``target`` where ``target`` lacks it."""
    for name, value in fragment.items():
        if is_unset(value):
            continue
        if is_unset(target.get(name)):
            target[name] = value


def reconcile_artists(fields: CommonFields) -> None:
    """Derive ``artist`` (a display string) and ``artists`` (a list) from each other.

    Mappers accumulate ``artist`` as a list. An explicit ``artists`` list wins
    and ``artist`` becomes the first explicit artist, or the joined list when
    there is none. Otherwise the accumulated ``artist`` list is exposed as
    ``artists`` and ``artist`` keeps its first entry.
    """
    explicit: list[str] = fields.get("artist") or []
    artists: list[str] = fields.get("artists") or []

    if artists:
        fields["artist"] = explicit[0] if explicit else join_artists(artists)
    elif explicit:
        fields["artists"] = list(explicit)
        fields["artist"] = explicit[0]
    else:
        fields.pop("artist", None)


def _coerce_tag_type(key: TagType | str) -> TagType:
    try:
        return TagType(key)
    except ValueError as exc:
        raise UnmappedTagFormatError(str(key)) from exc


def _build_common(fields: CommonFields) -> CommonTags:
    values: dict[str, Any] = {}
    for name, value in fields.items():
        if is_unset(value) and name not in ("track", "disk"):
            continue
        values[name] = list(value) if name in MULTIPLE_FIELDS else value
    return CommonTags(**values)


@final
class MusicMetadataParser:
    """Normalization engine: priority walk, optional merge, artist reconciliation."""

    def __init__(self, tag_mapper: CombinedTagMapper | None = None) -> None:
        self.tag_mapper = tag_mapper or CombinedTagMapper()

    def parse_native_tags(
        self,
        native_data: NativeAudioMetadata,
        include_native: bool = False,
        merge_tag_headers: bool = False,
    ) -> AudioMetadata:
        """Map the native collection onto the common schema.

        Args:
            native_data: Format descriptor and native tags from a parser.
            include_native: Attach the native tags to the result.
            merge_tag_headers: Keep visiting lower priority formats to fill missing fields.

        Returns:
            AudioMetadata: Format descriptor with ``tag_types`` recorded and the common record.

        Raises:
            UnmappedTagFormatError: If a tag format has no registered mapper.
        """
        native: NativeTags = {
            _coerce_tag_type(key): tags for key, tags in native_data.native.items()
        }
        tag_types = list(native_data.format.tag_types)
        tag_types.extend(tag_type for tag_type in native if tag_type not in tag_types)
        audio_format = dataclasses.replace(native_data.format, tag_types=tag_types)

        fields = default_common()
        for tag_type in TAG_PRIORITY:
            tags = native.get(tag_type)
            if tags is None:
                continue
            if not tags:
                logger.debug("Ignoring empty tag header %s", tag_type)
                continue

            fragment = default_common()
            for tag in tags:
                self.tag_mapper.set_generic_tag(fragment, tag_type, tag)
            merge_missing(fields, fragment)
            logger.debug("Mapped %d %s tags", len(tags), tag_type)

            if not merge_tag_headers:
                break

        reconcile_artists(fields)
        return AudioMetadata(
            format=audio_format,
            common=_build_common(fields),
            native=native if include_native else None,
        )

    async def parse(self, tokenizer: Tokenizer, options: ParseOptions | None = None) -> AudioMetadata:
        """Dispatch ``tokenizer`` to its parser and normalize the result."""
        opts = options or ParseOptions()
        if not tokenizer.file_size and opts.file_size:
            tokenizer.file_size = opts.file_size

        native_data = await ParserFactory.parse(tokenizer, opts)
        return self.parse_native_tags(native_data, opts.native, opts.merge_tag_headers)
