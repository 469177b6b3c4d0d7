# Where: musicmeta.shared.models
# What: Dataclasses for native tags, the format descriptor and the common tag record.
# Why: Give parsers, mappers and the normalizer one shared representation.

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from .tag_types import TagType


@dataclass(slots=True, frozen=True)
class Tag:
    """A single native tag: identifier and value in the container's own vocabulary."""

    id: str
    value: Any


@dataclass(slots=True, frozen=True)
class Picture:
    """Attached picture, typically used for cover art."""

    format: str
    data: bytes = field(repr=False)
    description: str | None = None
    type: str | None = None


@dataclass(slots=True, frozen=True)
class Rating:
    """Rating normalized to the range [0, 1], optionally with its source (e.g. an e-mail)."""

    rating: float | None
    source: str | None = None


@dataclass(slots=True, frozen=True)
class TrackNo:
    """Position within a set, used for both track and disk numbering."""

    no: int | None = None
    of: int | None = None

    def is_empty(self) -> bool:
        return self.no is None and self.of is None


@dataclass(slots=True)
class AudioFormat:
    """Audio container and codec facts supplied by the format parser."""

    data_format: str | None = None
    tag_types: list[TagType] = field(default_factory=list)
    duration: float | None = None
    bitrate: int | None = None
    sample_rate: int | None = None
    bits_per_sample: int | None = None
    encoder: str | None = None
    codec_profile: str | None = None
    lossless: bool | None = None
    number_of_channels: int | None = None
    number_of_samples: int | None = None
    audio_md5: bytes | None = field(default=None, repr=False)


NativeTags = dict[TagType, list[Tag]]


@dataclass(slots=True)
class NativeAudioMetadata:
    """Output of a format parser: format descriptor plus native tags grouped by tag format."""

    format: AudioFormat
    native: NativeTags = field(default_factory=dict)


def _single() -> Any:
    return field(default=None, metadata={"multiple": False})


def _multi() -> Any:
    return field(default=None, metadata={"multiple": True})


@dataclass(slots=True, frozen=True)
class CommonTags:
    """Format independent tag record.

    ``track`` and ``disk`` are always present; every other field stays ``None``
    unless some native tag populated it. Fields flagged ``multiple`` hold lists.
    """

    track: TrackNo = field(default_factory=TrackNo, metadata={"multiple": False})
    disk: TrackNo = field(default_factory=TrackNo, metadata={"multiple": False})
    year: int | None = _single()
    title: str | None = _single()
    artist: str | None = _single()
    artists: list[str] | None = _multi()
    albumartist: str | None = _single()
    album: str | None = _single()
    date: str | None = _single()
    originaldate: str | None = _single()
    originalyear: int | None = _single()
    comment: list[str] | None = _multi()
    genre: list[str] | None = _multi()
    picture: list[Picture] | None = _multi()
    composer: list[str] | None = _multi()
    lyrics: list[str] | None = _multi()
    albumsort: str | None = _single()
    titlesort: str | None = _single()
    work: str | None = _single()
    artistsort: str | None = _single()
    albumartistsort: str | None = _single()
    composersort: list[str] | None = _multi()
    lyricist: list[str] | None = _multi()
    writer: list[str] | None = _multi()
    conductor: list[str] | None = _multi()
    remixer: list[str] | None = _multi()
    arranger: list[str] | None = _multi()
    engineer: list[str] | None = _multi()
    producer: list[str] | None = _multi()
    djmixer: list[str] | None = _multi()
    mixer: list[str] | None = _multi()
    technician: list[str] | None = _multi()
    label: list[str] | None = _multi()
    grouping: list[str] | None = _multi()
    subtitle: list[str] | None = _multi()
    discsubtitle: list[str] | None = _multi()
    totaltracks: str | None = _single()
    totaldiscs: str | None = _single()
    compilation: bool | None = _single()
    rating: list[Rating] | None = _multi()
    bpm: Any = _single()
    key: str | None = _single()
    mood: str | None = _single()
    media: str | None = _single()
    catalognumber: list[str] | None = _multi()
    show: str | None = _single()
    showsort: str | None = _single()
    podcast: Any = _single()
    podcasturl: str | None = _single()
    releasestatus: str | None = _single()
    releasetype: list[str] | None = _multi()
    releasecountry: str | None = _single()
    script: str | None = _single()
    language: str | None = _single()
    copyright: str | None = _single()
    license: str | None = _single()
    encodedby: str | None = _single()
    encodersettings: str | None = _single()
    gapless: bool | None = _single()
    barcode: str | None = _single()
    isrc: list[str] | None = _multi()
    asin: str | None = _single()
    musicbrainz_recordingid: str | None = _single()
    musicbrainz_trackid: str | None = _single()
    musicbrainz_albumid: str | None = _single()
    musicbrainz_artistid: list[str] | None = _multi()
    musicbrainz_albumartistid: list[str] | None = _multi()
    musicbrainz_releasegroupid: str | None = _single()
    musicbrainz_workid: str | None = _single()
    musicbrainz_trmid: str | None = _single()
    musicbrainz_discid: str | None = _single()
    acoustid_id: str | None = _single()
    acoustid_fingerprint: str | None = _single()
    musicip_puid: str | None = _single()
    musicip_fingerprint: str | None = _single()
    website: str | None = _single()
    performer_instrument: list[str] | None = _multi()
    average_level: float | None = _single()
    peak_level: float | None = _single()
    notes: list[str] | None = _multi()
    originalalbum: str | None = _single()
    originalartist: str | None = _single()
    discogs_release_id: int | None = _single()
    replaygain_track_gain: str | None = _single()
    replaygain_track_peak: float | None = _single()

    def to_dict(self) -> dict[str, Any]:
        """Return populated fields only; ``track`` and ``disk`` are always included."""

        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            result[f.name] = value
        return result


@dataclass(slots=True)
class AudioMetadata:
    """Parse result: format descriptor, optional native tags and the common record."""

    format: AudioFormat
    common: CommonTags
    native: NativeTags | None = None


__all__ = [
    "Tag",
    "Picture",
    "Rating",
    "TrackNo",
    "AudioFormat",
    "NativeTags",
    "NativeAudioMetadata",
    "CommonTags",
    "AudioMetadata",
]
