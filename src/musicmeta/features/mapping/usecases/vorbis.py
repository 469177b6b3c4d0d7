"""Vorbis comment mapper (FLAC and Ogg)."""

from __future__ import annotations

from typing import Final
from typing_extensions import override

from musicmeta.shared.models import Rating, Tag
from musicmeta.shared.tag_types import TagType

from ._base_mapper import CommonTagMapper
from ._tag_utils import to_float

__all__ = ["VORBIS_TAG_MAP", "VorbisTagMapper"]

VORBIS_TAG_MAP: Final[dict[str, str]] = {
    "TITLE": "title",
    "ARTIST": "artist",
    "ARTISTS": "artists",
    "ALBUMARTIST": "albumartist",
    "ALBUM": "album",
    "DATE": "date",
    "ORIGINALDATE": "originaldate",
    "ORIGINALYEAR": "originalyear",
    "COMMENT": "comment",
    "TRACKNUMBER": "track",
    "DISCNUMBER": "disk",
    "GENRE": "genre",
    "METADATA_BLOCK_PICTURE": "picture",
    "COMPOSER": "composer",
    "LYRICS": "lyrics",
    "ALBUMSORT": "albumsort",
    "TITLESORT": "titlesort",
    "WORK": "work",
    "ARTISTSORT": "artistsort",
    "ALBUMARTISTSORT": "albumartistsort",
    "COMPOSERSORT": "composersort",
    "LYRICIST": "lyricist",
    "WRITER": "writer",
    "CONDUCTOR": "conductor",
    "REMIXER": "remixer",
    "ARRANGER": "arranger",
    "ENGINEER": "engineer",
    "PRODUCER": "producer",
    "DJMIXER": "djmixer",
    "MIXER": "mixer",
    "LABEL": "label",
    "GROUPING": "grouping",
    "SUBTITLE": "subtitle",
    "DISCSUBTITLE": "discsubtitle",
    "TRACKTOTAL": "totaltracks",
    "TOTALTRACKS": "totaltracks",
    "DISCTOTAL": "totaldiscs",
    "TOTALDISCS": "totaldiscs",
    "COMPILATION": "compilation",
    "RATING": "rating",
    "BPM": "bpm",
    "KEY": "key",
    "MOOD": "mood",
    "MEDIA": "media",
    "CATALOGNUMBER": "catalognumber",
    "RELEASESTATUS": "releasestatus",
    "RELEASETYPE": "releasetype",
    "RELEASECOUNTRY": "releasecountry",
    "SCRIPT": "script",
    "LANGUAGE": "language",
    "COPYRIGHT": "copyright",
    "LICENSE": "license",
    "ENCODEDBY": "encodedby",
    "ENCODERSETTINGS": "encodersettings",
    "BARCODE": "barcode",
    "ISRC": "isrc",
    "ASIN": "asin",
    "PERFORMER": "performer_instrument",
    "NOTES": "notes",
    "ORIGINALALBUM": "originalalbum",
    "ORIGINALARTIST": "originalartist",
    "WEBSITE": "website",
    "MUSICBRAINZ_TRACKID": "musicbrainz_recordingid",
    "MUSICBRAINZ_RELEASETRACKID": "musicbrainz_trackid",
    "MUSICBRAINZ_ALBUMID": "musicbrainz_albumid",
    "MUSICBRAINZ_ARTISTID": "musicbrainz_artistid",
    "MUSICBRAINZ_ALBUMARTISTID": "musicbrainz_albumartistid",
    "MUSICBRAINZ_RELEASEGROUPID": "musicbrainz_releasegroupid",
    "MUSICBRAINZ_WORKID": "musicbrainz_workid",
    "MUSICBRAINZ_TRMID": "musicbrainz_trmid",
    "MUSICBRAINZ_DISCID": "musicbrainz_discid",
    "ACOUSTID_ID": "acoustid_id",
    "ACOUSTID_FINGERPRINT": "acoustid_fingerprint",
    "MUSICIP_PUID": "musicip_puid",
    "FINGERPRINT": "musicip_fingerprint",
    "DISCOGS_RELEASE_ID": "discogs_release_id",
    "REPLAYGAIN_TRACK_GAIN": "replaygain_track_gain",
    "REPLAYGAIN_TRACK_PEAK": "replaygain_track_peak",
}


class VorbisTagMapper(CommonTagMapper):
    """Field names are case-insensitive; ``RATING:<email>`` carries the rating's source."""

    def __init__(self) -> None:
        super().__init__((TagType.VORBIS,), VORBIS_TAG_MAP, case_insensitive=True)

    @override
    def post_map(self, tag: Tag) -> Tag | None:
        tag_id, _, source = tag.id.partition(":")
        if tag_id.upper() != "RATING":
            return tag
        value = to_float(tag.value)
        if value is not None and value > 1:
            value /= 100
        return Tag("RATING", Rating(value, source or None))
