"""iTunes (MP4 ``ilst``) mapper."""

from __future__ import annotations

from typing import Final
from typing_extensions import override

from musicmeta.shared.models import Rating, Tag
from musicmeta.shared.tag_types import TagType

from ._base_mapper import CommonTagMapper
from ._tag_utils import to_float

__all__ = ["MP4_TAG_MAP", "MP4TagMapper"]

_ITUNES = "----:com.apple.iTunes:"

# Free-form atoms under the ``com.apple.iTunes`` mean, keyed by name.
_FREEFORM: Final[dict[str, str]] = {
    "Band": "albumartist",
    "ARTISTS": "artists",
    "LYRICIST": "lyricist",
    "CONDUCTOR": "conductor",
    "REMIXER": "remixer",
    "ENGINEER": "engineer",
    "PRODUCER": "producer",
    "DJMIXER": "djmixer",
    "MIXER": "mixer",
    "LABEL": "label",
    "SUBTITLE": "subtitle",
    "DISCSUBTITLE": "discsubtitle",
    "MOOD": "mood",
    "MEDIA": "media",
    "CATALOGNUMBER": "catalognumber",
    "MusicBrainz Album Status": "releasestatus",
    "MusicBrainz Album Type": "releasetype",
    "MusicBrainz Album Release Country": "releasecountry",
    "SCRIPT": "script",
    "LANGUAGE": "language",
    "LICENSE": "license",
    "BARCODE": "barcode",
    "ISRC": "isrc",
    "ASIN": "asin",
    "NOTES": "notes",
    "ORIGINALDATE": "originaldate",
    "ORIGINALYEAR": "originalyear",
    "initialkey": "key",
    "MusicBrainz Track Id": "musicbrainz_recordingid",
    "MusicBrainz Release Track Id": "musicbrainz_trackid",
    "MusicBrainz Album Id": "musicbrainz_albumid",
    "MusicBrainz Artist Id": "musicbrainz_artistid",
    "MusicBrainz Album Artist Id": "musicbrainz_albumartistid",
    "MusicBrainz Release Group Id": "musicbrainz_releasegroupid",
    "MusicBrainz Work Id": "musicbrainz_workid",
    "MusicBrainz TRM Id": "musicbrainz_trmid",
    "MusicBrainz Disc Id": "musicbrainz_discid",
    "Acoustid Id": "acoustid_id",
    "Acoustid Fingerprint": "acoustid_fingerprint",
    "MusicIP PUID": "musicip_puid",
    "fingerprint": "musicip_fingerprint",
    "DISCOGS_RELEASE_ID": "discogs_release_id",
    "replaygain_track_gain": "replaygain_track_gain",
    "replaygain_track_peak": "replaygain_track_peak",
}

MP4_TAG_MAP: Final[dict[str, str]] = {
    "\xa9nam": "title",
    "\xa9ART": "artist",
    "aART": "albumartist",
    "\xa9alb": "album",
    "\xa9day": "date",
    "\xa9cmt": "comment",
    "\xa9com": "comment",
    "trkn": "track",
    "disk": "disk",
    "\xa9gen": "genre",
    "covr": "picture",
    "\xa9wrt": "composer",
    "\xa9lyr": "lyrics",
    "soal": "albumsort",
    "sonm": "titlesort",
    "soar": "artistsort",
    "soaa": "albumartistsort",
    "soco": "composersort",
    "\xa9grp": "grouping",
    "\xa9wrk": "work",
    "cpil": "compilation",
    "tmpo": "bpm",
    "tvsh": "show",
    "sosn": "showsort",
    "pcst": "podcast",
    "purl": "podcasturl",
    "cprt": "copyright",
    "\xa9cpy": "copyright",
    "\xa9too": "encodedby",
    "pgap": "gapless",
    "rate": "rating",
    **{f"{_ITUNES}{name}": common for name, common in _FREEFORM.items()},
}


class MP4TagMapper(CommonTagMapper):
    def __init__(self) -> None:
        super().__init__((TagType.ITUNES,), MP4_TAG_MAP)

    @override
    def post_map(self, tag: Tag) -> Tag | None:
        if tag.id == "rate":
            # Stored as text on a 0..100 scale.
            value = to_float(tag.value)
            return Tag(tag.id, Rating(value / 100 if value is not None else None))
        return tag
