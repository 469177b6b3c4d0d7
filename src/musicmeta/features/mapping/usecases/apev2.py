"""APEv2 mapper; item keys are matched case-insensitively."""

from __future__ import annotations

from typing import Final

from musicmeta.shared.tag_types import TagType

from ._base_mapper import CommonTagMapper

__all__ = ["APEV2_TAG_MAP", "APEv2TagMapper"]

APEV2_TAG_MAP: Final[dict[str, str]] = {
    "Title": "title",
    "Artist": "artist",
    "Artists": "artists",
    "Album Artist": "albumartist",
    "Album": "album",
    "Year": "date",
    "Originalyear": "originalyear",
    "Originaldate": "originaldate",
    "Comment": "comment",
    "Track": "track",
    "Disc": "disk",
    "DISCNUMBER": "disk",
    "Genre": "genre",
    "Cover Art (Front)": "picture",
    "Cover Art (Back)": "picture",
    "Composer": "composer",
    "Lyrics": "lyrics",
    "ALBUMSORT": "albumsort",
    "TITLESORT": "titlesort",
    "WORK": "work",
    "ARTISTSORT": "artistsort",
    "ALBUMARTISTSORT": "albumartistsort",
    "COMPOSERSORT": "composersort",
    "Lyricist": "lyricist",
    "Writer": "writer",
    "Conductor": "conductor",
    "MixArtist": "remixer",
    "Arranger": "arranger",
    "Engineer": "engineer",
    "Producer": "producer",
    "DJMixer": "djmixer",
    "Mixer": "mixer",
    "Label": "label",
    "Grouping": "grouping",
    "Subtitle": "subtitle",
    "DiscSubtitle": "discsubtitle",
    "Compilation": "compilation",
    "BPM": "bpm",
    "Key": "key",
    "Mood": "mood",
    "Media": "media",
    "CatalogNumber": "catalognumber",
    "MUSICBRAINZ_ALBUMSTATUS": "releasestatus",
    "MUSICBRAINZ_ALBUMTYPE": "releasetype",
    "RELEASECOUNTRY": "releasecountry",
    "Script": "script",
    "Language": "language",
    "Copyright": "copyright",
    "LICENSE": "license",
    "EncodedBy": "encodedby",
    "EncoderSettings": "encodersettings",
    "Barcode": "barcode",
    "ISRC": "isrc",
    "ASIN": "asin",
    "Notes": "notes",
    "musicbrainz_trackid": "musicbrainz_recordingid",
    "musicbrainz_releasetrackid": "musicbrainz_trackid",
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
    "Weblink": "website",
    "DISCOGS_RELEASE_ID": "discogs_release_id",
    "REPLAYGAIN_TRACK_GAIN": "replaygain_track_gain",
    "REPLAYGAIN_TRACK_PEAK": "replaygain_track_peak",
}


class APEv2TagMapper(CommonTagMapper):
    def __init__(self) -> None:
        super().__init__((TagType.APEV2,), APEV2_TAG_MAP, case_insensitive=True)
