"""ID3v2 mappers.

Where: src/musicmeta/features/mapping/usecases/id3v2.py
What: Tables for ID3v2.2 (three letter frames) and ID3v2.3/2.4 (four letter frames), plus
      the rewrites of structured frames (comments, ratings, unique file ids, private frames).
Why: Picard's frame conventions define where MusicBrainz data lives inside ID3v2.
"""

from __future__ import annotations

from typing import Any, Final
from typing_extensions import override

from musicmeta.shared.models import Rating, Tag
from musicmeta.shared.tag_types import TagType

from ._base_mapper import CommonTagMapper

__all__ = [
    "ID3V22_TAG_MAP",
    "ID3V24_TAG_MAP",
    "ID3v22TagMapper",
    "ID3v24TagMapper",
]

# User defined text frames written by Picard, keyed by description.
_USER_TEXT: Final[dict[str, str]] = {
    "Artists": "artists",
    "ARTISTS": "artists",
    "Writer": "writer",
    "CATALOGNUMBER": "catalognumber",
    "MusicBrainz Album Status": "releasestatus",
    "MusicBrainz Album Type": "releasetype",
    "MusicBrainz Album Release Country": "releasecountry",
    "RELEASECOUNTRY": "releasecountry",
    "SCRIPT": "script",
    "BARCODE": "barcode",
    "ASIN": "asin",
    "originalyear": "originalyear",
    "ORIGINALYEAR": "originalyear",
    "MusicBrainz Release Track Id": "musicbrainz_trackid",
    "MusicBrainz Album Id": "musicbrainz_albumid",
    "MusicBrainz Artist Id": "musicbrainz_artistid",
    "MusicBrainz Album Artist Id": "musicbrainz_albumartistid",
    "MusicBrainz Release Group Id": "musicbrainz_releasegroupid",
    "MusicBrainz Work Id": "musicbrainz_workid",
    "MusicBrainz TRM Id": "musicbrainz_trmid",
    "MusicBrainz Disc Id": "musicbrainz_discid",
    "Acoustid Id": "acoustid_id",
    "ACOUSTID_ID": "acoustid_id",
    "Acoustid Fingerprint": "acoustid_fingerprint",
    "MusicIP PUID": "musicip_puid",
    "MusicMagic Fingerprint": "musicip_fingerprint",
    "DISCOGS_RELEASE_ID": "discogs_release_id",
    "replaygain_track_gain": "replaygain_track_gain",
    "REPLAYGAIN_TRACK_GAIN": "replaygain_track_gain",
    "replaygain_track_peak": "replaygain_track_peak",
    "REPLAYGAIN_TRACK_PEAK": "replaygain_track_peak",
    "LICENSE": "license",
    "NOTES": "notes",
}

# Involved people lists (TIPL in 2.4, IPLS in 2.3, IPL in 2.2), keyed by role.
_INVOLVED_PEOPLE: Final[dict[str, str]] = {
    "arranger": "arranger",
    "engineer": "engineer",
    "producer": "producer",
    "DJ-mix": "djmixer",
    "mix": "mixer",
}

_MUSICBRAINZ_UFID_OWNER = "http://musicbrainz.org"

ID3V24_TAG_MAP: Final[dict[str, str]] = {
    # ID3v2.3
    "TIT2": "title",
    "TPE1": "artist",
    "TPE2": "albumartist",
    "TALB": "album",
    "TDRV": "date",
    "TYER": "year",
    "TORY": "originalyear",
    "TPOS": "disk",
    "TCON": "genre",
    "APIC": "picture",
    "TCOM": "composer",
    "USLT": "lyrics",
    "TSOA": "albumsort",
    "TSOT": "titlesort",
    "TOAL": "originalalbum",
    "TSOP": "artistsort",
    "TSO2": "albumartistsort",
    "TSOC": "composersort",
    "TEXT": "lyricist",
    "TPE3": "conductor",
    "TPE4": "remixer",
    "TPUB": "label",
    "TIT1": "grouping",
    "TIT3": "subtitle",
    "TRCK": "track",
    "TCMP": "compilation",
    "POPM": "rating",
    "TBPM": "bpm",
    "TMED": "media",
    "TLAN": "language",
    "TCOP": "copyright",
    "WCOP": "license",
    "TENC": "encodedby",
    "TSSE": "encodersettings",
    "TSRC": "isrc",
    "WOAR": "website",
    "COMM": "comment",
    "TOPE": "originalartist",
    "TKEY": "key",
    f"UFID:{_MUSICBRAINZ_UFID_OWNER}": "musicbrainz_recordingid",
    "PRIV:AverageLevel": "average_level",
    "PRIV:PeakValue": "peak_level",
    # ID3v2.4
    "TDRC": "date",
    "TDOR": "originaldate",
    "TMOO": "mood",
    "TSST": "discsubtitle",
    "TMCL": "performer_instrument",
    "PCST": "podcast",
    "WFED": "podcasturl",
    "TIT0": "work",
    **{f"TXXX:{desc}": name for desc, name in _USER_TEXT.items()},
    **{f"IPLS:{role}": name for role, name in _INVOLVED_PEOPLE.items()},
    **{f"TIPL:{role}": name for role, name in _INVOLVED_PEOPLE.items()},
}

ID3V22_TAG_MAP: Final[dict[str, str]] = {
    "TT1": "grouping",
    "TT2": "title",
    "TT3": "subtitle",
    "TP1": "artist",
    "TP2": "albumartist",
    "TP3": "conductor",
    "TP4": "remixer",
    "TCM": "composer",
    "TXT": "lyricist",
    "TLA": "language",
    "TCO": "genre",
    "TAL": "album",
    "TPA": "disk",
    "TRK": "track",
    "TRC": "isrc",
    "TYE": "year",
    "TOR": "originalyear",
    "TOA": "originalartist",
    "TOT": "originalalbum",
    "TBP": "bpm",
    "TMT": "media",
    "TPB": "label",
    "TEN": "encodedby",
    "TSS": "encodersettings",
    "TCR": "copyright",
    "TCP": "compilation",
    "TST": "titlesort",
    "TSA": "albumsort",
    "TSP": "artistsort",
    "TS2": "albumartistsort",
    "TSC": "composersort",
    "TKE": "key",
    "WAR": "website",
    "COM": "comment",
    "PIC": "picture",
    "ULT": "lyrics",
    "POP": "rating",
    f"UFI:{_MUSICBRAINZ_UFID_OWNER}": "musicbrainz_recordingid",
    **{f"TXX:{desc}": name for desc, name in _USER_TEXT.items()},
    **{f"IPL:{role}": name for role, name in _INVOLVED_PEOPLE.items()},
}

_TEXT_WRAPPERS = frozenset({"COMM", "COM", "USLT", "ULT"})
_POPULARIMETERS = frozenset({"POPM", "POP"})
_UNIQUE_FILE_IDS = frozenset({"UFID", "UFI"})
_LEVELS = frozenset({"AverageLevel", "PeakValue"})


class _ID3v2TagMapper(CommonTagMapper):
    """Rewrites structured frame values into plain canonical values."""

    @override
    def post_map(self, tag: Tag) -> Tag | None:
        frame_id, _, qualifier = tag.id.partition(":")
        value: Any = tag.value

        if frame_id in _TEXT_WRAPPERS and isinstance(value, dict):
            return Tag(frame_id, value["text"])
        if frame_id in _POPULARIMETERS and isinstance(value, dict):
            return Tag(frame_id, Rating(value["rating"] / 255, value.get("email") or None))
        if frame_id in _UNIQUE_FILE_IDS and isinstance(value, dict):
            identifier = value["identifier"].decode("ascii", "replace")
            return Tag(f"{frame_id}:{value['owner']}", identifier)
        if frame_id == "PRIV" and isinstance(value, dict):
            owner, data = value["owner"], value["data"]
            if owner in _LEVELS and len(data) >= 4:
                return Tag(f"PRIV:{owner}", int.from_bytes(data[:4], "little"))
            return None
        if frame_id == "TMCL" and qualifier:
            return Tag(frame_id, f"{value} ({qualifier})")
        return tag


class ID3v24TagMapper(_ID3v2TagMapper):
    """Mapper for ID3v2.3 and ID3v2.4; both use four letter frame ids."""

    def __init__(self) -> None:
        super().__init__((TagType.ID3V23, TagType.ID3V24), ID3V24_TAG_MAP)


class ID3v22TagMapper(_ID3v2TagMapper):
    """Mapper for ID3v2.2 three letter frame ids."""

    def __init__(self) -> None:
        super().__init__((TagType.ID3V22,), ID3V22_TAG_MAP)
