"""ASF (Windows Media) attribute mapper."""

from __future__ import annotations

from typing import Final
from typing_extensions import override

from musicmeta.shared.models import Rating, Tag
from musicmeta.shared.tag_types import TagType

from ._base_mapper import CommonTagMapper
from ._tag_utils import to_float

__all__ = ["ASF_TAG_MAP", "AsfTagMapper"]

ASF_TAG_MAP: Final[dict[str, str]] = {
    "Title": "title",
    "Author": "artist",
    "WM/ARTISTS": "artists",
    "WM/AlbumArtist": "albumartist",
    "WM/AlbumTitle": "album",
    "WM/Year": "date",
    "WM/OriginalReleaseTime": "originaldate",
    "WM/OriginalReleaseYear": "originalyear",
    "Description": "comment",
    "WM/TrackNumber": "track",
    "WM/PartOfSet": "disk",
    "WM/Genre": "genre",
    "WM/Composer": "composer",
    "WM/Lyrics": "lyrics",
    "WM/AlbumSortOrder": "albumsort",
    "WM/TitleSortOrder": "titlesort",
    "WM/ArtistSortOrder": "artistsort",
    "WM/AlbumArtistSortOrder": "albumartistsort",
    "WM/ComposerSortOrder": "composersort",
    "WM/Writer": "lyricist",
    "WM/Conductor": "conductor",
    "WM/ModifiedBy": "remixer",
    "WM/Engineer": "engineer",
    "WM/Producer": "producer",
    "WM/DJMixer": "djmixer",
    "WM/Mixer": "mixer",
    "WM/Publisher": "label",
    "WM/ContentGroupDescription": "grouping",
    "WM/SubTitle": "subtitle",
    "WM/SetSubTitle": "discsubtitle",
    "WM/IsCompilation": "compilation",
    "WM/SharedUserRating": "rating",
    "WM/BeatsPerMinute": "bpm",
    "WM/InitialKey": "key",
    "WM/Mood": "mood",
    "WM/Media": "media",
    "WM/CatalogNo": "catalognumber",
    "MusicBrainz/Album Status": "releasestatus",
    "MusicBrainz/Album Type": "releasetype",
    "MusicBrainz/Album Release Country": "releasecountry",
    "WM/Script": "script",
    "WM/Language": "language",
    "Copyright": "copyright",
    "LICENSE": "license",
    "WM/EncodedBy": "encodedby",
    "WM/EncodingSettings": "encodersettings",
    "WM/Barcode": "barcode",
    "WM/ISRC": "isrc",
    "ASIN": "asin",
    "WM/Work": "work",
    "WM/AuthorURL": "website",
    "WM/Picture": "picture",
    "WM/OriginalAlbumTitle": "originalalbum",
    "WM/OriginalArtist": "originalartist",
    "MusicBrainz/Track Id": "musicbrainz_recordingid",
    "MusicBrainz/Release Track Id": "musicbrainz_trackid",
    "MusicBrainz/Album Id": "musicbrainz_albumid",
    "MusicBrainz/Artist Id": "musicbrainz_artistid",
    "MusicBrainz/Album Artist Id": "musicbrainz_albumartistid",
    "MusicBrainz/Release Group Id": "musicbrainz_releasegroupid",
    "MusicBrainz/Work Id": "musicbrainz_workid",
    "MusicBrainz/TRM Id": "musicbrainz_trmid",
    "MusicBrainz/Disc Id": "musicbrainz_discid",
    "Acoustid/Id": "acoustid_id",
    "Acoustid/Fingerprint": "acoustid_fingerprint",
    "MusicIP/PUID": "musicip_puid",
    "MusicBrainz/Discogs Release Id": "discogs_release_id",
    "replaygain_track_gain": "replaygain_track_gain",
    "replaygain_track_peak": "replaygain_track_peak",
}


class AsfTagMapper(CommonTagMapper):
    def __init__(self) -> None:
        super().__init__((TagType.ASF,), ASF_TAG_MAP)

    @override
    def post_map(self, tag: Tag) -> Tag | None:
        if tag.id == "WM/SharedUserRating":
            # 0..99 scale.
            value = to_float(tag.value)
            return Tag(tag.id, Rating(value / 99 if value is not None else None))
        return tag
