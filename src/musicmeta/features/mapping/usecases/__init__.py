"""Generic tag mappers and the registry combining them."""

from ._base_mapper import CommonFields, CommonTagMapper, GenericTagMapper
from .apev2 import APEv2TagMapper
from .asf import AsfTagMapper
from .id3v1 import ID3v1TagMapper
from .id3v2 import ID3v22TagMapper, ID3v24TagMapper
from .mp4 import MP4TagMapper
from .registry import CombinedTagMapper, default_mappers
from .riff_info import RiffInfoTagMapper
from .vorbis import VorbisTagMapper

__all__ = [
    "APEv2TagMapper",
    "AsfTagMapper",
    "CombinedTagMapper",
    "CommonFields",
    "CommonTagMapper",
    "GenericTagMapper",
    "ID3v1TagMapper",
    "ID3v22TagMapper",
    "ID3v24TagMapper",
    "MP4TagMapper",
    "RiffInfoTagMapper",
    "VorbisTagMapper",
    "default_mappers",
]
