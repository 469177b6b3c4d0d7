# Where: musicmeta.shared.__init__
# What: Provide a concise import surface for shared models, errors and ports.
# Why: Encourage consistent reuse of shared types across features.

"""Shared cross-cutting types exposed at the package level."""

from .errors import (
    MusicMetadataError,
    ParserLoadError,
    UnmappedTagFormatError,
    UnsupportedFormatError,
)
from .models import (
    AudioFormat,
    AudioMetadata,
    CommonTags,
    NativeAudioMetadata,
    NativeTags,
    Picture,
    Rating,
    Tag,
    TrackNo,
)
from .options import ParseOptions, ParserLoader
from .ports import TokenParser, Tokenizer
from .tag_types import TAG_PRIORITY, TagType

__all__ = [
    "AudioFormat",
    "AudioMetadata",
    "CommonTags",
    "MusicMetadataError",
    "NativeAudioMetadata",
    "NativeTags",
    "ParseOptions",
    "ParserLoadError",
    "ParserLoader",
    "Picture",
    "Rating",
    "TAG_PRIORITY",
    "Tag",
    "TagType",
    "TokenParser",
    "Tokenizer",
    "TrackNo",
    "UnmappedTagFormatError",
    "UnsupportedFormatError",
]
