"""Parser identifiers and lookup tables."""

from .mime_type import parse_mime_type
from .parser_ids import (
    EXTENSION_MAP,
    MIME_TYPE_MAP,
    ParserId,
    get_parser_id_for_extension,
    get_parser_id_for_mime_type,
)

__all__ = [
    "EXTENSION_MAP",
    "MIME_TYPE_MAP",
    "ParserId",
    "get_parser_id_for_extension",
    "get_parser_id_for_mime_type",
    "parse_mime_type",
]
