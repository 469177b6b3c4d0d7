# Where: musicmeta.features.dispatch.__init__
# What: Expose parser dispatch and its lookup tables.
# Why: Provide a cohesive import surface for entry points and tests.

from .domain import ParserId, get_parser_id_for_extension, get_parser_id_for_mime_type
from .usecases import ParserFactory, guess_mime_type, load_parser

__all__ = [
    "ParserFactory",
    "ParserId",
    "get_parser_id_for_extension",
    "get_parser_id_for_mime_type",
    "guess_mime_type",
    "load_parser",
]
