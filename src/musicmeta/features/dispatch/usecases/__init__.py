"""Use cases for resolving, loading and running format parsers."""

from .parser_factory import ParserFactory
from .parser_loader import BUILTIN_PARSERS, load_builtin_parser, load_parser
from .sniffing import guess_mime_type

__all__ = [
    "BUILTIN_PARSERS",
    "ParserFactory",
    "guess_mime_type",
    "load_builtin_parser",
    "load_parser",
]
