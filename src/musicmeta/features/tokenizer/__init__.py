"""
Summary: Public surface of the tokenizer feature.
Why: Provide a stable import path for entry points and tests.
"""

from .reader_tokenizer import ReaderTokenizer
from .sources import from_buffer, from_file, from_stream, from_url

__all__ = ["ReaderTokenizer", "from_buffer", "from_file", "from_stream", "from_url"]
