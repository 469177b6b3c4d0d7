"""Where: src/musicmeta/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without repeating file I/O.
"""

from __future__ import annotations

from musicmeta.config.config import HTTP_TIMEOUT_DEFAULT, Config

# Byte signature sniffing ----------------------------------------------------

# Long enough for every signature the sniffer checks (MP4 ``ftyp`` boxes and
# Ogg codec headers sit a few pages in).
SNIFF_BUFFER_SIZE: int = 4100

# Size of the trailing ID3v1 block.
ID3V1_TAG_SIZE: int = 128


def http_timeout() -> float:
    """Timeout for remote sources; non-positive values fall back to the default."""

    configured = Config.load().http_timeout
    if isinstance(configured, (int, float)) and configured > 0:
        return float(configured)
    return HTTP_TIMEOUT_DEFAULT


__all__ = ["SNIFF_BUFFER_SIZE", "ID3V1_TAG_SIZE", "http_timeout"]
