from __future__ import annotations

"""
Lossy Line Decoding.

Converts raw line bytes to text with the 'replace' error strategy, so any
invalid byte sequence becomes U+FFFD instead of raising. Independent of
file access.
"""

from dirlines.domain.config import DEFAULT_ENCODING

REPLACEMENT_CHARACTER = "\ufffd"


def decode_line(raw: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Decode one line of bytes, substituting invalid sequences.

    Args:
        raw: Line bytes, trailing newline included if present.
        encoding: Text codec to decode with.

    Returns:
        str: Decoded text. Never raises on malformed input.
    """
    return bytes(raw).decode(encoding, errors="replace")
