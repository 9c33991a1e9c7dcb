from __future__ import annotations

"""
Resilient Line Reading Component.

Reads one newline-terminated chunk at a time from a buffered binary
handle. Bytes consumed before a read failure are kept, so a fault in the
middle of a line yields a truncated line rather than a lost one.
"""

import logging
from typing import BinaryIO, List, Optional

from dirlines.core.decoding import decode_line
from dirlines.domain.config import DEFAULT_ENCODING
from dirlines.domain.models import StreamIssue

logger = logging.getLogger(__name__)

NEWLINE = b"\n"

# -----------------------------------------------------------------------------
# RAW READ OPERATIONS
# -----------------------------------------------------------------------------

def read_until(handle: BinaryIO, delimiter: bytes, buf: bytearray) -> int:
    """
    Append bytes to buf up to and including the next delimiter.

    Works against the handle's internal buffer via peek(), so each pass
    consumes exactly what it appends. Stops at end of data when no
    delimiter is found.

    Args:
        handle: Buffered binary reader exposing peek() and read().
        delimiter: Single-byte terminator.
        buf: Destination buffer; keeps partial data if an error is raised.

    Returns:
        int: Number of bytes appended; 0 means end of data.

    Raises:
        OSError: Propagated from the handle. buf holds whatever was read.
    """
    read = 0
    while True:
        available = handle.peek(1)
        if not available:
            return read

        idx = available.find(delimiter)
        if idx >= 0:
            chunk = handle.read(idx + 1)
            buf += chunk
            return read + len(chunk)

        chunk = handle.read(len(available))
        buf += chunk
        read += len(chunk)


def read_line(
        handle: BinaryIO,
        path: str,
        line_id: int,
        *,
        encoding: str = DEFAULT_ENCODING,
        issues: Optional[List[StreamIssue]] = None,
) -> Optional[str]:
    """
    Read and decode the next line of one file.

    A read error is logged with its path and line number and the bytes
    captured before it are returned as the line. Only a clean zero-byte
    read means end of file.

    Args:
        handle: Buffered binary reader.
        path: Path of the file, for diagnostics.
        line_id: Current line counter, for diagnostics.
        encoding: Text codec for lossy decoding.
        issues: Optional list receiving a StreamIssue on read failure.

    Returns:
        Optional[str]: The decoded line, or None at end of file.
    """
    buf = bytearray()
    try:
        if read_until(handle, NEWLINE, buf) == 0:
            return None
    except OSError as e:
        logger.error("Error reading line %d of %r: %s", line_id, path, e)
        if issues is not None:
            issues.append(StreamIssue(path=path, error=str(e), line_id=line_id))

    return decode_line(buf, encoding)
