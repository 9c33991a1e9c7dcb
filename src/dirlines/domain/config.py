from __future__ import annotations

"""
Streamer Configuration Model.

Immutable tuning knobs for the directory streamer. Defaults reproduce a
UTF-8 stream read through an 8 KiB buffer.
"""

import codecs
from dataclasses import dataclass

DEFAULT_BUFFER_SIZE = 8 * 1024
DEFAULT_ENCODING = "utf-8"
MIN_BUFFER_SIZE = 2


@dataclass(frozen=True)
class StreamerConfig:
    """
    Immutable settings for a DirectoryLinesStreamer.

    Attributes:
        buffer_size: Read buffer size in bytes for each opened file.
        encoding: Text codec used to decode lines; invalid sequences are
                  always replaced with U+FFFD. Must encode newline as the
                  single byte 0x0A (rules out UTF-16 and UTF-32).
    """
    buffer_size: int = DEFAULT_BUFFER_SIZE
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if isinstance(self.buffer_size, bool) or not isinstance(self.buffer_size, int):
            raise ValueError(f"buffer_size must be an int, got {self.buffer_size!r}")
        # buffering=1 requests line buffering, which binary mode ignores
        if self.buffer_size < MIN_BUFFER_SIZE:
            raise ValueError(f"buffer_size must be >= {MIN_BUFFER_SIZE}, got {self.buffer_size}")
        try:
            codecs.lookup(self.encoding)
            newline = "\n".encode(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {self.encoding!r}") from e
        # Lines are split on the raw newline byte
        if newline != b"\n":
            raise ValueError(
                f"Encoding {self.encoding!r} does not encode newline as a single b'\\n' byte"
            )
