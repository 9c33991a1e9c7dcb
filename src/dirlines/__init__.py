from __future__ import annotations

"""
dirlines: stream every line of every file in a directory, in natural order.

    >>> from dirlines import DirectoryLinesStreamer
    >>> for line in DirectoryLinesStreamer("/var/log/rotated"):
    ...     handle(line)
"""

import logging

from .core.decoding import decode_line
from .core.ordering import sort_paths
from .core.streamer import DirectoryLinesStreamer
from .domain.config import StreamerConfig
from .domain.errors import (
    DirectoryIOError,
    DirectoryLinesStreamerError,
    DirectoryNotFoundError,
    EmptyDirectoryError,
)
from .domain.models import StreamIssue

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DirectoryLinesStreamer",
    "DirectoryLinesStreamerError",
    "DirectoryNotFoundError",
    "EmptyDirectoryError",
    "DirectoryIOError",
    "StreamerConfig",
    "StreamIssue",
    "decode_line",
    "sort_paths",
]
