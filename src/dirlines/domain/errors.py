from __future__ import annotations

"""
Streamer Error Hierarchy.

Defines the failure kinds that can surface while building a directory
line stream. Every error is raised at construction time; once a streamer
exists, runtime faults are absorbed and reported through logging.
"""

import os
from typing import Any, Union

PathInput = Union[str, os.PathLike]


class DirectoryLinesStreamerError(Exception):
    """Base class for every construction failure of a directory streamer."""

    def __init__(self, path: Any, message: str) -> None:
        super().__init__(message)
        self.path = path


class DirectoryNotFoundError(DirectoryLinesStreamerError):
    """
    The target path does not exist.

    Paths that exist but are not directories are not reported here; they
    fail later while listing and surface as DirectoryIOError.
    """

    def __init__(self, path: PathInput) -> None:
        super().__init__(path, f"directory {os.fspath(path)!r} does not exist")


class EmptyDirectoryError(DirectoryLinesStreamerError):
    """The target directory has no listable entries."""

    def __init__(self, path: PathInput) -> None:
        super().__init__(path, f"directory {os.fspath(path)!r} is empty")


class DirectoryIOError(DirectoryLinesStreamerError, OSError):
    """
    Underlying I/O failure while listing the directory or opening its first file.

    Attributes:
        path: Path whose operation failed.
        cause: Original OSError, also chained as __cause__.
    """

    def __init__(self, path: PathInput, cause: OSError) -> None:
        super().__init__(path, str(cause))
        self.cause = cause
        self.errno = cause.errno
        self.strerror = cause.strerror
        self.filename = cause.filename
