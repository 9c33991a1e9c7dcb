from __future__ import annotations

"""
Directory Line Streaming Engine.

Presents every file of a directory as one continuous, lazily read
sequence of text lines. Files are visited in natural path order, one
open handle at a time. Faults after construction (files that fail to
open, lines that fail to read) are logged and absorbed so a long scan of
rotated logs is never cut short by a single bad input.
"""

import logging
import os
from typing import BinaryIO, List, Optional, Tuple

from dirlines.core.ordering import pop_order
from dirlines.core.reader import read_line
from dirlines.domain.config import StreamerConfig
from dirlines.domain.errors import (
    DirectoryIOError,
    DirectoryNotFoundError,
    EmptyDirectoryError,
    PathInput,
)
from dirlines.domain.models import StreamIssue
from dirlines.infra.fs import list_directory_entries, open_buffered, path_exists

logger = logging.getLogger(__name__)


class DirectoryLinesStreamer:
    """
    Iterator over the lines of every file in a directory.

    Construction lists the directory, orders its entries naturally and
    opens the first one. Each next() call reads one line from the current
    file; at end of file the next openable path is opened within the same
    call. Once StopIteration has been raised it is raised on every later
    call.

    Not thread-safe: share an instance across threads only with external
    serialization.

    Attributes:
        issues: StreamIssue records for every fault absorbed so far.
    """

    def __init__(self, directory: PathInput, config: Optional[StreamerConfig] = None) -> None:
        """
        Build a ready-to-stream instance.

        Args:
            directory: Directory whose files are streamed.
            config: Optional tuning; defaults to StreamerConfig().

        Raises:
            DirectoryNotFoundError: Nothing exists at directory.
            EmptyDirectoryError: The directory has no listable entries.
            DirectoryIOError: Listing failed, or the first file failed to open.
        """
        self._config = config or StreamerConfig()

        if not path_exists(directory):
            raise DirectoryNotFoundError(directory)

        try:
            entries = list_directory_entries(directory)
        except OSError as e:
            raise DirectoryIOError(directory, e) from e

        # Reversed so that pop() hands out paths in visitation order
        self._pending: List[str] = pop_order(entries)
        logger.debug("files: %r", self._pending)

        if not self._pending:
            raise EmptyDirectoryError(directory)

        self._directory = directory
        self._current_path: str = self._pending.pop()

        logger.debug("Opening first file: %r", self._current_path)
        try:
            self._handle: Optional[BinaryIO] = open_buffered(
                self._current_path, self._config.buffer_size
            )
        except OSError as e:
            raise DirectoryIOError(self._current_path, e) from e

        self._line_id = 1
        self._exhausted = False
        self.issues: List[StreamIssue] = []

    @classmethod
    def from_dir(
            cls,
            directory: PathInput,
            config: Optional[StreamerConfig] = None,
    ) -> DirectoryLinesStreamer:
        """Alternate constructor; same contract as DirectoryLinesStreamer(directory)."""
        return cls(directory, config)

    # -------------------------------------------------------------------------
    # Iterator protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> DirectoryLinesStreamer:
        return self

    def __next__(self) -> str:
        if self._exhausted:
            raise StopIteration

        while True:
            line = read_line(
                self._handle,
                self._current_path,
                self._line_id,
                encoding=self._config.encoding,
                issues=self.issues,
            )
            if line is not None:
                self._line_id += 1
                return line

            if not self._open_next_file():
                self._finish()
                raise StopIteration

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def directory(self) -> PathInput:
        """The directory path exactly as given at construction."""
        return self._directory

    @property
    def current_path(self) -> str:
        """Path of the file being read, or of the last one once exhausted."""
        return self._current_path

    @property
    def pending_paths(self) -> Tuple[str, ...]:
        """Paths not yet opened, in visitation order."""
        return tuple(reversed(self._pending))

    @property
    def line_id(self) -> int:
        """Counter of the next line to be read, starting at 1."""
        return self._line_id

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(directory={os.fspath(self._directory)!r}, "
            f"current_path={self._current_path!r}, pending={len(self._pending)}, "
            f"line_id={self._line_id}, exhausted={self._exhausted})"
        )

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _open_next_file(self) -> bool:
        """
        Skip ahead to the next pending path that opens successfully.

        Paths that fail to open are logged, recorded and discarded.

        Returns:
            bool: False once the queue is empty.
        """
        while self._pending:
            next_path = self._pending.pop()
            logger.debug("Opening next file: %r", next_path)
            try:
                handle = open_buffered(next_path, self._config.buffer_size)
            except OSError as e:
                logger.error("Error opening file %r: %s", next_path, e)
                self.issues.append(StreamIssue(path=next_path, error=str(e)))
                continue

            self._close_handle()
            self._handle = handle
            self._current_path = next_path
            return True

        return False

    def _finish(self) -> None:
        self._close_handle()
        self._exhausted = True

    def _close_handle(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
