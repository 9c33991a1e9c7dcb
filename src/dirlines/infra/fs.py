from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' used by the streamer: existence checks, tolerant
directory enumeration and buffered binary opening. Keeps every direct
filesystem call in one place so the streaming core can be exercised with
fakes.
"""

import logging
import os
from typing import BinaryIO, List, Union

logger = logging.getLogger(__name__)

PathInput = Union[str, os.PathLike]

# Consecutive listing failures tolerated before enumeration gives up
MAX_CONSECUTIVE_ENTRY_ERRORS = 16

# -----------------------------------------------------------------------------
# PATH VALIDATION API
# -----------------------------------------------------------------------------

def path_exists(path: PathInput) -> bool:
    """
    Check whether a path exists, without distinguishing files from directories.

    Args:
        path: Raw input path.

    Returns:
        bool: True if something exists at the path.
    """
    return os.path.exists(path)

# -----------------------------------------------------------------------------
# ENUMERATION API
# -----------------------------------------------------------------------------

def list_directory_entries(directory: PathInput) -> List[str]:
    """
    List the direct children of a directory as full paths.

    Non-recursive: subdirectories are returned like any other entry.
    Entries that raise while being read are dropped and logged at DEBUG.
    Enumeration stops early after MAX_CONSECUTIVE_ENTRY_ERRORS failures
    in a row.

    Args:
        directory: Directory to enumerate.

    Returns:
        List[str]: Entry paths in the order the OS returned them.

    Raises:
        OSError: If the listing cannot be started at all.
    """
    entries: List[str] = []
    consecutive_errors = 0

    with os.scandir(directory) as it:
        while consecutive_errors < MAX_CONSECUTIVE_ENTRY_ERRORS:
            try:
                entry = next(it)
            except StopIteration:
                break
            except OSError as e:
                consecutive_errors += 1
                logger.debug("Dropping unreadable entry in %r: %s", os.fspath(directory), e)
                continue

            consecutive_errors = 0
            entries.append(entry.path)

    return entries

# -----------------------------------------------------------------------------
# FILE ACCESS API
# -----------------------------------------------------------------------------

def open_buffered(path: PathInput, buffer_size: int) -> BinaryIO:
    """
    Open a file for buffered binary reading.

    Args:
        path: File to open.
        buffer_size: Size of the read buffer in bytes.

    Returns:
        BinaryIO: A buffered reader supporting peek().

    Raises:
        OSError: If the file cannot be opened (missing, directory, denied).
    """
    return open(path, "rb", buffering=buffer_size)
