from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures that lay out rotated-log directories on disk.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
ROTATED_NAMES = ["messages", "messages.1", "messages.2", "messages.10", "messages.20"]
ORDINALS = ["one", "two", "three"]


def rotated_lines(names: List[str]) -> List[str]:
    """Lines written by the rotated_log_dir fixture, in visitation order."""
    return [f"line {n} from {name}\n" for name in names for n in ORDINALS]


@pytest.fixture
def rotated_log_dir(tmp_path: Path) -> Path:
    """
    Create a log-rotation style directory.

    Files are written in an order that differs from both lexical and
    natural order, so the OS listing order cannot mask a sorting bug.
    """
    root = tmp_path / "non-empty-dir"
    root.mkdir()
    for name in ["messages.10", "messages.2", "messages", "messages.20", "messages.1"]:
        (root / name).write_text("".join(f"line {n} from {name}\n" for n in ORDINALS), encoding="utf-8")
    return root


@pytest.fixture
def expected_rotated_lines() -> List[str]:
    return rotated_lines(ROTATED_NAMES)


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    root = tmp_path / "empty-dir"
    root.mkdir()
    return root
