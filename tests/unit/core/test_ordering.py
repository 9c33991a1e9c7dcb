from __future__ import annotations

"""
Unit tests for Natural Path Ordering.

Verifies that digit runs compare by magnitude and that the pop order is
the exact reverse of the visitation order.
"""

import os
from pathlib import Path

from dirlines.core.ordering import natural_key, pop_order, sort_paths


def test_rotated_names_sort_by_suffix_magnitude() -> None:
    names = ["messages.20", "messages.2", "messages", "messages.10", "messages.1"]
    assert sort_paths(names) == ["messages", "messages.1", "messages.2", "messages.10", "messages.20"]


def test_plain_lexical_sort_disagrees() -> None:
    """Sanity check: lexical order would put .10 before .2."""
    names = ["file-2", "file-11"]
    assert sorted(names) == ["file-11", "file-2"]
    assert sort_paths(names) == ["file-2", "file-11"]


def test_full_paths_sort_on_basename_digits() -> None:
    base = os.path.join("var", "log")
    paths = [os.path.join(base, f"syslog.{i}") for i in (10, 3, 1, 22)]

    ordered = [os.path.basename(p) for p in sort_paths(paths)]
    assert ordered == ["syslog.1", "syslog.3", "syslog.10", "syslog.22"]


def test_accepts_pathlike_values() -> None:
    paths = [Path("d/x10"), Path("d/x9"), Path("d/x100")]
    assert sort_paths(paths) == [Path("d/x9"), Path("d/x10"), Path("d/x100")]


def test_pop_order_is_reverse_of_visitation() -> None:
    names = ["b-2", "a", "b-10", "b-1"]
    queue = pop_order(names)

    visited = []
    while queue:
        visited.append(queue.pop())

    assert visited == sort_paths(names)
    assert visited == ["a", "b-1", "b-2", "b-10"]


def test_natural_key_equal_for_equal_paths() -> None:
    assert natural_key("same.1") == natural_key(Path("same.1"))
