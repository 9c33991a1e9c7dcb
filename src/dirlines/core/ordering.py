from __future__ import annotations

"""
Natural Path Ordering.

Sorts file paths so that embedded digit runs compare by magnitude
('messages.2' before 'messages.10'). The comparison itself is delegated
to natsort in path mode, which also compares path components piecewise.
"""

import os
from typing import Callable, Iterable, List, Union

from natsort import natsort_keygen, ns

PathInput = Union[str, os.PathLike]

# Key function shared by every sort in this module
natural_key: Callable[[PathInput], object] = natsort_keygen(key=os.fspath, alg=ns.PATH)


def sort_paths(paths: Iterable[PathInput]) -> List[PathInput]:
    """
    Return paths in natural ascending order.

    Args:
        paths: Paths to order; str and os.PathLike values are both accepted.

    Returns:
        List: A new list in visitation order.
    """
    return sorted(paths, key=natural_key)


def pop_order(paths: Iterable[PathInput]) -> List[PathInput]:
    """
    Return paths in natural descending order.

    Popping from the end of the result yields the paths in visitation order.
    """
    return sorted(paths, key=natural_key, reverse=True)
