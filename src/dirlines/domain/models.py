from __future__ import annotations

"""
Streaming Diagnostic Models.

Data Transfer Objects describing faults absorbed while streaming lines,
kept alongside the log output so callers can inspect what was skipped.
"""

from dataclasses import dataclass
from typing import Optional

# -----------------------------------------------------------------------------
# ISSUE TRACKING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class StreamIssue:
    """
    Encapsulates one absorbed failure during streaming.

    Attributes:
        path: File the failure relates to.
        error: Descriptive exception message.
        line_id: Line counter value for read failures; None for open failures.
    """
    path: str
    error: str
    line_id: Optional[int] = None

    @property
    def is_open_failure(self) -> bool:
        return self.line_id is None
