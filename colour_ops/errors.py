# colour_ops/errors.py
"""
Exceptions raised by colour_ops.

InvalidControlPointsError is a ValueError and WorkerPoolError a RuntimeError,
so callers catching the builtin types keep working.
"""

from __future__ import annotations

from typing import List, Sequence


class ColourOpsError(Exception):
    """Base class for colour_ops failures."""


class InvalidControlPointsError(ColourOpsError, ValueError):
    """Control points that cannot define a hue function (duplicate or non-finite samples)."""


class WorkerPoolError(ColourOpsError, RuntimeError):
    """One or more pool workers terminated abnormally."""

    def __init__(self, failures: Sequence[BaseException]):
        self.failures: List[BaseException] = list(failures)
        first = self.failures[0] if self.failures else None
        detail = f": {type(first).__name__}: {first}" if first is not None else ""
        super().__init__(f"{len(self.failures)} worker(s) failed{detail}")


__all__ = ["ColourOpsError", "InvalidControlPointsError", "WorkerPoolError"]
