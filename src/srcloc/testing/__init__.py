from __future__ import annotations

from .offsets import closure, interval_offsets, range_offsets
from .strategies import FILE_NAME, intervals, positions, ranges

__all__ = [
    "FILE_NAME",
    "closure",
    "interval_offsets",
    "intervals",
    "positions",
    "range_offsets",
    "ranges",
]
