from __future__ import annotations

from .errors import InternalError
from .ranges import HasRange, Ranged, SetRange, fuse_range, get_range, set_range, with_range_of
from .spans import (
    NO_RANGE,
    TAB_SIZE,
    Interval,
    Position,
    Range,
    backup_pos,
    drop_i,
    fuse_intervals,
    fuse_ranges,
    interval_invariant,
    move_pos,
    move_pos_by_string,
    pos_to_range,
    position_invariant,
    r_end,
    r_start,
    range_invariant,
    range_to_interval,
    start_pos,
    take_i,
)

__all__ = [
    "HasRange",
    "InternalError",
    "Interval",
    "NO_RANGE",
    "Position",
    "Range",
    "Ranged",
    "SetRange",
    "TAB_SIZE",
    "backup_pos",
    "drop_i",
    "fuse_intervals",
    "fuse_range",
    "fuse_ranges",
    "get_range",
    "interval_invariant",
    "move_pos",
    "move_pos_by_string",
    "pos_to_range",
    "position_invariant",
    "r_end",
    "r_start",
    "range_invariant",
    "range_to_interval",
    "set_range",
    "start_pos",
    "take_i",
    "with_range_of",
]
