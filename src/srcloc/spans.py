"""Positions, intervals and ranges in source text.

A :class:`Position` is a single point, an :class:`Interval` a contiguous
half-open span ``[start, end)`` and a :class:`Range` a canonical (sorted,
disjoint, non-adjacent) sequence of intervals. The empty range means that no
location is known.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

from .errors import InternalError


logger = logging.getLogger(__name__)

TAB_SIZE = 8


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A point in a named source.

    Offsets, lines and columns all start from 1. Positions are compared by
    ``(file, offset)`` only; line and column are kept for messages and two
    positions with the same offset are expected to agree on them.
    """

    file: str
    offset: int
    line: int = field(compare=False)
    column: int = field(compare=False)

    def advance(self, ch: str) -> Position:
        """Move past one character.

        A tab moves to the next tab stop, a newline to the first column of
        the next line and anything else to the next column.
        """
        if ch == "\t":
            col = (self.column + TAB_SIZE - 1) // TAB_SIZE * TAB_SIZE + 1
            return replace(self, offset=self.offset + 1, column=col)
        if ch == "\n":
            return replace(self, offset=self.offset + 1, line=self.line + 1, column=1)
        return replace(self, offset=self.offset + 1, column=self.column + 1)

    def advance_by(self, s: str) -> Position:
        p = self
        for ch in s:
            p = p.advance(ch)
        return p

    def backup(self) -> Position:
        """Step back over one character, which must not be a tab or newline."""
        return replace(self, offset=self.offset - 1, column=self.column - 1)

    def format(self) -> str:
        if self.file == "":
            return f"{self.line},{self.column}"
        return f"{self.file}:{self.line},{self.column}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, slots=True, order=True)
class Interval:
    """Half-open interval [start, end) in a single file."""

    start: Position
    end: Position

    @property
    def file(self) -> str:
        return self.start.file

    @property
    def length(self) -> int:
        # Assumes both ends are in the same file.
        return self.end.offset - self.start.offset

    def take(self, s: str) -> Interval:
        """The part of the interval covered by ``s``, read from the start."""
        self._check_fits(s)
        return Interval(self.start, self.start.advance_by(s))

    def drop(self, s: str) -> Interval:
        """The rest of the interval once ``s`` has been read from the start."""
        self._check_fits(s)
        return Interval(self.start.advance_by(s), self.end)

    def _check_fits(self, s: str) -> None:
        if len(s) > self.length:
            err = InternalError(
                message=f"string of length {len(s)} does not fit in interval of length {self.length}",
                interval=self,
            )
            logger.error("%s", err)
            raise err

    def fuse(self, other: Interval) -> Interval:
        return fuse_intervals(self, other)

    def to_range(self) -> Range:
        return Range((self,))

    def format(self) -> str:
        s, e = self.start, self.end
        prefix = f"{s.file}:" if s.file else ""
        if s.line == e.line:
            end = f"{e.column}"
        else:
            end = f"{e.line},{e.column}"
        return f"{prefix}{s.line},{s.column}-{end}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, slots=True, order=True)
class Range:
    """A possibly discontiguous location: canonical sequence of intervals."""

    intervals: tuple[Interval, ...] = ()

    @classmethod
    def from_intervals(cls, intervals: Iterable[Interval]) -> Range:
        """Sort the intervals and fuse neighbours that overlap or touch."""
        out: list[Interval] = []
        for i in sorted(intervals):
            if out and out[-1].end >= i.start:
                out[-1] = fuse_intervals(out[-1], i)
            else:
                out.append(i)
        return cls(tuple(out))

    @property
    def start(self) -> Position | None:
        return self.intervals[0].start if self.intervals else None

    @property
    def end(self) -> Position | None:
        return self.intervals[-1].end if self.intervals else None

    def to_interval(self) -> Interval | None:
        """The outer bound of the range; it may cover gaps between intervals."""
        if not self.intervals:
            return None
        return Interval(self.intervals[0].start, self.intervals[-1].end)

    def fuse(self, other: Range) -> Range:
        return fuse_ranges(self, other)

    def __or__(self, other: object) -> Range:
        if not isinstance(other, Range):
            return NotImplemented
        return fuse_ranges(self, other)

    def __bool__(self) -> bool:
        return bool(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def format(self) -> str:
        i = self.to_interval()
        return "" if i is None else i.format()

    def __str__(self) -> str:
        return self.format()


NO_RANGE = Range()


def position_invariant(p: Position) -> bool:
    return p.offset > 0 and p.line > 0 and p.column > 0


def interval_invariant(i: Interval) -> bool:
    return position_invariant(i.start) and position_invariant(i.end) and i.start <= i.end


def range_invariant(r: Range) -> bool:
    ivs = r.intervals
    if not all(interval_invariant(i) for i in ivs):
        return False
    return all(a.end < b.start for a, b in zip(ivs, ivs[1:]))


def start_pos(file: str = "") -> Position:
    """The first position in a file."""
    return Position(file=file, offset=1, line=1, column=1)


def move_pos(p: Position, ch: str) -> Position:
    return p.advance(ch)


def move_pos_by_string(p: Position, s: str) -> Position:
    return p.advance_by(s)


def backup_pos(p: Position) -> Position:
    return p.backup()


def take_i(s: str, i: Interval) -> Interval:
    return i.take(s)


def drop_i(s: str, i: Interval) -> Interval:
    return i.drop(s)


def fuse_intervals(x: Interval, y: Interval) -> Interval:
    """The least interval covering both arguments, gaps included."""
    ps = sorted((x.start, y.start, x.end, y.end))
    return Interval(ps[0], ps[-1])


def fuse_ranges(a: Range, b: Range) -> Range:
    """Union of two ranges.

    Unlike :func:`fuse_intervals` this keeps the gaps: the result covers
    exactly the positions covered by ``a`` or ``b``. Overlapping or touching
    intervals are merged, and a merged interval stays at the head of the side
    whose interval ended later so that it can absorb further intervals from
    the other side.
    """
    if not a.intervals:
        return b
    if not b.intervals:
        return a

    xs = list(a.intervals)
    ys = list(b.intervals)
    out: list[Interval] = []
    i = j = 0
    while i < len(xs) and j < len(ys):
        x, y = xs[i], ys[j]
        if x.end < y.start:
            out.append(x)
            i += 1
        elif y.end < x.start:
            out.append(y)
            j += 1
        elif x.end < y.end:
            ys[j] = fuse_intervals(x, y)
            i += 1
        else:
            xs[i] = fuse_intervals(x, y)
            j += 1
    out.extend(xs[i:])
    out.extend(ys[j:])
    return Range(tuple(out))


def pos_to_range(p1: Position, p2: Position) -> Range:
    if p1 < p2:
        return Range((Interval(p1, p2),))
    return Range((Interval(p2, p1),))


def range_to_interval(r: Range) -> Interval | None:
    return r.to_interval()


def r_start(r: Range) -> Position | None:
    return r.start


def r_end(r: Range) -> Position | None:
    return r.end
