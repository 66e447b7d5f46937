from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from srcloc import (
    NO_RANGE,
    Interval,
    Position,
    Range,
    fuse_intervals,
    fuse_ranges,
    get_range,
    interval_invariant,
    position_invariant,
    range_invariant,
    range_to_interval,
    start_pos,
)
from srcloc.testing import closure, interval_offsets, intervals, positions, range_offsets, ranges


@given(positions())
def test_positions_are_valid(p: Position) -> None:
    assert position_invariant(p)


@given(intervals())
def test_intervals_are_valid(i: Interval) -> None:
    assert interval_invariant(i)
    assert i.length >= 0


@given(ranges())
def test_ranges_are_valid(r: Range) -> None:
    assert range_invariant(r)


@given(st.text(max_size=20))
def test_start_pos_is_valid(file: str) -> None:
    assert position_invariant(start_pos(file))


def test_no_range_is_valid() -> None:
    assert range_invariant(NO_RANGE)


@given(positions(), st.text(alphabet=" \t\nab", max_size=30))
def test_advance_keeps_position_valid(p: Position, s: str) -> None:
    q = p.advance_by(s)
    assert position_invariant(q)
    assert q.offset == p.offset + len(s)


@given(intervals(), st.data())
def test_take_and_drop_split_the_interval(i: Interval, data: st.DataObject) -> None:
    n = data.draw(st.integers(min_value=0, max_value=i.length))
    s = " " * n
    t = i.take(s)
    d = i.drop(s)
    assert interval_invariant(t)
    assert interval_invariant(d)
    assert t.length == n
    assert fuse_intervals(t, d) == i


@given(ranges())
def test_range_to_interval_covers_closure(r: Range) -> None:
    i = range_to_interval(r)
    if not r:
        assert i is None
        return
    assert i is not None
    assert interval_invariant(i)
    assert interval_offsets(i) == closure(range_offsets(r))


@given(intervals(), intervals())
def test_fuse_intervals_covers_closure(i1: Interval, i2: Interval) -> None:
    i = fuse_intervals(i1, i2)
    assert interval_invariant(i)
    assert interval_offsets(i) == closure(interval_offsets(i1) | interval_offsets(i2))


@given(ranges(), ranges())
def test_fuse_ranges_is_exact_union(r1: Range, r2: Range) -> None:
    r = fuse_ranges(r1, r2)
    assert range_invariant(r)
    assert range_offsets(r) == range_offsets(r1) | range_offsets(r2)


@given(ranges())
def test_no_range_is_identity(r: Range) -> None:
    assert fuse_ranges(NO_RANGE, r) == r
    assert fuse_ranges(r, NO_RANGE) == r


@given(st.lists(intervals(), max_size=10))
def test_range_of_list_is_union(xs: list[Interval]) -> None:
    r = get_range(xs)
    assert range_invariant(r)
    expected: set[int] = set()
    for i in xs:
        expected |= interval_offsets(i)
    assert range_offsets(r) == expected
