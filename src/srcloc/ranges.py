"""Things that have a range.

Syntax-tree nodes expose their location through ``get_range()`` and, when the
location can be replaced, ``set_range()``. Tuples, lists and ``None`` get a
default range built by fusing the ranges of their parts, so a parser can
compute a node's range straight from its children.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Protocol, TypeVar, runtime_checkable

from .spans import NO_RANGE, Interval, Range, fuse_ranges


_T = TypeVar("_T")
_S = TypeVar("_S", bound="SetRange")


@runtime_checkable
class HasRange(Protocol):
    def get_range(self) -> Range: ...


@runtime_checkable
class SetRange(HasRange, Protocol):
    """A :class:`HasRange` whose range can be replaced.

    ``x.set_range(r).get_range() == r`` must hold.
    """

    def set_range(self: _S, r: Range) -> _S: ...


@dataclass(frozen=True, slots=True)
class Ranged:
    """Base class for nodes that store their own range."""

    range: Range

    def get_range(self) -> Range:
        return self.range

    def set_range(self: _T, r: Range) -> _T:
        return replace(self, range=r)


def get_range(x: object) -> Range:
    if isinstance(x, Range):
        return x
    if isinstance(x, Interval):
        return Range((x,))
    if x is None:
        return NO_RANGE
    if isinstance(x, HasRange):
        return x.get_range()
    if isinstance(x, tuple):
        if len(x) == 0:
            return NO_RANGE
        if len(x) == 1:
            return get_range(x[0])
        if len(x) == 2:
            return fuse_range(x[0], x[1])
        # (a, b, c, ...) is treated as (a, (b, c, ...)).
        return fuse_range(x[0], x[1:])
    if isinstance(x, Sequence) and not isinstance(x, (str, bytes)):
        r = NO_RANGE
        for v in reversed(x):
            r = fuse_ranges(get_range(v), r)
        return r
    raise TypeError(f"value has no range: {type(x)!r}")


def set_range(r: Range, x: _T) -> _T:
    if isinstance(x, Range):
        return r  # type: ignore[return-value]
    if isinstance(x, SetRange):
        return x.set_range(r)
    raise TypeError(f"cannot set the range of {type(x)!r}")


def fuse_range(x: object, y: object) -> Range:
    """A range covering both arguments, keeping the gaps between them."""
    return fuse_ranges(get_range(x), get_range(y))


def with_range_of(x: _T, y: object) -> _T:
    """``x`` with its range replaced by the range of ``y``."""
    return set_range(get_range(y), x)
