from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .spans import Interval


@dataclass(slots=True)
class InternalError(Exception):
    """Broken location bookkeeping, e.g. a lexeme longer than its interval.

    This is never a problem with the user's input, so callers should let it
    propagate instead of reporting it as a diagnostic.
    """

    message: str
    interval: Interval | None = None

    def __str__(self) -> str:
        if self.interval is None:
            return f"internal error: {self.message}"
        return f"internal error: {self.interval.format()}: {self.message}"
