"""Record identifier generation."""

import time
from typing import Callable, Optional


def _now_ms() -> int:
    return int(time.time() * 1000)


class IdGenerator:
    """Monotonic integer id source.

    Ids look like millisecond timestamps so they stay ordered alongside
    records created by older releases, but each id is strictly greater than
    the previous one even when several are issued within the same
    millisecond.
    """

    def __init__(self, last_issued: int = 0, clock: Optional[Callable[[], int]] = None):
        self._last_issued = last_issued
        self._clock = clock or _now_ms

    def seed(self, existing_id: int) -> None:
        """Make sure future ids are greater than ``existing_id``."""
        self._last_issued = max(self._last_issued, existing_id)

    def next_id(self) -> int:
        self._last_issued = max(self._clock(), self._last_issued + 1)
        return self._last_issued
