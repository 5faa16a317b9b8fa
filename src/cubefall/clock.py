"""Timestamp sources for the frame loop."""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Supplies monotonically increasing timestamps in seconds."""

    def now(self) -> float: ...


class MonotonicClock:
    def now(self) -> float:
        return time.perf_counter()
