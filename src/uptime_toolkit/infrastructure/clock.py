"""Infrastructure: Wall-clock implementation."""

from __future__ import annotations

import time

from uptime_toolkit.application.ports import Clock as ClockPort
from uptime_toolkit.domain.value_objects import Timestamp


class WallClock(ClockPort):
    """Real wall-clock time."""

    def now(self) -> Timestamp:
        return Timestamp.now()

    def monotonic(self) -> float:
        return time.monotonic()
