"""Domain entities – probe results and the rolling history per target."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any

from uptime_toolkit.domain.value_objects import ProbeMode, Timestamp

HISTORY_WINDOW = 10
SUCCESS_STATUS = 200
PING_ALIVE_STATUS = 200
PING_DEAD_STATUS = 503
NO_RESPONSE_STATUS = 0


@dataclass(frozen=True)
class MonitoringResult:
    """Outcome of a single probe."""

    timestamp: Timestamp
    status: int
    response_time: float
    is_up: bool
    error: str | None = None

    @classmethod
    def create(
        cls,
        timestamp: Timestamp,
        status: int,
        response_time: float,
        error: str | None = None,
    ) -> "MonitoringResult":
        """Build a result, deriving ``is_up`` from ``status``."""
        return cls(
            timestamp=timestamp,
            status=status,
            response_time=response_time,
            is_up=status == SUCCESS_STATUS,
            error=error,
        )

    @classmethod
    def failure(cls, timestamp: Timestamp, response_time: float, error: str) -> "MonitoringResult":
        return cls.create(timestamp, NO_RESPONSE_STATUS, response_time, error=error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.iso(),
            "status": self.status,
            "response_time": self.response_time,
            "is_up": self.is_up,
            "error": self.error,
        }


@dataclass(frozen=True)
class Aggregate:
    """Health metrics over the retained window."""

    availability: float
    avg_response_time: float
    samples: int


@dataclass
class TargetHistory:
    """Most recent results for one target, oldest first.

    Capacity is fixed at ``HISTORY_WINDOW``; appending past it drops the
    oldest entry.
    """

    target: str
    results: deque[MonitoringResult] = field(default_factory=lambda: deque(maxlen=HISTORY_WINDOW))

    def record(self, result: MonitoringResult) -> None:
        self.results.append(result)

    def aggregate(self) -> Aggregate:
        total = len(self.results)
        if total == 0:
            return Aggregate(availability=0.0, avg_response_time=0.0, samples=0)
        ups = sum(1 for r in self.results if r.is_up)
        latency = sum(r.response_time for r in self.results)
        return Aggregate(
            availability=100.0 * ups / total,
            avg_response_time=latency / total,
            samples=total,
        )

    def newest_first(self) -> list[MonitoringResult]:
        return list(reversed(self.results))

    def __len__(self) -> int:
        return len(self.results)


@dataclass(frozen=True)
class MonitorConfig:
    """Validated settings for a monitoring run."""

    target: str
    probe_target: str
    interval_seconds: float
    timeout_seconds: float
    probe_mode: ProbeMode


@dataclass(frozen=True)
class MonitorSnapshot:
    """Everything the renderer needs for one tick."""

    target: str
    probe_mode: ProbeMode
    latest: MonitoringResult
    aggregate: Aggregate
    history: list[MonitoringResult]
