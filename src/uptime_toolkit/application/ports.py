"""Application ports – abstract interfaces that infrastructure must implement.

These are the boundaries of the application layer. Domain and application code
depend only on these abstractions, never on concrete infrastructure.
"""

from __future__ import annotations

import abc
from typing import Any

from uptime_toolkit.domain.entities import MonitorSnapshot, MonitoringResult
from uptime_toolkit.domain.value_objects import Timestamp


# ---------------------------------------------------------------------------
# Probing
# ---------------------------------------------------------------------------
class Prober(abc.ABC):
    """Port: one reachability/latency check against a target."""

    @abc.abstractmethod
    def probe(self, target: str, *, timeout: float) -> MonitoringResult:
        """Check *target* once, giving up after *timeout* seconds.

        Network failures must come back as a failed result. A backend that
        cannot run at all may raise ``ProbeError``.
        """
        ...


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
class Renderer(abc.ABC):
    """Port: draws the live monitoring report."""

    @abc.abstractmethod
    def render_started(self, target: str) -> None:
        ...

    @abc.abstractmethod
    def render(self, snapshot: MonitorSnapshot) -> None:
        ...

    @abc.abstractmethod
    def render_error(self, target: str, message: str) -> None:
        ...

    @abc.abstractmethod
    def render_stopped(self, target: str) -> None:
        ...


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------
class Clock(abc.ABC):
    """Port: provides current time (makes testing deterministic)."""

    @abc.abstractmethod
    def now(self) -> Timestamp:
        ...

    @abc.abstractmethod
    def monotonic(self) -> float:
        """Seconds from an arbitrary origin, for measuring durations."""
        ...


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
class Logger(abc.ABC):
    """Port: structured logging with secret redaction."""

    @abc.abstractmethod
    def info(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def warn(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def error(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def debug(self, msg: str, **kw: Any) -> None:
        ...
