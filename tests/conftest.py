"""Shared test fixtures and fakes for the uptime monitor tests."""

from __future__ import annotations

import io
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import pytest
from rich.console import Console

from uptime_toolkit.application.ports import Clock, Logger, Prober, Renderer
from uptime_toolkit.domain.entities import MonitorSnapshot, MonitoringResult
from uptime_toolkit.domain.value_objects import Timestamp

EPOCH = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock(Clock):
    """Deterministic clock: each ``now()`` is one second after the last."""

    def __init__(self) -> None:
        self._ticks = 0
        self._mono = 0.0

    def now(self) -> Timestamp:
        ts = Timestamp(EPOCH + timedelta(seconds=self._ticks))
        self._ticks += 1
        return ts

    def monotonic(self) -> float:
        return self._mono

    def advance(self, seconds: float) -> None:
        self._mono += seconds


class NullLogger(Logger):
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def info(self, msg: str, **kw: Any) -> None:
        self.records.append(("info", msg))

    def warn(self, msg: str, **kw: Any) -> None:
        self.records.append(("warn", msg))

    def error(self, msg: str, **kw: Any) -> None:
        self.records.append(("error", msg))

    def debug(self, msg: str, **kw: Any) -> None:
        self.records.append(("debug", msg))


class ScriptedProber(Prober):
    """Replays a list of outcomes: ``(status, ms)`` tuples or exceptions.

    Once the script runs out the last outcome repeats. ``on_probe`` is
    called after every probe with the number of probes made so far.
    """

    def __init__(self, script: list, on_probe: Callable[[int], None] | None = None) -> None:
        self._script = list(script)
        self._clock = FakeClock()
        self.on_probe = on_probe
        self.calls: list[tuple[str, float]] = []

    def probe(self, target: str, *, timeout: float) -> MonitoringResult:
        self.calls.append((target, timeout))
        step = self._script[min(len(self.calls), len(self._script)) - 1]
        try:
            if isinstance(step, Exception):
                raise step
            status, ms = step
            return MonitoringResult.create(self._clock.now(), status, float(ms))
        finally:
            if self.on_probe:
                self.on_probe(len(self.calls))


class RecordingRenderer(Renderer):
    """Keeps every render call in ``events`` as ``(kind, payload)``."""

    def __init__(self, fail_on: set[int] | None = None) -> None:
        self.events: list[tuple[str, Any]] = []
        self._fail_on = fail_on or set()
        self.renders = 0

    def render_started(self, target: str) -> None:
        self.events.append(("started", target))

    def render(self, snapshot: MonitorSnapshot) -> None:
        self.renders += 1
        if self.renders in self._fail_on:
            raise ValueError(f"bad format on tick {self.renders}")
        self.events.append(("report", snapshot))

    def render_error(self, target: str, message: str) -> None:
        self.events.append(("error", message))

    def render_stopped(self, target: str) -> None:
        self.events.append(("stopped", target))

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]


def make_result(status: int = 200, ms: float = 100.0, second: int = 0) -> MonitoringResult:
    return MonitoringResult.create(Timestamp(EPOCH + timedelta(seconds=second)), status, ms)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def logger() -> NullLogger:
    return NullLogger()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def text_console() -> Console:
    """A rich console writing plain text into a buffer (read via ``.file``)."""
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)
