"""Use-case: UptimeMonitor – poll a target, keep a rolling window, report health.

Each tick runs probe -> record -> render to completion before the wait for
the next tick begins, so a probe slower than the interval delays the
schedule instead of overlapping with the next one.
"""

from __future__ import annotations

import socket
import time
from enum import Enum
from typing import Callable

from uptime_toolkit.application.ports import Clock, Logger, Prober, Renderer
from uptime_toolkit.domain.entities import (
    Aggregate,
    MonitorConfig,
    MonitorSnapshot,
    MonitoringResult,
    TargetHistory,
)
from uptime_toolkit.domain.errors import ConfigurationError, ProbeError, RenderError
from uptime_toolkit.domain.value_objects import ProbeMode, Url


class MonitorState(str, Enum):
    PROBING = "probing"
    IDLE = "idle"
    STOPPED = "stopped"


class UptimeMonitor:
    """Repeatedly probe one target and render rolling availability/latency."""

    # Longest gap between stop checks while idle.
    STOP_POLL_SECONDS = 0.1

    def __init__(
        self,
        probers: dict[ProbeMode, Prober],
        renderer: Renderer,
        clock: Clock,
        logger: Logger,
        resolver: Callable[[str], str] = socket.gethostbyname,
    ) -> None:
        self._probers = probers
        self._renderer = renderer
        self._clock = clock
        self._log = logger
        self._resolve = resolver
        self._histories: dict[str, TargetHistory] = {}
        self._stop_requested = False
        self.state = MonitorState.PROBING

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def configure(
        self,
        target: str,
        interval_seconds: float,
        timeout_seconds: float,
        probe_mode: ProbeMode,
    ) -> MonitorConfig:
        """Validate settings; raises ``ConfigurationError`` on bad input."""
        if not target or not target.strip():
            raise ConfigurationError("URL is required")
        target = target.strip()
        if not interval_seconds > 0:
            raise ConfigurationError(f"Interval must be greater than zero, got {interval_seconds:g}")
        if not timeout_seconds > 0:
            raise ConfigurationError(f"Timeout must be greater than zero, got {timeout_seconds:g}")

        probe_mode = ProbeMode(probe_mode)
        if probe_mode is ProbeMode.HTTP:
            probe_target = str(Url(target))
        else:
            probe_target = self._ping_host(target)

        return MonitorConfig(
            target=target,
            probe_target=probe_target,
            interval_seconds=interval_seconds,
            timeout_seconds=timeout_seconds,
            probe_mode=probe_mode,
        )

    def _ping_host(self, target: str) -> str:
        # Ping accepts a full URL (its hostname is used) or a bare host.
        host = Url(target).hostname if "://" in target else target
        try:
            self._resolve(host)
        except (OSError, UnicodeError) as exc:
            raise ConfigurationError(f"Cannot resolve host {host!r}: {exc}") from None
        return host

    # ------------------------------------------------------------------
    # Single tick pieces
    # ------------------------------------------------------------------
    def probe_once(self, target: str, timeout_seconds: float, probe_mode: ProbeMode) -> MonitoringResult:
        """Run one probe. Backend failures become a failed result, never an exception."""
        prober = self._probers[ProbeMode(probe_mode)]
        started = self._clock.monotonic()
        try:
            return prober.probe(target, timeout=timeout_seconds)
        except ProbeError as exc:
            elapsed = float(round((self._clock.monotonic() - started) * 1000))
            self._log.warn(f"Probe of {target} failed: {exc}")
            return MonitoringResult.failure(self._clock.now(), elapsed, str(exc))

    def record_and_aggregate(self, target: str, result: MonitoringResult) -> Aggregate:
        """Append *result* to the target's window and recompute its metrics."""
        history = self._histories.get(target)
        if history is None:
            history = TargetHistory(target=target)
            self._histories[target] = history
        history.record(result)
        return history.aggregate()

    def history(self, target: str) -> list[MonitoringResult]:
        """Retained results for *target*, oldest first."""
        history = self._histories.get(target)
        return list(history.results) if history else []

    # ------------------------------------------------------------------
    # Control loop
    # ------------------------------------------------------------------
    def run(
        self,
        target: str,
        interval_seconds: float,
        timeout_seconds: float,
        probe_mode: ProbeMode = ProbeMode.HTTP,
    ) -> None:
        """Probe immediately, then every *interval_seconds* until ``stop()``."""
        self.run_with(self.configure(target, interval_seconds, timeout_seconds, probe_mode))

    def run_with(self, config: MonitorConfig) -> None:
        """Run the loop for an already validated *config*.

        History and the stop request belong to this invocation only.
        """
        self._histories = {}
        self._stop_requested = False
        self.state = MonitorState.PROBING
        self._log.debug(
            "Monitor configured",
            target=config.target,
            mode=config.probe_mode.value,
            interval=config.interval_seconds,
            timeout=config.timeout_seconds,
        )
        self._renderer.render_started(config.target)

        while True:
            self.state = MonitorState.PROBING
            self._tick(config)
            if self._stop_requested:
                break
            self.state = MonitorState.IDLE
            if self._idle(config.interval_seconds):
                break

        self.state = MonitorState.STOPPED
        self._renderer.render_stopped(config.target)

    def stop(self) -> None:
        """Ask the loop to finish. Safe to call from a signal handler."""
        # Plain attribute write: a handler running on the main thread must
        # not take a lock the interrupted frame may already hold.
        self._stop_requested = True

    def _idle(self, seconds: float) -> bool:
        """Sleep up to *seconds*; True as soon as a stop was requested."""
        deadline = time.monotonic() + seconds
        while not self._stop_requested:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            time.sleep(min(self.STOP_POLL_SECONDS, remaining))
        return True

    def _tick(self, config: MonitorConfig) -> None:
        result = self.probe_once(config.probe_target, config.timeout_seconds, config.probe_mode)
        aggregate = self.record_and_aggregate(config.target, result)
        self._log.debug(
            "Probe finished",
            status=result.status,
            ms=result.response_time,
            availability=f"{aggregate.availability:.1f}",
        )
        snapshot = MonitorSnapshot(
            target=config.target,
            probe_mode=config.probe_mode,
            latest=result,
            aggregate=aggregate,
            history=self._histories[config.target].newest_first(),
        )
        try:
            self._renderer.render(snapshot)
        except Exception as exc:
            err = RenderError(f"Could not draw report: {exc}")
            self._log.warn(str(err))
            try:
                self._renderer.render_error(config.target, str(err))
            except Exception as inner:
                self._log.error(f"Could not draw error state: {inner}")
