"""Infrastructure: ICMP-style prober backed by the system ``ping`` binary."""

from __future__ import annotations

import math
import platform
import re
import subprocess
from typing import Any, Callable

from uptime_toolkit.application.ports import Clock, Prober
from uptime_toolkit.domain.entities import PING_ALIVE_STATUS, PING_DEAD_STATUS, MonitoringResult
from uptime_toolkit.domain.errors import ProbeError

# "time=12.3 ms" (Linux/macOS), "time=12ms" / "time<1ms" (Windows)
_RTT_RE = re.compile(r"time[=<]\s*([\d.]+)\s*ms", re.IGNORECASE)

Runner = Callable[[list[str], float], tuple[int, str]]


def coerce_response_time(value: Any) -> float:
    """Turn a backend round-trip value (number or text) into milliseconds."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return 0.0
        return parsed if math.isfinite(parsed) else 0.0
    return 0.0


def build_ping_command(host: str, timeout: float, system: str | None = None) -> list[str]:
    system = (system or platform.system()).lower()
    if system == "windows":
        return ["ping", "-n", "1", "-w", str(int(timeout * 1000)), host]
    if system == "darwin":
        return ["ping", "-c", "1", "-W", str(int(timeout * 1000)), host]
    return ["ping", "-c", "1", "-W", str(max(1, math.ceil(timeout))), host]


def parse_ping_output(returncode: int, output: str) -> dict[str, Any]:
    """Read ``{"alive": bool, "time": str}`` out of ``ping`` output."""
    match = _RTT_RE.search(output)
    alive = returncode == 0 and (match is not None or "ttl=" in output.lower())
    return {"alive": alive, "time": match.group(1) if (alive and match) else "unknown"}


def _run(command: list[str], timeout: float) -> tuple[int, str]:
    try:
        proc = subprocess.run(command, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError:
        raise ProbeError("'ping' executable not found on PATH") from None
    except OSError as exc:
        raise ProbeError(f"Could not run ping: {exc}") from None
    except subprocess.TimeoutExpired:
        return 1, ""
    return proc.returncode, proc.stdout + proc.stderr


class PingProber(Prober):
    """Send one echo request to a host and report whether it answered."""

    # Extra time given to the ping process beyond its own deadline.
    GRACE_SECONDS = 1.0

    def __init__(self, clock: Clock, runner: Runner | None = None) -> None:
        self._clock = clock
        self._runner = runner or _run

    def probe(self, target: str, *, timeout: float) -> MonitoringResult:
        command = build_ping_command(target, timeout)
        returncode, output = self._runner(command, timeout + self.GRACE_SECONDS)
        reply = parse_ping_output(returncode, output)
        return MonitoringResult.create(
            self._clock.now(),
            PING_ALIVE_STATUS if reply["alive"] else PING_DEAD_STATUS,
            coerce_response_time(reply["time"]),
        )
