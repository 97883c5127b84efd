"""Use-case: DoctorChecks – validate configuration and probe backends."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field

from uptime_toolkit.application.ports import Logger, Prober
from uptime_toolkit.domain.errors import ConfigurationError, ProbeError
from uptime_toolkit.domain.value_objects import parse_seconds


@dataclass
class CheckResult:
    name: str
    passed: bool
    message: str


@dataclass
class DoctorResponse:
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return all(c.passed for c in self.checks)


class DoctorChecks:
    """Run diagnostic checks on the monitor environment."""

    def __init__(
        self,
        config: dict[str, str],
        http_prober: Prober,
        check_url: str,
        logger: Logger,
        which=shutil.which,
    ) -> None:
        self._config = config
        self._http = http_prober
        self._check_url = check_url
        self._log = logger
        self._which = which

    def execute(self) -> DoctorResponse:
        checks: list[CheckResult] = []

        # 1. Interval / timeout settings
        checks.append(self._check_settings())

        # 2. ping binary for --ping mode
        checks.append(self._check_ping_binary())

        # 3. Outbound HTTP
        checks.append(self._check_http())

        failed = [c.name for c in checks if not c.passed]
        if failed:
            self._log.warn(f"Doctor checks failed: {', '.join(failed)}")
        return DoctorResponse(checks=checks)

    def _check_settings(self) -> CheckResult:
        """Check MONITOR_INTERVAL / MONITOR_TIMEOUT parse as positive seconds."""
        try:
            interval = parse_seconds("MONITOR_INTERVAL", self._config.get("MONITOR_INTERVAL", ""))
            timeout = parse_seconds("MONITOR_TIMEOUT", self._config.get("MONITOR_TIMEOUT", ""))
        except ConfigurationError as e:
            return CheckResult(name="settings", passed=False, message=str(e))
        return CheckResult(
            name="settings",
            passed=True,
            message=f"interval={interval:g}s timeout={timeout:g}s",
        )

    def _check_ping_binary(self) -> CheckResult:
        path = self._which("ping")
        if path:
            return CheckResult(name="ping", passed=True, message=f"ping found at {path}")
        return CheckResult(name="ping", passed=False, message="ping not found on PATH (needed for --ping)")

    def _check_http(self) -> CheckResult:
        """Probe the check URL once."""
        try:
            result = self._http.probe(self._check_url, timeout=5)
        except ProbeError as e:
            return CheckResult(name="http", passed=False, message=f"HTTP probe error: {e}")
        if result.is_up:
            return CheckResult(
                name="http",
                passed=True,
                message=f"{self._check_url} answered {result.status} in {result.response_time:g}ms",
            )
        detail = result.error or f"status {result.status}"
        return CheckResult(name="http", passed=False, message=f"{self._check_url} unreachable: {detail}")
