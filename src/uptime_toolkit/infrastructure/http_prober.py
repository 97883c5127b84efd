"""Infrastructure: HTTP prober – timed GET requests via httpx."""

from __future__ import annotations

import httpx

from uptime_toolkit.application.ports import Clock, Prober
from uptime_toolkit.domain.entities import MonitoringResult


class HttpProber(Prober):
    """Issue a GET against the target and time it.

    Timeouts, DNS failures and refused connections come back as a failed
    result carrying the elapsed time; they are never raised.
    """

    HEADERS = {
        "Accept": "*/*",
    }

    def __init__(
        self,
        clock: Clock,
        user_agent: str = "mcli-uptime",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._clock = clock
        self._headers = {**self.HEADERS, "User-Agent": user_agent}
        self._transport = transport

    def probe(self, target: str, *, timeout: float) -> MonitoringResult:
        started = self._clock.monotonic()
        try:
            with httpx.Client(
                follow_redirects=True,
                timeout=timeout,
                transport=self._transport,
            ) as client:
                resp = client.get(target, headers=self._headers)
        except httpx.TimeoutException:
            return MonitoringResult.failure(
                self._clock.now(),
                self._elapsed_ms(started),
                f"Timed out after {timeout:g}s",
            )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            # ValueError covers UnicodeError from idna encoding of the host
            return MonitoringResult.failure(
                self._clock.now(),
                self._elapsed_ms(started),
                str(exc) or exc.__class__.__name__,
            )

        return MonitoringResult.create(
            self._clock.now(),
            resp.status_code,
            self._elapsed_ms(started),
        )

    def _elapsed_ms(self, started: float) -> float:
        return float(round((self._clock.monotonic() - started) * 1000))
