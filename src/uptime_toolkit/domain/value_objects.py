"""Domain value objects – small immutable types with validation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from urllib.parse import urlsplit

from uptime_toolkit.domain.errors import ConfigurationError


class ProbeMode(str, Enum):
    """How a target is checked."""

    HTTP = "http"
    PING = "ping"


@dataclass(frozen=True)
class Url:
    """Validated http(s) URL value object."""

    value: str

    def __post_init__(self) -> None:
        try:
            parts = urlsplit(self.value)
        except ValueError:
            raise ConfigurationError(f"Invalid URL: {self.value!r}") from None
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ConfigurationError(f"Invalid URL: {self.value!r}")
        # Labels must be 1-63 chars; IPv6 literals are left to the resolver.
        if ":" not in parts.hostname:
            try:
                parts.hostname.encode("idna")
            except UnicodeError:
                raise ConfigurationError(f"Invalid host in URL: {self.value!r}") from None

    @property
    def hostname(self) -> str:
        return urlsplit(self.value).hostname or ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Timestamp:
    """UTC timestamp value object."""

    dt: datetime

    @classmethod
    def now(cls) -> "Timestamp":
        return cls(dt=datetime.now(timezone.utc))

    @classmethod
    def from_iso(cls, iso: str) -> "Timestamp":
        return cls(dt=datetime.fromisoformat(iso))

    def iso(self) -> str:
        return self.dt.isoformat(timespec="milliseconds")

    def __str__(self) -> str:
        return self.iso()


def parse_seconds(name: str, raw: str | float) -> float:
    """Parse *raw* as a number of seconds greater than zero."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}") from None
    if not value > 0:
        raise ConfigurationError(f"{name} must be greater than zero, got {raw!r}")
    return value
