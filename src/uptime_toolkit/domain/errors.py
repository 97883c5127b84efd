"""Domain errors raised by the uptime monitor."""

from __future__ import annotations


class UptimeError(Exception):
    """Base class for uptime toolkit errors."""


class ConfigurationError(UptimeError):
    """Missing or invalid monitor settings. Raised before any probing starts."""


class ProbeError(UptimeError):
    """A probe backend could not complete a check.

    Transient: the monitor turns it into a failed ``MonitoringResult``
    instead of letting it reach the caller.
    """


class RenderError(UptimeError):
    """The report for a single tick could not be drawn."""
