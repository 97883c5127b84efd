"""Infrastructure: Logger with secret redaction."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Any, TextIO

from uptime_toolkit.application.ports import Logger as LoggerPort
from uptime_toolkit.infrastructure.config import redact_secrets


class ConsoleLogger(LoggerPort):
    """Stderr logger with automatic secret redaction.

    The monitor repaints stdout on every tick, so log lines go to a
    separate stream and carry their own time so they can be matched
    against the report's history.
    """

    def __init__(self, verbose: bool = False, stream: TextIO | None = None) -> None:
        self._verbose = verbose
        self._stream = stream

    def _emit(self, level: str, msg: str, **kw: Any) -> None:
        safe = redact_secrets(msg)
        extras = " ".join(f"{k}={redact_secrets(str(v))}" for k, v in kw.items())
        stamp = datetime.now().strftime("%H:%M:%S")
        line = f"{stamp} [{level}] {safe}"
        if extras:
            line += f" ({extras})"
        print(line, file=self._stream or sys.stderr)

    def info(self, msg: str, **kw: Any) -> None:
        self._emit("INFO", msg, **kw)

    def warn(self, msg: str, **kw: Any) -> None:
        self._emit("WARN", msg, **kw)

    def error(self, msg: str, **kw: Any) -> None:
        self._emit("ERROR", msg, **kw)

    def debug(self, msg: str, **kw: Any) -> None:
        if self._verbose:
            self._emit("DEBUG", msg, **kw)
