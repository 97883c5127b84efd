"""CLI adapter – parses arguments, dispatches to use cases, formats output."""

from __future__ import annotations

import argparse
import json
import signal
import sys
import textwrap
from contextlib import contextmanager
from typing import Iterator

from uptime_toolkit.adapters.command_schema import COMMAND_SCHEMA
from uptime_toolkit.adapters import presenters


# ---------------------------------------------------------------------------
# Help text
# ---------------------------------------------------------------------------
HELP_TEXT = textwrap.dedent("""\
    mcli – website uptime monitoring from the terminal.

    Usage:
      mcli <command> [options]

    Commands:
      help [cmd]      Show help (or help for a specific command)
      schema          Output machine-readable command description (JSON)
      doctor          Validate settings, ping executable, connectivity
      monitor         Monitor a website's uptime until Ctrl+C

    Examples:
      mcli monitor --url https://example.com
      mcli monitor --url https://example.com --interval 5 --timeout 3
      mcli monitor --url https://example.com --ping
      mcli doctor --json

    Defaults can be set in .env (MONITOR_INTERVAL, MONITOR_TIMEOUT, ...).

    For detailed help:  mcli help <command>
""")

COMMAND_HELP: dict[str, str] = {
    "help": "Usage: mcli help [<command>]\n\nShow general help or help for a specific command.",
    "schema": "Usage: mcli schema\n\nOutputs the full machine-readable command description as JSON.",
    "doctor": (
        "Usage: mcli doctor [--url URL] [--json]\n\n"
        "Runs diagnostic checks:\n"
        "  - MONITOR_INTERVAL / MONITOR_TIMEOUT are valid\n"
        "  - 'ping' executable is available (needed for --ping)\n"
        "  - Outbound HTTP to --url (default: MONITOR_DOCTOR_URL)"
    ),
    "monitor": (
        "Usage: mcli monitor --url <url> [--interval 60] [--timeout 10] [--ping]\n\n"
        "Website uptime monitoring. Checks the URL right away, then every interval,\n"
        "and repaints a report with rolling availability and average response time\n"
        "over the last 10 checks. Press Ctrl+C to stop.\n"
        "  -u, --url       URL to monitor (required)\n"
        "  -i, --interval  Check interval in seconds (default: 60)\n"
        "  -t, --timeout   Request timeout in seconds (default: 10)\n"
        "  -p, --ping      Use ping against the URL's host instead of HTTP GET"
    ),
}


# ---------------------------------------------------------------------------
# Build container (lazy import to avoid circular deps)
# ---------------------------------------------------------------------------
def _build_container() -> dict:
    """Build the dependency container from config."""
    from uptime_toolkit.infrastructure.config import is_verbose, load_config
    from uptime_toolkit.infrastructure.logger import ConsoleLogger
    from uptime_toolkit.infrastructure.clock import WallClock
    from uptime_toolkit.infrastructure.http_prober import HttpProber
    from uptime_toolkit.infrastructure.ping_prober import PingProber

    config = load_config()
    logger = ConsoleLogger(verbose=is_verbose(config))
    clock = WallClock()

    return {
        "config": config,
        "logger": logger,
        "clock": clock,
        "http_prober": HttpProber(clock, user_agent=config["MONITOR_USER_AGENT"]),
        "ping_prober": PingProber(clock),
    }


@contextmanager
def _stop_on_signals(stop) -> Iterator[None]:
    """Route SIGINT/SIGTERM to *stop* for the duration of the block."""
    previous = {}
    for sig in (signal.SIGINT, signal.SIGTERM):
        previous[sig] = signal.signal(sig, lambda _signum, _frame: stop())
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------
def cmd_help(args: argparse.Namespace) -> None:
    if args.command:
        text = COMMAND_HELP.get(args.command)
        if text:
            print(text)
        else:
            print(f"Unknown command: {args.command}")
            print(HELP_TEXT)
    else:
        print(HELP_TEXT)


def cmd_schema(_args: argparse.Namespace) -> None:
    print(json.dumps(COMMAND_SCHEMA, indent=2))


def cmd_doctor(args: argparse.Namespace) -> None:
    c = _build_container()
    from uptime_toolkit.application.use_cases.doctor_checks import DoctorChecks

    uc = DoctorChecks(
        config=c["config"],
        http_prober=c["http_prober"],
        check_url=args.url or c["config"]["MONITOR_DOCTOR_URL"],
        logger=c["logger"],
    )
    resp = uc.execute()
    presenters.present_doctor(resp, as_json=args.json)


def cmd_monitor(args: argparse.Namespace) -> None:
    """Monitor a website until interrupted."""
    from uptime_toolkit.application.use_cases.monitor_website import UptimeMonitor
    from uptime_toolkit.domain.errors import ConfigurationError
    from uptime_toolkit.domain.value_objects import ProbeMode
    from uptime_toolkit.infrastructure.config import positive_seconds

    if not args.url:
        raise ConfigurationError("URL is required")

    c = _build_container()
    interval = args.interval if args.interval is not None else positive_seconds(c["config"], "MONITOR_INTERVAL")
    timeout = args.timeout if args.timeout is not None else positive_seconds(c["config"], "MONITOR_TIMEOUT")
    mode = ProbeMode.PING if args.ping else ProbeMode.HTTP

    monitor = UptimeMonitor(
        probers={ProbeMode.HTTP: c["http_prober"], ProbeMode.PING: c["ping_prober"]},
        renderer=presenters.ConsoleReportRenderer(),
        clock=c["clock"],
        logger=c["logger"],
    )
    # Fail before touching signal handlers or the screen.
    config = monitor.configure(args.url, interval, timeout, mode)

    with _stop_on_signals(monitor.stop):
        monitor.run_with(config)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcli",
        description="Website uptime monitoring CLI",
        add_help=False,
    )
    sub = parser.add_subparsers(dest="command")

    # help
    p_help = sub.add_parser("help", add_help=False)
    p_help.add_argument("command", nargs="?", default=None)
    p_help.set_defaults(func=cmd_help)

    # schema
    p_schema = sub.add_parser("schema", add_help=False)
    p_schema.set_defaults(func=cmd_schema)

    # doctor
    p_doctor = sub.add_parser("doctor", add_help=False)
    p_doctor.add_argument("--url", type=str, default=None)
    p_doctor.add_argument("--json", action="store_true", default=False)
    p_doctor.set_defaults(func=cmd_doctor)

    # monitor
    p_monitor = sub.add_parser("monitor", add_help=False)
    p_monitor.add_argument("-u", "--url", type=str, default=None)
    p_monitor.add_argument("-i", "--interval", type=float, default=None)
    p_monitor.add_argument("-t", "--timeout", type=float, default=None)
    p_monitor.add_argument("-p", "--ping", action="store_true", default=False)
    p_monitor.set_defaults(func=cmd_monitor)

    return parser


def run_cli(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to the appropriate command handler."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print(HELP_TEXT)
        return

    if hasattr(args, "func"):
        try:
            args.func(args)
        except Exception as exc:
            from uptime_toolkit.infrastructure.config import redact_secrets
            print(f"ERROR: {redact_secrets(str(exc))}", file=sys.stderr)
            sys.exit(1)
    else:
        print(HELP_TEXT)
