"""Machine-readable description of the CLI commands and their flags."""

from __future__ import annotations

from uptime_toolkit.infrastructure.config import VERSION

COMMAND_SCHEMA: dict = {
    "name": "mcli",
    "version": VERSION,
    "description": (
        "mcli – website uptime monitoring from the terminal. Probes a URL over "
        "HTTP or ping and reports rolling availability and latency."
    ),
    "environment": {
        "MONITOR_INTERVAL": "Default check interval in seconds (60)",
        "MONITOR_TIMEOUT": "Default request timeout in seconds (10)",
        "MONITOR_USER_AGENT": "User-Agent header sent by HTTP probes",
        "MONITOR_DOCTOR_URL": "URL probed by 'mcli doctor' (https://example.com)",
        "MONITOR_VERBOSE": "Set to 1 to enable debug logging on stderr",
    },
    "commands": {
        "help": {
            "description": "Show help for all commands or a specific command.",
            "usage": "mcli help [<command>]",
            "args": [
                {"name": "command", "type": "string", "required": False, "description": "Command name to get help for"}
            ],
            "flags": [],
        },
        "schema": {
            "description": "Output this command description as JSON.",
            "usage": "mcli schema",
            "args": [],
            "flags": [],
        },
        "doctor": {
            "description": "Validate settings, the ping executable and outbound HTTP connectivity.",
            "usage": "mcli doctor [--url URL] [--json]",
            "args": [],
            "flags": [
                {"name": "--url", "type": "string", "default": "MONITOR_DOCTOR_URL", "description": "URL to probe"},
                {"name": "--json", "description": "Output results as JSON"},
            ],
        },
        "monitor": {
            "description": (
                "Website uptime monitoring. Probes the URL immediately, then every interval, "
                "keeping the last 10 results for availability and average response time. "
                "Runs until Ctrl+C."
            ),
            "usage": "mcli monitor --url <url> [--interval 60] [--timeout 10] [--ping]",
            "args": [],
            "flags": [
                {"name": "--url", "short": "-u", "type": "string", "required": True, "description": "URL to monitor"},
                {"name": "--interval", "short": "-i", "type": "number", "default": 60, "description": "Check interval in seconds"},
                {"name": "--timeout", "short": "-t", "type": "number", "default": 10, "description": "Request timeout in seconds"},
                {"name": "--ping", "short": "-p", "description": "Use ping against the URL's host instead of an HTTP GET"},
            ],
        },
    },
}
