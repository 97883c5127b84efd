"""Entry point for the mcli uptime monitor.

Usage:
    python -m uptime_toolkit <command> [args...]
    mcli <command> [args...]          (after pip install -e .)
"""

from uptime_toolkit.adapters.cli import run_cli


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
