#!/usr/bin/env python
"""
Start the Platewise API under uvicorn.

Host, port, reload and log level come from Settings (environment or
.env); command-line flags override them. The server refuses to start
without JWT_SECRET, since every session token is signed with it.

Usage:
    uv run python run_api.py
    uv run python run_api.py --reload --log-level debug
    uv run python run_api.py --host 127.0.0.1 --port 9000
"""

import argparse
import sys

import uvicorn
from rich.console import Console

from shared.config import Settings, get_settings

console = Console()

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Platewise API server")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--host", type=str, help="Interface to bind (default: HOST)")
    parser.add_argument("--port", type=int, help="Port to bind (default: PORT)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Uvicorn log level (default: LOG_LEVEL)")
    return parser.parse_args(argv)


def server_options(args: argparse.Namespace, settings: Settings) -> dict:
    """Merge command-line flags over settings into uvicorn.run keyword arguments."""
    return {
        "host": args.host or settings.host,
        "port": args.port or settings.port,
        "reload": args.reload or settings.reload,
        "log_level": args.log_level or settings.log_level.lower(),
    }


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()

    if not settings.jwt_secret:
        console.print("[red]Error:[/red] JWT_SECRET is not set; session tokens cannot be signed.")
        sys.exit(1)

    options = server_options(args, settings)
    console.print(
        f"[bold]{settings.app_name}[/bold] v{settings.app_version} "
        f"on http://{options['host']}:{options['port']}"
    )
    uvicorn.run("api:app", **options)


if __name__ == "__main__":
    main()
