"""
Process configuration.

osquery starts autoloaded extensions with --socket, --timeout, --interval and
--verbose. osquery.start_extension parses those flags from sys.argv itself,
so they are only declared here so our parser accepts the same command line.
EffigyConfig keeps what effigy reads: the socket and timeout for its own
inventory client, and the advisory transport timeout.

There are no environment variables or config files.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class EffigyConfig:
    """
    Extension configuration.

    socket_path
    osquery extensions socket. Used to host the table and to query core tables.

    timeout_seconds
    How long to wait for the osquery socket when connecting.

    http_timeout_seconds
    Timeout applied by the http transport to the advisory call.

    verbose
    Log at debug level.
    """

    socket_path: str = ""
    timeout_seconds: int = 1
    http_timeout_seconds: float = 10
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> EffigyConfig:
        return cls(
            socket_path=args.socket or "",
            timeout_seconds=args.timeout,
            http_timeout_seconds=getattr(args, "http_timeout", 10),
            verbose=args.verbose,
        )


def add_osquery_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the flags osquery passes to extensions it autoloads."""
    parser.add_argument("--socket", default="", help="Path to the osquery extensions socket")
    parser.add_argument("--timeout", type=int, default=1, help="Seconds to wait for the socket")
    parser.add_argument("--interval", type=int, default=1, help="Seconds between health checks")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
