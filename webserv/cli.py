"""Command that parses a configuration file and prints its contents."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from webserv.config import ConfigError, WebservConfig, parse_config_file

DEFAULT_CONFIG_PATH = "default.conf"


def format_config(config: WebservConfig) -> str:
    """Return a human-readable summary of ``config``."""
    server = config.main_server
    lines = [
        "--- Parsed Configuration ---",
        f"Server Host: {server.host}",
        f"Server Port: {server.port}",
        f"Server Name: {server.server_name}",
        f"Client Max Body Size: {server.client_max_body_size} bytes",
        "Error Pages:",
    ]
    lines.extend(
        f"  {code}: {path}" for code, path in sorted(server.error_pages.items())
    )
    lines.append("--------------------------")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the configuration named in ``argv`` and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_CONFIG_PATH

    print(f"Attempting to parse: {path}")
    try:
        config = parse_config_file(path)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1

    print()
    print(format_config(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())