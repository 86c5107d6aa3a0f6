"""Parsing of the server configuration file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

_WHITESPACE = " \t\n\r\f\v"
_INTEGER = re.compile(r"[ \t\n\r\f\v]*[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_SIZE_UNITS = {"k": 1024, "m": 1024 * 1024, "g": 1024 * 1024 * 1024}
_TOKEN_SEPARATOR = re.compile(r"[ \t]")

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 80
DEFAULT_CLIENT_MAX_BODY_SIZE = 1048576


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is malformed."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.message = message
        self.line = line
        if line is None:
            text = f"Parser Error: {message}"
        else:
            text = f"Parser Error [Line {line}]: {message}"
        super().__init__(text)


@dataclass
class ServerConfig:
    """Settings of a single server block."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    server_name: str = ""
    client_max_body_size: int = DEFAULT_CLIENT_MAX_BODY_SIZE
    error_pages: dict[int, str] = field(default_factory=dict)


@dataclass
class WebservConfig:
    """The whole parsed configuration."""

    main_server: ServerConfig = field(default_factory=ServerConfig)


def _trim(text: str) -> str:
    return text.strip(_WHITESPACE)


def _remove_comment(text: str) -> str:
    return text.split("#", 1)[0]


def _to_int(text: str) -> int:
    """Read a whole string as a 32-bit signed integer."""
    if _INTEGER.fullmatch(text) is None:
        raise ConfigError(f"Invalid integer value '{text}'")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ConfigError(f"Invalid integer value '{text}'")
    return value


def parse_size(text: str) -> int:
    """Return a size such as ``10``, ``8k``, ``2M`` or ``1g`` in bytes."""
    if not text:
        raise ConfigError("Empty size value")
    unit = text[-1]
    multiplier = _SIZE_UNITS.get(unit.lower())
    if multiplier is not None:
        number_text = text[:-1]
    elif unit in "0123456789":
        multiplier = 1
        number_text = text
    else:
        raise ConfigError(f"Invalid size unit '{unit}'")
    number = _to_int(number_text)
    if number < 0:
        raise ConfigError(f"Size cannot be negative: '{text}'")
    return number * multiplier


def _directive_value(token: str, remainder: str, line_num: int) -> str:
    value, semicolon, _ = remainder.partition(";")
    if not semicolon:
        raise ConfigError(f"Missing ';' after '{token}' directive.", line_num)
    return _trim(value)


def _split_token(line: str) -> tuple[str, str]:
    match = _TOKEN_SEPARATOR.search(line)
    if match is None:
        return line, ""
    return line[: match.start()], _trim(line[match.start():])


def _apply_directive(
    server: ServerConfig, token: str, remainder: str, line_num: int
) -> None:
    if token == "listen":
        value = _directive_value(token, remainder, line_num)
        host, colon, port = value.partition(":")
        if colon:
            server.host = host
            server.port = _to_int(port)
        else:
            server.host = DEFAULT_HOST
            server.port = _to_int(value)
    elif token == "server_name":
        server.server_name = _directive_value(token, remainder, line_num)
    elif token == "client_max_body_size":
        server.client_max_body_size = parse_size(
            _directive_value(token, remainder, line_num)
        )
    elif token == "error_page":
        value = _directive_value(token, remainder, line_num)
        code_text, space, path = value.partition(" ")
        if not space:
            raise ConfigError(
                "Invalid 'error_page' format. Expected 'error_page CODE PATH;'",
                line_num,
            )
        server.error_pages[_to_int(_trim(code_text))] = _trim(path)
    else:
        raise ConfigError(
            f"Unknown directive '{token}' inside server block.", line_num
        )


def parse_config(text: str) -> WebservConfig:
    """Parse configuration text and return the resulting configuration."""
    config = WebservConfig()
    in_server_block = False

    for line_num, raw_line in enumerate(text.split("\n"), start=1):
        line = _trim(_remove_comment(raw_line))
        if not line:
            continue
        token, remainder = _split_token(line)

        if not in_server_block:
            if token != "server":
                raise ConfigError(
                    f"Unexpected token '{token}'. Expected 'server'.", line_num
                )
            if remainder != "{":
                raise ConfigError("Expected '{' after 'server'", line_num)
            in_server_block = True
        elif token == "}":
            in_server_block = False
        else:
            _apply_directive(config.main_server, token, remainder, line_num)

    if in_server_block:
        raise ConfigError("Unexpected EOF. Missing '}' for server block.")
    return config


def parse_config_file(path: str | os.PathLike[str]) -> WebservConfig:
    """Read and parse the configuration file at ``path``."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise ConfigError(
            f"Could not open configuration file '{os.fspath(path)}'"
        ) from exc
    return parse_config(text)