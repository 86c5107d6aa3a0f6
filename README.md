# webserv

A parser for an nginx-style web server configuration file, a command
that prints a parsed configuration, and a listening TCP socket for the
server to accept connections on.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Configuration file

The configuration holds a `server` block:

```
# default.conf
server {
    listen 127.0.0.1:8080;
    server_name example.com;
    client_max_body_size 2M;
    error_page 404 /errors/404.html;
    error_page 500 /errors/500.html;
}
```

Supported directives, each ended by `;`:

- `listen PORT;` or `listen HOST:PORT;` gives the address to listen on.
  If only a port is given, the host is `0.0.0.0`. The defaults are host
  `0.0.0.0` and port 80.
- `server_name NAME;` sets the server name. It is empty by default.
- `client_max_body_size SIZE;` sets the largest request body. `SIZE` is a
  whole number of bytes, or a number followed by `k`, `m` or `g` (either
  case) for kibibytes, mebibytes or gibibytes. Negative sizes are
  rejected. The default is 1048576 bytes.
- `error_page CODE PATH;` maps a status code to an error page path.

Everything after a `#` on a line is a comment, and blank lines are
ignored. Anything outside a `server {` line, an unknown directive, a
missing `;`, a malformed number or a block that is never closed raises
`ConfigError`. Its text has the form `Parser Error [Line N]: ...`, or
`Parser Error: ...` when no line applies; the message and line number
are also available as its `message` and `line` attributes.
`ConfigError` is a subclass of `ValueError`.

## Command line

```
webserv [CONFIG]
```

This reads `CONFIG`, or `default.conf` if no file is given, and prints
the parsed host, port, server name, client body size and error pages
(sorted by code). If the file cannot be read or parsed, it prints the
`Parser Error` message to standard error and exits with status 1.

The same command can be run as `python -m webserv.cli [CONFIG]`.

## Library use

```python
from webserv.config import ConfigError, parse_config, parse_config_file, parse_size
from webserv.cli import format_config
from webserv.server import Server

config = parse_config_file("default.conf")
print(config.main_server.host, config.main_server.port)
print(format_config(config))

assert parse_size("2k") == 2048

try:
    parse_config("listen 80;")
except ConfigError as exc:
    print(exc)  # Parser Error [Line 1]: Unexpected token 'listen'. Expected 'server'.

with Server(8080, "0.0.0.0") as server:
    print(server.address, server.port, server.fileno())
    connection, address = server.accept()
    connection.close()
```

`parse_config` takes the configuration text; `parse_config_file` takes a
path and raises `ConfigError` if the file cannot be opened. Both return a
`WebservConfig` whose `main_server` is a `ServerConfig` with the fields
`host`, `port`, `server_name`, `client_max_body_size` and `error_pages`.

`Server(port, host="0.0.0.0")` opens a TCP socket, binds it, listens with
a backlog of 10 and prints the address it runs on. Port 0 picks a free
port, which is then found in `server.port`. `accept()` waits for a
client and returns its socket and address; `close()` releases the
socket, as does leaving a `with` block. A failed bind raises `OSError`.

## What this package does not do

The package does not read HTTP requests or send responses: `Server` only
listens and hands out accepted connections. The `webserv` command parses
and prints a configuration; it does not start a server.