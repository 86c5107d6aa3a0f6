"""A listening TCP socket for the web server."""

from __future__ import annotations

import socket

_BACKLOG = 10


class Server:
    """A TCP socket bound to ``host:port`` and listening for connections."""

    def __init__(self, port: int, host: str = "0.0.0.0") -> None:
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._socket.bind((host, port))
            self._socket.listen(_BACKLOG)
        except OSError:
            self._socket.close()
            raise
        self.address: tuple[str, int] = self._socket.getsockname()
        self.port: int = self.address[1]
        print(f"Server running on http://localhost:{self.port}")

    def fileno(self) -> int:
        """Return the listening socket's file descriptor, or -1 once closed."""
        return self._socket.fileno()

    def accept(self) -> tuple[socket.socket, tuple[str, int]]:
        """Wait for a client and return its socket and address."""
        return self._socket.accept()

    def close(self) -> None:
        """Stop listening and release the socket."""
        self._socket.close()

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()