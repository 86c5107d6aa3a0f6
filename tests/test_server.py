import socket

import pytest

from webserv.server import Server


def test_accept_exchanges_data():
    with Server(0, "127.0.0.1") as server:
        with socket.create_connection(("127.0.0.1", server.port)) as client:
            conn, address = server.accept()
            with conn:
                client.sendall(b"GET / HTTP/1.1\r\n\r\n")
                assert conn.recv(1024) == b"GET / HTTP/1.1\r\n\r\n"
                conn.sendall(b"pong")
                assert client.recv(1024) == b"pong"
            assert address[0] == "127.0.0.1"


def test_address_reports_bound_port():
    with Server(0, "127.0.0.1") as server:
        assert server.address == ("127.0.0.1", server.port)
        assert server.port > 0


def test_close_releases_descriptor():
    server = Server(0, "127.0.0.1")
    assert server.fileno() >= 0
    server.close()
    assert server.fileno() == -1


def test_context_manager_closes():
    with Server(0, "127.0.0.1") as server:
        pass
    assert server.fileno() == -1


def test_port_in_use_raises():
    with Server(0, "127.0.0.1") as server:
        with pytest.raises(OSError):
            Server(server.port, "127.0.0.1")


def test_announces_address(capsys):
    with Server(0, "127.0.0.1") as server:
        out = capsys.readouterr().out
        assert out == f"Server running on http://localhost:{server.port}\n"