import io
import os
import signal

import pytest

from sigtalk.client import USAGE, Client, main
from sigtalk.server import Server


@pytest.fixture
def loopback():
    """A client whose signals reach an in-process server that answers it."""
    out = io.BytesIO()
    client = Client(os.getpid(), poll_interval=1e-4)

    def notify(pid, signo):
        if signo == signal.SIGUSR1:
            client._on_ack(signo, None)
        else:
            client._on_end(signo, None)

    server = Server(out=out, notify=notify)

    def route(signo, frame):
        server.handle(signo, os.getpid())

    old1 = signal.signal(signal.SIGUSR1, route)
    old2 = signal.signal(signal.SIGUSR2, route)
    try:
        yield client, out
    finally:
        signal.signal(signal.SIGUSR1, old1)
        signal.signal(signal.SIGUSR2, old2)


def test_send_delivers_message(loopback):
    client, out = loopback
    assert client.send("hello") is True
    assert out.getvalue() == b"hello\n"


def test_send_utf8(loopback):
    client, out = loopback
    assert client.send("ñ") is True
    assert out.getvalue() == "ñ\n".encode("utf-8")


def test_send_byte_delivers_one_byte(loopback):
    client, out = loopback
    client.send_byte(ord("A"))
    assert out.getvalue() == b"A"
    assert client.finished is False


def test_empty_message_only_ends(loopback):
    client, out = loopback
    assert client.send("") is True
    assert out.getvalue() == b"\n"


def test_send_rejects_nul():
    client = Client(os.getpid())
    with pytest.raises(ValueError):
        client.send("a\0b")


def test_send_byte_rejects_out_of_range():
    client = Client(os.getpid())
    with pytest.raises(ValueError):
        client.send_byte(256)


def test_invalid_pid_rejected():
    with pytest.raises(ValueError):
        Client(0)


def test_main_wrong_arguments(capsys):
    assert main(["123"]) == 1
    assert USAGE in capsys.readouterr().err


def test_main_non_numeric_pid(capsys):
    assert main(["abc", "hello"]) == 1
    assert USAGE in capsys.readouterr().err