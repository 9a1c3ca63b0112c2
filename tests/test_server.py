import io
import signal

import pytest

from sigtalk.bits import encode_byte, encode_message
from sigtalk.server import Server


def _server():
    out = io.BytesIO()
    sent = []
    server = Server(out=out, notify=lambda pid, signo: sent.append((pid, signo)))
    return server, out, sent


def _feed(server, bits, pid=4242):
    for bit in bits:
        server.handle(signal.SIGUSR1 if bit else signal.SIGUSR2, pid)


def test_message_is_written_with_newline():
    server, out, _ = _server()
    _feed(server, encode_message("hi"))
    assert out.getvalue() == b"hi\n"


def test_every_bit_acknowledged_and_end_signalled():
    server, _, sent = _server()
    _feed(server, encode_message("abc"))
    assert len(sent) == 8 * 4
    assert all(signo == signal.SIGUSR1 for _, signo in sent[:-1])
    assert sent[-1][1] == signal.SIGUSR2


def test_notifications_go_to_sender():
    server, _, sent = _server()
    _feed(server, encode_byte(ord("x")), pid=777)
    assert {pid for pid, _ in sent} == {777}


def test_partial_byte_writes_nothing():
    server, out, sent = _server()
    _feed(server, encode_byte(ord("Q"))[:7])
    assert out.getvalue() == b""
    assert len(sent) == 7


def test_utf8_round_trip():
    server, out, _ = _server()
    _feed(server, encode_message("ñandú"))
    assert out.getvalue().decode("utf-8") == "ñandú\n"


def test_two_messages_in_a_row():
    server, out, _ = _server()
    _feed(server, encode_message("one"))
    _feed(server, encode_message("two"))
    assert out.getvalue() == b"one\ntwo\n"


def test_other_signal_is_rejected():
    server, _, _ = _server()
    with pytest.raises(ValueError):
        server.handle(signal.SIGINT, 1)