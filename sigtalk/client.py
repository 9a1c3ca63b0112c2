"""The sending side: sends a message bit by bit as signals."""

from __future__ import annotations

import signal
import sys
import time
from collections.abc import Sequence
from types import FrameType

from sigtalk.bits import encode_byte
from sigtalk.signals import SignalError, bit_to_signal, install_handler, send_signal

USAGE = 'Usage = sigtalk-client <PID> "Message"'


class Client:
    """Sends bytes to a server, waiting for an acknowledgement after each bit.

    The server answers each bit with SIGUSR1 and the end of the message with
    SIGUSR2.  Those answers must reach this object's handlers; ``main``
    installs them for the running process.
    """

    def __init__(self, server_pid: int, poll_interval: float = 42e-6) -> None:
        if server_pid <= 0:
            raise ValueError(f"invalid server pid: {server_pid}")
        self.server_pid = server_pid
        self.poll_interval = poll_interval
        self._ready = False
        self.finished = False

    def _on_ack(self, signo: int, frame: FrameType | None) -> None:
        self._ready = True

    def _on_end(self, signo: int, frame: FrameType | None) -> None:
        self.finished = True

    def _install_handlers(self) -> None:
        install_handler(signal.SIGUSR1, self._on_ack)
        install_handler(signal.SIGUSR2, self._on_end)

    def _wait(self) -> None:
        while not (self._ready or self.finished):
            time.sleep(self.poll_interval)

    def send_byte(self, byte: int) -> None:
        """Send the eight bits of ``byte``, most significant first."""
        for bit in encode_byte(byte):
            self._ready = False
            send_signal(self.server_pid, bit_to_signal(bit))
            self._wait()
            if self.finished:
                return

    def send(self, message: str | bytes) -> bool:
        """Send ``message`` and its terminating zero byte.

        Returns whether the server confirmed the end of the message.
        """
        data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
        if b"\0" in data:
            raise ValueError("message may not contain a NUL byte")
        self.finished = False
        for byte in data + b"\0":
            if self.finished:
                break
            self.send_byte(byte)
        return self.finished


def main(argv: Sequence[str] | None = None) -> int:
    """Send the message given on the command line to the given server pid."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    pid_text, message = args
    try:
        client = Client(int(pid_text))
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        client._install_handlers()
        confirmed = client.send(message)
    except SignalError as exc:
        print(f"Signal failed: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    if confirmed:
        sys.stdout.write("200\n")
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())