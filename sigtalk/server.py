"""The receiving side: rebuilds bytes from signals and echoes each message."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Sequence
from typing import BinaryIO

from sigtalk.bits import ByteDecoder
from sigtalk.printf import printf
from sigtalk.signals import SignalError, send_signal, signal_to_bit

Notifier = Callable[[int, int], None]

_BIT_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


class Server:
    """Collects bits sent as SIGUSR1 (one) and SIGUSR2 (zero).

    Every complete byte is written to ``out``.  A zero byte ends the message:
    a newline is written and the sender is told with SIGUSR2.  Every other bit
    is acknowledged with SIGUSR1.
    """

    def __init__(
        self,
        out: BinaryIO | None = None,
        notify: Notifier | None = None,
    ) -> None:
        self.out = sys.stdout.buffer if out is None else out
        self.notify = send_signal if notify is None else notify
        self._decoder = ByteDecoder()

    def _write(self, data: bytes) -> None:
        self.out.write(data)
        self.out.flush()

    def handle(self, signo: int, pid: int) -> None:
        """Take one bit-carrying signal ``signo`` that came from process ``pid``."""
        byte = self._decoder.feed(signal_to_bit(signo))
        if byte == 0:
            self._write(b"\n")
            self.notify(pid, signal.SIGUSR2)
            return
        if byte is not None:
            self._write(bytes([byte]))
        self.notify(pid, signal.SIGUSR1)

    def serve_forever(self) -> None:
        """Wait for bit signals and handle them, one at a time, for ever."""
        signal.pthread_sigmask(signal.SIG_BLOCK, _BIT_SIGNALS)
        while True:
            info = signal.sigwaitinfo(_BIT_SIGNALS)
            self.handle(info.si_signo, info.si_pid)


def main(argv: Sequence[str] | None = None) -> int:
    """Print this process's id, then receive messages until interrupted."""
    printf("PID: %d\n", os.getpid())
    try:
        Server().serve_forever()
    except SignalError as exc:
        print(f"Signal failed: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())