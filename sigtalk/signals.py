"""Installing signal handlers and sending the two signals that carry bits."""

from __future__ import annotations

import os
import signal
from collections.abc import Callable
from types import FrameType
from typing import Any, Union

Handler = Union[Callable[[int, Union[FrameType, None]], Any], int, signal.Handlers]


class SignalError(OSError):
    """Raised when a handler cannot be installed or a signal cannot be sent."""


def install_handler(signo: int, handler: Handler) -> Any:
    """Install ``handler`` for ``signo`` and return the previous handler."""
    try:
        return signal.signal(signo, handler)
    except OSError as exc:
        raise SignalError(exc.errno, f"cannot install handler: {exc.strerror}") from exc
    except ValueError as exc:
        raise SignalError(f"cannot install handler: {exc}") from exc


def send_signal(pid: int, signo: int) -> None:
    """Send ``signo`` to the process ``pid``."""
    try:
        os.kill(pid, signo)
    except OSError as exc:
        raise SignalError(exc.errno, f"cannot signal {pid}: {exc.strerror}") from exc
    except OverflowError as exc:
        raise SignalError(f"cannot signal {pid}: {exc}") from exc


def bit_to_signal(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``: SIGUSR1 for 1, SIGUSR2 for 0."""
    if bit not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, not {bit!r}")
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def signal_to_bit(signo: int) -> int:
    """Return the bit that ``signo`` carries."""
    if signo == signal.SIGUSR1:
        return 1
    if signo == signal.SIGUSR2:
        return 0
    raise ValueError(f"signal {signo} carries no bit")