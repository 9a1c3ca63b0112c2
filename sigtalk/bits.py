"""Turning bytes into a stream of bits, most significant first, and back."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain

BITS_PER_BYTE = 8


def encode_byte(byte: int) -> tuple[int, ...]:
    """Return the eight bits of ``byte``, most significant bit first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return tuple(
        (byte >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE))
    )


def encode_message(message: str | bytes) -> Iterator[int]:
    """Return the bits of ``message`` followed by the terminating zero byte.

    Text is encoded as UTF-8.  A message may not contain a zero byte, since
    the receiver takes that byte as the end of the message.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in data:
        raise ValueError("message may not contain a NUL byte")
    return chain.from_iterable(encode_byte(b) for b in data + b"\0")


class ByteDecoder:
    """Collects bits, most significant first, into whole bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """How many bits of the current byte have been received."""
        return self._count

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the byte once its eighth bit arrives."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, not {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self.reset()
        return byte

    def reset(self) -> None:
        """Drop any partly received byte."""
        self._value = 0
        self._count = 0