"""A small printf that knows the conversions %s %c %d %i %u %x %X %p and %%."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_CONVERSIONS = frozenset("scdiuxXp%")


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{spec} needs an integer, not {type(value).__name__}"
        ) from None


def _signed32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _POINTER_MASK
    if not address:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "c":
        return _char(value)
    if spec in ("d", "i"):
        return str(_signed32(_as_int(value, spec)))
    if spec == "u":
        return str(_as_int(value, spec) & _UINT32_MASK)
    if spec == "x":
        return f"{_as_int(value, spec) & _UINT32_MASK:x}"
    if spec == "X":
        return f"{_as_int(value, spec) & _UINT32_MASK:X}"
    return _pointer(value)


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``.

    Integers are taken as 32-bit C values: ``%d`` wraps to a signed int,
    ``%u`` and ``%x`` to an unsigned one.  Extra arguments are ignored.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec not in _CONVERSIONS:
            raise ValueError(f"unsupported conversion '%{spec}'")
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = render(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    out.flush()
    return len(text)