"""A small printf supporting ``%c %s %p %d %i %u %x %X %%``.

Integers follow C widths: ``%d``/``%i`` wrap to signed 32 bits, ``%u`` and
``%x``/``%X`` to unsigned 32 bits and ``%p`` to unsigned 64 bits. An unknown
conversion, or a ``%`` at the very end, produces no output.
"""

from typing import Iterator, Optional

from .output import _write_all

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1
_INT_MAX = (1 << 31) - 1
_HEX_DIGITS = "0123456789abcdef"


def _check_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an integer, got {type(value).__name__}")
    return value


def decimal_length(n: int) -> int:
    """Number of characters in the decimal form of ``n``, minus sign included."""
    _check_int(n, "decimal_length")
    return len(str(n))


def hex_length(n: int) -> int:
    """Number of hexadecimal digits of a non-negative ``n``; 0 for 0."""
    _check_int(n, "hex_length")
    if n < 0:
        raise ValueError(f"hex_length expects a non-negative integer, got {n}")
    return (n.bit_length() + 3) // 4


def hex_digit(digit: int, kind: str) -> str:
    """The hexadecimal character for ``digit`` (0-15); uppercase when ``kind`` is ``"X"``."""
    _check_int(digit, "hex_digit")
    if not 0 <= digit <= 15:
        raise ValueError(f"hex digit out of range: {digit}")
    ch = _HEX_DIGITS[digit]
    return ch.upper() if kind == "X" else ch


def _to_hex(n: int, kind: str) -> str:
    return format(n, "X" if kind == "X" else "x")


def _next_arg(arguments: Iterator[object], conversion: str) -> object:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def _convert(conversion: Optional[str], arguments: Iterator[object]) -> str:
    if conversion == "%":
        return "%"
    if conversion == "c":
        value = _next_arg(arguments, conversion)
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c expects a single character")
            return value
        return chr(_check_int(value, "%c") & 0xFF)
    if conversion == "s":
        value = _next_arg(arguments, conversion)
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value
    if conversion == "p":
        value = _next_arg(arguments, conversion)
        address = 0 if value is None else _check_int(value, "%p") & _ULONG_MASK
        if not address:
            return "(nil)"
        return "0x" + _to_hex(address, "x")
    if conversion in ("d", "i"):
        value = _check_int(_next_arg(arguments, conversion), f"%{conversion}") & _UINT_MASK
        if value > _INT_MAX:
            value -= 1 << 32
        return str(value)
    if conversion == "u":
        return str(_check_int(_next_arg(arguments, conversion), "%u") & _UINT_MASK)
    if conversion in ("x", "X"):
        value = _check_int(_next_arg(arguments, conversion), f"%{conversion}") & _UINT_MASK
        return _to_hex(value, conversion)
    return ""


def format_string(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Raises TypeError when arguments run out or have the wrong type; extra
    arguments are ignored.
    """
    arguments = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch == "%":
            pieces.append(_convert(next(chars, None), arguments))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: object, fd: int = 1) -> int:
    """Format like :func:`format_string` and write the UTF-8 result to ``fd``.

    Returns the number of bytes written.
    """
    return _write_all(fd, format_string(fmt, *args).encode())