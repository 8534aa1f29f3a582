"""String helpers: searching, comparing, slicing, splitting and number conversion.

Searches return an index into the string, or ``None`` when nothing is
found. As with NUL-terminated strings, looking for ``"\\0"`` finds the
position just past the last character.
"""

from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[int, str]

_BLANKS = "\n\v\f\t\r "
_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_ATOI_DIGIT_LIMIT = 20


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got a string of length {len(c)}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c)


def _check_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, size: int) -> int:
    """Compare at most ``size`` characters of two strings.

    The end of a string compares as code 0. Returns the difference of the
    codes of the first differing pair, or 0 if they match.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    for i in range(size):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, size: int) -> Optional[int]:
    """Return the index of the first ``needle`` lying wholly within the first
    ``size`` characters of ``haystack``, or ``None``.

    An empty needle is found at index 0.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if not needle:
        return 0
    index = haystack.find(needle, 0, size)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    return _check_str(first, "first") + _check_str(second, "second")


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` found in ``charset``."""
    _check_str(s, "s")
    _check_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _check_str(s, "s")
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence, func: Callable[[int, object], object]) -> MutableSequence:
    """Call ``func(index, item)`` on each element of ``chars`` in order.

    A result other than ``None`` replaces the element in place. Returns
    ``chars``.
    """
    for index, item in enumerate(chars):
        result = func(index, item)
        if result is not None:
            chars[index] = result
    return chars


def count_occurrences(s: str, c: CharLike) -> int:
    """Return how many times the character ``c`` appears in ``s``."""
    return s.count(_char(c))


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping around."""
    value &= (1 << _INT_BITS) - 1
    return value - (1 << _INT_BITS) if value > _INT_MAX else value


def atoi(s: str) -> int:
    """Parse a decimal integer after optional blanks and one sign.

    Parsing stops at the first non-digit. Values wrap as 32-bit integers;
    a run of 20 or more digits yields -1 when positive and 0 when negative.
    """
    _check_str(s, "s")
    text = s.lstrip(_BLANKS)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
        if len(digits) == _ATOI_DIGIT_LIMIT:
            return -1 if sign > 0 else 0
    value = int("".join(digits)) if digits else 0
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)