"""ASCII character classification and case conversion.

Every function accepts either a single-character string or an integer
character code. Classification follows the plain ASCII rules, so letters
outside ``A``-``Z`` / ``a``-``z`` are never alphabetic.
"""

from typing import Union

CharLike = Union[int, str]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, validating its type."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got a string of length {len(c)}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return _is_lower_code(code) or _is_upper_code(code)


def is_digit(c: CharLike) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True if ``c`` is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Convert an ASCII lowercase letter to uppercase; leave anything else as is.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_lower_code(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Convert an ASCII uppercase letter to lowercase; leave anything else as is.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_upper_code(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code