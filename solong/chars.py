"""Character classification, ASCII case mapping and integer/text conversion.

Every predicate and case mapping accepts either a one-character string or an
integer character code. Case mappings return the same kind they were given.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Union

CharLike = Union[str, int]

_SPACE_CHARS = "\t\n\v\f\r "
_SPACE_CODES = frozenset(map(ord, _SPACE_CHARS))
_ASCII_DIGITS = frozenset("0123456789")
_INT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def _wrap_int32(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(ch: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return or space."""
    return _code(ch) in _SPACE_CODES


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _same_kind(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _same_kind(c, code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Text without digits gives 0. Values outside the 32-bit
    range wrap around.
    """
    rest = text.lstrip(_SPACE_CHARS)
    negative = False
    if rest and rest[0] in "+-":
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(_ASCII_DIGITS.__contains__, rest))
    value = _wrap_int32(int(digits)) if digits else 0
    return _wrap_int32(-value) if negative else value


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)