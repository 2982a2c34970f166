"""String helpers: searching, comparing, slicing, trimming, splitting and mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]


def _as_char(c: CharLike) -> str:
    """Normalise a one-character string or an integer code to a character.

    Integer codes are narrowed to their low byte, as a C ``char`` would be.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders the strings.

    The end of a string compares as code 0, so a proper prefix sorts first.
    """
    _require_non_negative(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0; otherwise None when absent.
    """
    _require_non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _require_non_negative(start, "start")
    _require_non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, chars: str) -> str:
    """Remove trailing characters found in ``chars``.

    Only the end of the string is trimmed, and a string of fewer than two
    characters is returned unchanged. NUL in ``chars`` is ignored.
    """
    if len(s) < 2:
        return s
    return s.rstrip(chars.replace("\0", ""))


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    ch = _as_char(sep)
    return [piece for piece in s.split(ch) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence, func: Callable[[int, object], object]) -> MutableSequence:
    """Call ``func(index, item)`` on each element of a mutable sequence.

    A result other than None replaces the element in place. The sequence is
    returned.
    """
    for index, item in enumerate(list(s)):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement
    return s


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``, so truncation
    happened when that length is not less than ``size``.
    """
    _require_non_negative(size, "size")
    return src[:max(size - 1, 0)], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``dest`` already fills the buffer it is left alone and the length
    reported is ``len(src) + size``.
    """
    _require_non_negative(size, "size")
    if len(dest) >= size:
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(src) + len(dest)