"""Reading map files: line splitting, blank-line handling and path checks."""

from __future__ import annotations

import os
from typing import IO, AnyStr, Iterable, Iterator, Union

from .textops import strtrim

BUFFER_SIZE = 42
_TRIM_CHARS = "\t\n\v\f\r "
_BLANK_CODES = frozenset(range(9, 14)) | {32}

PathLike = Union[str, "os.PathLike[str]"]


class MapPathError(OSError):
    """The map path is malformed or the file cannot be read."""


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` without their newline, reading in chunks.

    A final newline does not produce an empty trailing line. Works on text
    and binary streams alike.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    pending = None
    newline = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        if pending is None:
            pending = chunk[:0]
            newline = "\n" if isinstance(chunk, str) else b"\n"
        pending += chunk
        while newline in pending:
            line, pending = pending.split(newline, 1)
            yield line
    if pending:
        yield pending


def is_blank_line(line: str) -> bool:
    """True when ``line`` holds only whitespace (or nothing at all)."""
    return all(ord(ch) in _BLANK_CODES for ch in line)


def read_map_lines(lines: Iterable[str]) -> list[str]:
    """Collect the map rows from a sequence of lines.

    Leading blank lines are skipped. The first row is kept as it is; the
    following rows lose their trailing whitespace. The map ends at the first
    blank line after it, and anything beyond is ignored.
    """
    it = iter(lines)
    first = next((line for line in it if not is_blank_line(line)), None)
    if first is None:
        return []
    rows = [first]
    for line in it:
        if is_blank_line(line):
            break
        rows.append(strtrim(line, _TRIM_CHARS))
    return rows


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else "\0"


def is_valid_map_name(path: PathLike) -> bool:
    """Check that ``path`` has an extension of an accepted form and can be opened."""
    name = os.fspath(path)
    dot = name.find(".")
    if dot < 0:
        return False
    if (
        _char_at(name, dot + 1) != "b"
        and _char_at(name, dot + 2) == "e"
        and _char_at(name, dot + 3) == "r"
        and _char_at(name, dot + 4) != "\0"
    ):
        return False
    try:
        fd = os.open(name, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def load_map(path: PathLike) -> list[str]:
    """Read the map rows from the file at ``path``.

    Raises MapPathError when the path is not acceptable or cannot be read.
    """
    if not is_valid_map_name(path):
        raise MapPathError(f"invalid path: {os.fspath(path)}")
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return read_map_lines(read_lines(handle))
    except OSError as exc:
        raise MapPathError(f"cannot read map: {os.fspath(path)}") from exc