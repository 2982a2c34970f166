"""Map validation: walls, contents, rectangular shape and reachability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, Sequence

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
HAZARD = "B"
FILLED = "F"

_FILL_BLOCKERS = frozenset({WALL, FILLED, HAZARD})


class InvalidMapError(ValueError):
    """The map does not satisfy the game's rules."""


@dataclass(frozen=True)
class MapInfo:
    """A validated map and what was found in it; positions are (x, y)."""

    rows: tuple[str, ...]
    width: int
    height: int
    collectibles: int
    hazards: int
    player: tuple[int, int]
    exit: tuple[int, int]


def is_wall_row(row: str) -> bool:
    """True when ``row`` consists of wall tiles only."""
    return all(ch == WALL for ch in row)


def flood_fill(grid: Sequence[MutableSequence[str]], x: int, y: int) -> int:
    """Mark every tile reachable from (x, y) with 'F' and return how many were marked.

    Walls, hazards and tiles already marked stop the fill, as do the first
    row and column and anything outside the grid.
    """
    marked = 0
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if cx <= 0 or cy <= 0 or cy >= len(grid) or cx >= len(grid[cy]):
            continue
        if grid[cy][cx] in _FILL_BLOCKERS:
            continue
        grid[cy][cx] = FILLED
        marked += 1
        pending.extend(((cx, cy - 1), (cx - 1, cy), (cx, cy + 1), (cx + 1, cy)))
    return marked


def all_reachable(rows: Sequence[str], start: tuple[int, int]) -> bool:
    """True when every collectible and the exit can be reached from ``start``."""
    if not rows:
        return True
    width = len(rows[0])
    grid = [list(row) for row in rows]
    flood_fill(grid, *start)
    return not any(
        ch in (COLLECTIBLE, EXIT) for line in grid for ch in line[:width]
    )


def validate_map(rows: Sequence[str]) -> MapInfo:
    """Check ``rows`` against the game's rules and describe the map.

    Raises InvalidMapError naming the first rule broken.
    """
    if len(rows) < 2:
        raise InvalidMapError("map needs at least two rows")
    width = len(rows[0])
    if not is_wall_row(rows[0]):
        raise InvalidMapError("top row is not a wall")

    collectibles = hazards = exits = players = 0
    player = exit_pos = (0, 0)
    for y, row in enumerate(rows[1:-1], start=1):
        if not row or row[0] != WALL or row[-1] != WALL or len(row) != width:
            raise InvalidMapError(f"row {y} is not closed or has the wrong width")
        for x, ch in enumerate(row[1:], start=1):
            if ch == COLLECTIBLE:
                collectibles += 1
            elif ch == HAZARD:
                hazards += 1
            elif ch == EXIT:
                exits += 1
                exit_pos = (x, y)
            elif ch == PLAYER:
                players += 1
                player = (x, y)
            elif ch not in (WALL, FLOOR):
                raise InvalidMapError(f"unknown tile {ch!r} in row {y}")
    if collectibles == 0:
        raise InvalidMapError("map has no collectibles")
    if exits != 1:
        raise InvalidMapError("map must have exactly one exit")
    if players != 1:
        raise InvalidMapError("map must have exactly one player")

    if not is_wall_row(rows[-1]):
        raise InvalidMapError("bottom row is not a wall")
    if not all_reachable(rows, player):
        raise InvalidMapError("not every collectible and the exit can be reached")

    return MapInfo(
        rows=tuple(rows),
        width=width,
        height=len(rows),
        collectibles=collectibles,
        hazards=hazards,
        player=player,
        exit=exit_pos,
    )