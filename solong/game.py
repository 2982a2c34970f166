"""Game state and the rules for moving the player around a validated map."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .validation import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    HAZARD,
    PLAYER,
    WALL,
    MapInfo,
)


class Direction(Enum):
    """A step of one tile; the value is the (dx, dy) offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Outcome(Enum):
    """What a single step led to."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    LOST = "lost"


@dataclass
class Game:
    """A game in progress: the tiles, the player, the exit and the counters."""

    grid: list[list[str]]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int
    moves: int = 0
    result: Optional[Outcome] = field(default=None)

    @classmethod
    def from_map(cls, info: MapInfo) -> "Game":
        """Start a game on a validated map."""
        return cls(
            grid=[list(row) for row in info.rows],
            player=info.player,
            exit=info.exit,
            collectibles=info.collectibles,
        )

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def finished(self) -> bool:
        """True once the game has been won or lost."""
        return self.result is not None

    def tile(self, x: int, y: int) -> str:
        """The tile at column ``x`` of row ``y``."""
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def step(self, direction: Direction) -> Outcome:
        """Try to move the player one tile in ``direction``.

        Walls block the move. Reaching the exit with every collectible taken
        wins and stepping on a hazard loses; either ends the game without
        counting the move. The exit can be walked over while collectibles
        remain and reappears once the player leaves it.
        """
        if self.finished:
            raise RuntimeError("the game is already over")
        x, y = self.player
        tx, ty = x + direction.dx, y + direction.dy
        target = self.tile(tx, ty)
        if target == COLLECTIBLE:
            self.collectibles -= 1
        elif target == WALL:
            return Outcome.BLOCKED
        elif target == EXIT and self.collectibles == 0:
            self.result = Outcome.WON
            return Outcome.WON
        elif target == HAZARD:
            self.result = Outcome.LOST
            return Outcome.LOST
        self.grid[ty][tx] = PLAYER
        self.grid[y][x] = EXIT if (x, y) == self.exit else FLOOR
        self.moves += 1
        self.player = (tx, ty)
        return Outcome.MOVED

    def rows(self) -> list[str]:
        """The current map as strings, one per row."""
        return ["".join(row) for row in self.grid]