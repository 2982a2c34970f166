"""Drawing the game in a window and turning key presses into moves."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .game import Direction, Game, Outcome
from .output import put_str
from .validation import COLLECTIBLE, EXIT, FLOOR, HAZARD, PLAYER, WALL

TILE_SIZE = 60
TEXT_COLOR = (0, 0, 0)
WINDOW_TITLE = "So_long"
FRAME_CYCLE = 300
FRAMES_PER_SPRITE = 150
FRAME_RATE = 60

KEY_ESCAPE = 0xFF1B
KEY_W_LOWER = 0x0077
KEY_A_LOWER = 0x0061
KEY_S_LOWER = 0x0073
KEY_D_LOWER = 0x0064
KEY_A = 0x0041
KEY_D = 0x0044
KEY_W = 0x0057
KEY_S = 0x0053
KEY_LEFT = 0xFF51
KEY_UP = 0xFF52
KEY_RIGHT = 0xFF53
KEY_DOWN = 0xFF54

_KEY_DIRECTIONS = {
    KEY_W_LOWER: Direction.UP,
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_S_LOWER: Direction.DOWN,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
    KEY_D_LOWER: Direction.RIGHT,
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_A_LOWER: Direction.LEFT,
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
}

_STATIC_SPRITES = {
    WALL: "W.xpm",
    EXIT: "E.xpm",
    PLAYER: "P.xpm",
    HAZARD: "V.xpm",
    FLOOR: "B.xpm",
}
_COLLECTIBLE_SPRITES = ("C1.xpm", "C2.xpm")
SPRITE_FILES = (*_STATIC_SPRITES.values(), *_COLLECTIBLE_SPRITES)


def collectible_frame(counter: int) -> int:
    """Animation frame (1 then 0) of collectibles for a frame counter."""
    if counter < 0:
        raise ValueError(f"frame counter must not be negative, got {counter}")
    return 1 if counter % FRAME_CYCLE < FRAMES_PER_SPRITE else 0


def sprite_name(tile: str, frame: int) -> Optional[str]:
    """File name of the sprite drawn for ``tile``, or None if nothing is drawn."""
    if tile == COLLECTIBLE:
        if frame not in (0, 1):
            raise ValueError(f"collectible frame must be 0 or 1, got {frame}")
        return _COLLECTIBLE_SPRITES[frame]
    return _STATIC_SPRITES.get(tile)


def direction_for_key(key: int) -> Optional[Direction]:
    """Direction bound to a keysym (WASD in either case, or an arrow key)."""
    return _KEY_DIRECTIONS.get(key)


def run(game: Game, textures_dir: Union[str, "os.PathLike[str]"] = "textures") -> Optional[Outcome]:
    """Play ``game`` in a window until it is won, lost or closed.

    Returns the final outcome, or None when the player quits.
    """
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    textures = Path(textures_dir)
    key_translation = {
        pygame.K_ESCAPE: KEY_ESCAPE,
        pygame.K_UP: KEY_UP,
        pygame.K_DOWN: KEY_DOWN,
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_RIGHT: KEY_RIGHT,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.width * TILE_SIZE, game.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        sprites = {
            name: pygame.image.load(str(textures / name)).convert_alpha()
            for name in SPRITE_FILES
        }
        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()
        counter = 0
        text_pos = ((game.width // 2) * TILE_SIZE, (game.height - 1) * TILE_SIZE)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
                if event.type != pygame.KEYUP:
                    continue
                key = key_translation.get(event.key, event.key)
                if key == KEY_ESCAPE:
                    return None
                direction = direction_for_key(key)
                if direction is None:
                    continue
                outcome = game.step(direction)
                if outcome is Outcome.WON:
                    put_str("You win!!!\n")
                    return outcome
                if outcome is Outcome.LOST:
                    put_str("Game Over!!!\n")
                    return outcome

            frame = collectible_frame(counter)
            counter = (counter + 1) % FRAME_CYCLE
            for y, row in enumerate(game.grid):
                for x, tile in enumerate(row):
                    name = sprite_name(tile, frame)
                    if name is not None:
                        screen.blit(sprites[name], (x * TILE_SIZE, y * TILE_SIZE))
            screen.blit(font.render(str(game.moves), True, TEXT_COLOR), text_pos)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()