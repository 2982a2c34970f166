"""Command-line entry point: load a map, validate it and play it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .game import Game
from .mapfile import MapPathError, is_valid_map_name, load_map
from .output import put_str
from .render import run
from .validation import InvalidMapError, validate_map

DEFAULT_TEXTURES = "textures"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map named by the single argument; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        put_str("Wrong number of arguments\n")
        return 1
    path = args[0]
    if not is_valid_map_name(path):
        put_str("Invalid path\n")
        return 1
    try:
        info = validate_map(load_map(path))
    except (InvalidMapError, MapPathError):
        put_str("Invalid map\n")
        return 1
    run(Game.from_map(info), DEFAULT_TEXTURES)
    return 0


if __name__ == "__main__":
    sys.exit(main())