"""
Placement checks for a proposed move.

Two groups of checks:
1. Cell checks, always applied: known tiles, on the board, one tile per
   cell, only onto empty cells.
2. Placement rules, applied when the game enforces them: rack size,
   single line, no gaps, touching the tiles already on the board.

Each check returns the first problem it finds as a MoveError, or None.
"""

import json
from typing import Optional, Sequence, Set, Tuple

from .models import (
    MoveError,
    Placement,
    INVALID_TILE,
    OUT_OF_BOUNDS,
    DUPLICATE_CELL,
    CELL_OCCUPIED,
    TOO_MANY_TILES,
    NOT_IN_LINE,
    GAP,
    NOT_TOUCHING,
)
from .grid import Tiles, bounding_rect, has_tiles
from .tiles import TileSet


RACK_SIZE = 7


def check_tiles(placements: Sequence[Placement], tile_set: TileSet) -> Optional[MoveError]:
    """Every placed tile must score as a known letter or the blank."""
    for p in placements:
        if not tile_set.is_known(p.tile.key):
            return MoveError(
                code=INVALID_TILE,
                message=f"Invalid tile: {json.dumps(p.tile.key)}",
            )
    return None


def check_cells(tiles: Tiles, placements: Sequence[Placement]) -> Optional[MoveError]:
    """Placements must be on the board, on distinct cells, and on empty cells."""
    num_rows = len(tiles)
    num_cols = len(tiles[0]) if tiles else 0

    seen: Set[Tuple[int, int]] = set()
    for p in placements:
        if not (0 <= p.row < num_rows and 0 <= p.col < num_cols):
            return MoveError(
                code=OUT_OF_BOUNDS,
                message=f"Tile at {p.row},{p.col} is off the board",
            )
        if (p.row, p.col) in seen:
            return MoveError(
                code=DUPLICATE_CELL,
                message=f"More than one tile placed at {p.row},{p.col}",
            )
        seen.add((p.row, p.col))

        if tiles[p.row][p.col] is not None:
            return MoveError(
                code=CELL_OCCUPIED,
                message=f"Cell {p.row},{p.col} already has a tile",
            )
    return None


def _touches(tiles: Tiles, row: int, col: int) -> bool:
    for i, j in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
        if 0 <= i < len(tiles) and 0 <= j < len(tiles[i]) and tiles[i][j] is not None:
            return True
    return False


def check_placement_rules(
    tiles: Tiles,
    new_tiles: Tiles,
    placements: Sequence[Placement],
) -> Optional[MoveError]:
    """
    Check the placement rules for a non-empty move.

    `tiles` is the board before the move, `new_tiles` the board with the
    placements applied.
    """
    if len(placements) > RACK_SIZE:
        return MoveError(
            code=TOO_MANY_TILES,
            message=f"Cannot place more than {RACK_SIZE} tiles",
        )

    rect = bounding_rect(placements)
    if rect.min_row != rect.max_row and rect.min_col != rect.max_col:
        return MoveError(code=NOT_IN_LINE, message="Tiles must be placed in a line")

    for i in range(rect.min_row, rect.max_row + 1):
        for j in range(rect.min_col, rect.max_col + 1):
            if new_tiles[i][j] is None:
                return MoveError(code=GAP, message="Gaps between tiles are not allowed")

    # The first move on an empty board has nothing to touch
    if has_tiles(tiles) and not any(_touches(tiles, p.row, p.col) for p in placements):
        return MoveError(code=NOT_TOUCHING, message="Tiles must touch existing tiles")

    return None
