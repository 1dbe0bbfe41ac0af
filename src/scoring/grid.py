"""Tile grid utilities and word extraction."""

from typing import List, Optional, Sequence

from .models import PlacedTile, Placement, Rect, Square
from .layout import square_char


Tiles = List[List[Optional[PlacedTile]]]


def empty_tiles(size: int) -> Tiles:
    """An empty size x size tile grid."""
    return [[None] * size for _ in range(size)]


def apply_placements(tiles: Tiles, placements: Sequence[Placement]) -> Tiles:
    """Return a new grid with the placements filled in; `tiles` is untouched."""
    new_tiles = [row[:] for row in tiles]
    for p in placements:
        new_tiles[p.row][p.col] = p.tile
    return new_tiles


def remove_placements(tiles: Tiles, placements: Sequence[Placement]) -> Tiles:
    """Return a new grid with the placed cells emptied; `tiles` is untouched."""
    new_tiles = [row[:] for row in tiles]
    for p in placements:
        new_tiles[p.row][p.col] = None
    return new_tiles


def has_tiles(tiles: Tiles) -> bool:
    """True if any cell is occupied."""
    return any(tile is not None for row in tiles for tile in row)


def intervals_intersect(start1: int, end1: int, start2: int, end2: int) -> bool:
    """Whether two inclusive intervals share at least one point."""
    return not (end1 < start2 or end2 < start1)


def rects_intersect(rect1: Rect, rect2: Rect) -> bool:
    """Whether two rectangles overlap on both axes."""
    return (
        intervals_intersect(rect1.min_row, rect1.max_row, rect2.min_row, rect2.max_row)
        and intervals_intersect(rect1.min_col, rect1.max_col, rect2.min_col, rect2.max_col)
    )


def bounding_rect(placements: Sequence[Placement]) -> Rect:
    """Smallest rectangle containing every placement."""
    rows = [p.row for p in placements]
    cols = [p.col for p in placements]
    return Rect(min(rows), min(cols), max(rows), max(cols))


def find_word_rects(tiles: Tiles) -> List[Rect]:
    """
    Find every maximal horizontal and vertical run of 2+ occupied cells.

    Rows are scanned first (top to bottom), then columns (left to right),
    so the result order is stable for a given grid.
    """
    rects: List[Rect] = []
    if not tiles:
        return rects

    num_rows = len(tiles)
    num_cols = len(tiles[0])

    # Horizontal runs
    for i in range(num_rows):
        start = None
        for j in range(num_cols + 1):  # +1 to flush the last run
            occupied = j < num_cols and tiles[i][j] is not None
            if occupied:
                if start is None:
                    start = j
            else:
                if start is not None and j - 1 > start:
                    rects.append(Rect(i, start, i, j - 1))
                start = None

    # Vertical runs
    for j in range(num_cols):
        start = None
        for i in range(num_rows + 1):  # +1 to flush the last run
            occupied = i < num_rows and tiles[i][j] is not None
            if occupied:
                if start is None:
                    start = i
            else:
                if start is not None and i - 1 > start:
                    rects.append(Rect(start, j, i - 1, j))
                start = None

    return rects


def new_word_rects(tiles: Tiles, placements: Sequence[Placement]) -> List[Rect]:
    """
    Words on `tiles` that contain at least one of the placements.

    This picks up the main word along the placement line and every cross
    word hanging off a placed tile, but not words that merely pass
    through an old tile in the middle of the line.
    """
    cells = [Rect(p.row, p.col, p.row, p.col) for p in placements]
    return [
        rect for rect in find_word_rects(tiles)
        if any(rects_intersect(rect, cell) for cell in cells)
    ]


def read_word(tiles: Tiles, rect: Rect) -> str:
    """Displayed letters along `rect`. Raises ValueError on an empty cell."""
    letters = []
    for i in range(rect.min_row, rect.max_row + 1):
        for j in range(rect.min_col, rect.max_col + 1):
            tile = tiles[i][j]
            if tile is None:
                raise ValueError(f"Empty cell at {i},{j}")
            letters.append(tile.letter)
    return ''.join(letters)


def render_tiles(squares: List[List[Square]], tiles: Tiles) -> str:
    """
    Render the board to a string.

    Normal tiles are shown uppercase, blanks lowercase, and empty cells
    by their layout character.
    """
    lines = []
    for square_row, tile_row in zip(squares, tiles):
        chars = []
        for square, tile in zip(square_row, tile_row):
            if tile is None:
                chars.append(square_char(square))
            elif tile.is_blank:
                chars.append(tile.letter.lower())
            else:
                chars.append(tile.letter.upper())
        lines.append(''.join(chars))
    return '\n'.join(lines)
