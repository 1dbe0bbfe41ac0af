"""Move scoring."""

from typing import List, Optional, Sequence, Tuple

from .models import MoveError, Rect, ScoredWord, Square, INTERNAL_ERROR
from .grid import Tiles
from .placement import RACK_SIZE
from .tiles import TileSet


BINGO_BONUS = 50


def score_word(
    rect: Rect,
    squares: List[List[Square]],
    tiles: Tiles,
    new_tiles: Tiles,
    tile_set: TileSet,
) -> Tuple[Optional[ScoredWord], Optional[MoveError]]:
    """
    Score one word.

    Square multipliers only count for cells that were empty in `tiles`
    (the board before the move); tiles already on the board score their
    face value.
    """
    letters = []
    letter_points = 0
    word_multiplier = 1

    for i in range(rect.min_row, rect.max_row + 1):
        for j in range(rect.min_col, rect.max_col + 1):
            tile = new_tiles[i][j]
            if tile is None:
                return None, MoveError(
                    code=INTERNAL_ERROR,
                    message=f"Internal error: empty cell at {i},{j}",
                )
            letters.append(tile.letter)

            letter_multiplier = 1
            if tiles[i][j] is None:
                word_multiplier *= squares[i][j].word_multiplier
                letter_multiplier = squares[i][j].letter_multiplier
            letter_points += letter_multiplier * tile_set.score(tile.key)

    return ScoredWord(
        word=''.join(letters),
        rect=rect,
        letter_points=letter_points,
        word_multiplier=word_multiplier,
        points=letter_points * word_multiplier,
    ), None


def score_words(
    rects: Sequence[Rect],
    squares: List[List[Square]],
    tiles: Tiles,
    new_tiles: Tiles,
    tile_set: TileSet,
) -> Tuple[List[ScoredWord], Optional[MoveError]]:
    """Score every word of a move, stopping at the first internal error."""
    scored: List[ScoredWord] = []
    for rect in rects:
        word, error = score_word(rect, squares, tiles, new_tiles, tile_set)
        if error:
            return scored, error
        scored.append(word)
    return scored, None


def is_bingo(num_placements: int) -> bool:
    """A move using the whole rack earns the bonus."""
    return num_placements == RACK_SIZE


def total_points(scored: Sequence[ScoredWord], num_placements: int) -> int:
    """Sum of word scores plus the bingo bonus."""
    points = sum(word.points for word in scored)
    if is_bingo(num_placements):
        points += BINGO_BONUS
    return points
