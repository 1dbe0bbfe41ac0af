"""
Move evaluation for lettergrid.

Runs a proposed move through:
1. Tile and cell checks (unknown tiles, off-board, doubled or occupied cells)
2. Placement rules (rack size, single line, no gaps, touching) when enabled
3. Word extraction on the board with the move applied
4. Scoring (square multipliers for new tiles only, bingo bonus)
5. Dictionary check when a dictionary is given

Nothing is mutated: the outcome carries a new tile grid on success and
an error on rejection.
"""

import logging
from typing import List, Optional, Sequence

from .models import MoveError, MoveOutcome, Placement, Square, INVALID_WORDS
from .grid import Tiles, apply_placements, new_word_rects
from .placement import check_tiles, check_cells, check_placement_rules
from .score import score_words, total_points, is_bingo
from .tiles import TileSet
from .dictionary import Dictionary

log = logging.getLogger("lettergrid")


def _reject(error: MoveError) -> MoveOutcome:
    log.info("Move rejected (%s): %s", error.code, error.message)
    return MoveOutcome(valid=False, error=error)


def validate_words(words: List[str], dictionary: Dictionary) -> Optional[MoveError]:
    """Reject the move if any formed word is missing from the dictionary."""
    invalid = dictionary.invalid_words(words)
    if invalid:
        return MoveError(
            code=INVALID_WORDS,
            message="Words are not valid: " + ", ".join(invalid),
            words=invalid,
        )
    return None


def evaluate_move(
    squares: List[List[Square]],
    tiles: Tiles,
    tile_set: TileSet,
    placements: Sequence[Placement],
    check_placement: bool = True,
    dictionary: Optional[Dictionary] = None,
) -> MoveOutcome:
    """
    Validate and score a proposed move.

    An empty list of placements is a pass: always valid, no words, no points.

    Args:
        squares: Multiplier grid of the board
        tiles: Tiles on the board before the move
        tile_set: Point values for tile keys
        placements: Proposed placements
        check_placement: Whether to enforce the placement rules
        dictionary: Word list to check formed words against, or None to skip

    Returns:
        MoveOutcome with the new tile grid, words and points, or an error
    """
    if not placements:
        return MoveOutcome(valid=True, tiles=tiles)

    error = check_tiles(placements, tile_set) or check_cells(tiles, placements)
    if error:
        return _reject(error)

    new_tiles = apply_placements(tiles, placements)

    if check_placement:
        error = check_placement_rules(tiles, new_tiles, placements)
        if error:
            return _reject(error)

    rects = new_word_rects(new_tiles, placements)
    scored, error = score_words(rects, squares, tiles, new_tiles, tile_set)
    if error:
        return _reject(error)

    words = [w.word for w in scored]
    points = total_points(scored, len(placements))

    if dictionary is not None:
        error = validate_words(words, dictionary)
        if error:
            return _reject(error)

    log.debug("Move accepted: %s for %d points", "/".join(words) or "(no words)", points)

    return MoveOutcome(
        valid=True,
        tiles=new_tiles,
        words=words,
        scored_words=scored,
        points=points,
        bingo=is_bingo(len(placements)),
    )
