"""Move validation and scoring for lettergrid."""

from .engine import evaluate_move, validate_words
from .models import (
    BLANK,
    Square,
    PlacedTile,
    Placement,
    Rect,
    MoveError,
    ScoredWord,
    MoveOutcome,
)
from .layout import STANDARD_LAYOUT, parse_squares, parse_square
from .tiles import TileSet, TILE_SCORES, STANDARD_TILE_SET
from .grid import (
    Tiles,
    empty_tiles,
    apply_placements,
    remove_placements,
    find_word_rects,
    new_word_rects,
    rects_intersect,
    read_word,
    render_tiles,
)
from .placement import RACK_SIZE, check_tiles, check_cells, check_placement_rules
from .score import BINGO_BONUS, score_word, score_words
from .dictionary import Dictionary
from .parsing import TurnEntry, parse_turn, parse_placement

__all__ = [
    # Pipeline
    "evaluate_move",
    "validate_words",
    # Models
    "BLANK",
    "Square",
    "PlacedTile",
    "Placement",
    "Rect",
    "MoveError",
    "ScoredWord",
    "MoveOutcome",
    # Layout and tiles
    "STANDARD_LAYOUT",
    "parse_squares",
    "parse_square",
    "TileSet",
    "TILE_SCORES",
    "STANDARD_TILE_SET",
    # Grid utilities
    "Tiles",
    "empty_tiles",
    "apply_placements",
    "remove_placements",
    "find_word_rects",
    "new_word_rects",
    "rects_intersect",
    "read_word",
    "render_tiles",
    # Placement and scoring
    "RACK_SIZE",
    "check_tiles",
    "check_cells",
    "check_placement_rules",
    "BINGO_BONUS",
    "score_word",
    "score_words",
    # Dictionary
    "Dictionary",
    # Turn notation
    "TurnEntry",
    "parse_turn",
    "parse_placement",
]
