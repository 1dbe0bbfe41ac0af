"""Data models for move scoring."""

from typing import List, Optional, NamedTuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


BLANK = " "

# Error codes
INVALID_TILE = "INVALID_TILE"
OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
DUPLICATE_CELL = "DUPLICATE_CELL"
CELL_OCCUPIED = "CELL_OCCUPIED"
TOO_MANY_TILES = "TOO_MANY_TILES"
NOT_IN_LINE = "NOT_IN_LINE"
GAP = "GAP"
NOT_TOUCHING = "NOT_TOUCHING"
INVALID_WORDS = "INVALID_WORDS"
INTERNAL_ERROR = "INTERNAL_ERROR"
EMPTY_TURN = "EMPTY_TURN"
INVALID_PLACEMENT = "INVALID_PLACEMENT"


class Record(BaseModel):
    """Immutable record serialized with camelCase field names."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Square(Record):
    """Letter and word multiplier of one board cell."""
    letter_multiplier: int = Field(1, ge=1)
    word_multiplier: int = Field(1, ge=1)


class PlacedTile(Record):
    """
    A tile on the board.

    `key` is what the tile scores as (a letter, or BLANK), `letter` is
    what it reads as in words. They only differ for blank tiles.
    """
    key: str
    letter: str = Field(..., pattern=r'^[a-z]$')

    @field_validator("letter", mode="before")
    @classmethod
    def _lowercase_letter(cls, value):
        return value.lower() if isinstance(value, str) else value

    @classmethod
    def of(cls, letter: str) -> "PlacedTile":
        """A normal tile for `letter`."""
        return cls(key=letter.lower(), letter=letter)

    @classmethod
    def blank(cls, letter: str) -> "PlacedTile":
        """A blank tile standing in for `letter`."""
        return cls(key=BLANK, letter=letter)

    @property
    def is_blank(self) -> bool:
        return self.key == BLANK


class Placement(Record):
    """One tile put on one cell."""
    tile: PlacedTile
    row: int
    col: int

    @classmethod
    def at(cls, row: int, col: int, letter: str, blank: bool = False) -> "Placement":
        tile = PlacedTile.blank(letter) if blank else PlacedTile.of(letter)
        return cls(tile=tile, row=row, col=col)


class Rect(NamedTuple):
    """Inclusive row/column span of a word on the board."""
    min_row: int
    min_col: int
    max_row: int
    max_col: int


class MoveError(BaseModel):
    """A reason a move was rejected."""
    code: str
    message: str
    words: List[str] = Field(default_factory=list)


class ScoredWord(BaseModel):
    """Score breakdown for one word formed by a move."""
    word: str
    rect: Rect
    letter_points: int = 0
    word_multiplier: int = 1
    points: int = 0


class MoveOutcome(BaseModel):
    """Result of running a proposed move through the scoring pipeline."""
    valid: bool
    error: Optional[MoveError] = None
    tiles: Optional[List[List[Optional[PlacedTile]]]] = None
    words: List[str] = Field(default_factory=list)
    scored_words: List[ScoredWord] = Field(default_factory=list)
    points: int = 0
    bingo: bool = False
