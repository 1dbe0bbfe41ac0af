"""
Pydantic models for the game layer.

This module contains the records owned by a Game (config, players, board,
moves) and the run configuration read by the command line. The Game class
itself lives in game.py.
"""

from typing import List, Dict, Optional
from pydantic import BaseModel, Field, model_validator

from ..scoring.models import Record, Square, PlacedTile, Placement
from ..scoring.grid import Tiles, empty_tiles, has_tiles, render_tiles


class GameConfig(Record):
    """Rule switches for a game."""
    use_dictionary: bool = True
    check_placement: bool = True


class Player(Record):
    """A player, identified by name."""
    name: str = Field(..., min_length=1)


class Move(Record):
    """A committed move. A pass has no placements, no words and no points."""
    placements: List[Placement] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    points: int = Field(0, ge=0)

    @property
    def is_pass(self) -> bool:
        return not self.placements


class Board(Record):
    """Square multipliers plus the tiles currently on them."""
    squares: List[List[Square]]
    tiles: List[List[Optional[PlacedTile]]]

    @model_validator(mode="after")
    def _check_dimensions(self) -> "Board":
        if len(self.squares) != len(self.tiles):
            raise ValueError(
                f"Board has {len(self.squares)} rows of squares but {len(self.tiles)} rows of tiles"
            )
        for i, (square_row, tile_row) in enumerate(zip(self.squares, self.tiles)):
            if len(square_row) != len(tile_row):
                raise ValueError(
                    f"Row {i} has {len(square_row)} squares but {len(tile_row)} tiles"
                )
        return self

    @classmethod
    def create(cls, squares: List[List[Square]]) -> "Board":
        """An empty board over the given squares."""
        return cls(squares=squares, tiles=empty_tiles(len(squares)))

    @property
    def size(self) -> int:
        return len(self.squares)

    def get(self, row: int, col: int) -> Optional[PlacedTile]:
        """Tile at (row, col), or None if empty or off the board."""
        if 0 <= row < len(self.tiles) and 0 <= col < len(self.tiles[row]):
            return self.tiles[row][col]
        return None

    def is_empty(self) -> bool:
        """True if no tiles are on the board."""
        return not has_tiles(self.tiles)

    def count_tiles(self) -> int:
        return sum(1 for row in self.tiles for tile in row if tile is not None)

    def with_tiles(self, tiles: Tiles) -> "Board":
        """A new board with the same squares and the given tiles."""
        return Board(squares=self.squares, tiles=tiles)

    def render(self) -> str:
        return render_tiles(self.squares, self.tiles)


class RunConfig(BaseModel):
    """Configuration for a command line run."""
    players: List[str] = Field(default_factory=list)
    use_dictionary: bool = True
    check_placement: bool = True
    dictionary: Optional[str] = None  # Path to a word list, one word per line
    layout: Optional[str] = None  # Layout text; standard board if omitted
    tile_scores: Optional[Dict[str, int]] = None
    turns: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dictionary(self) -> "RunConfig":
        if self.use_dictionary and not self.dictionary:
            raise ValueError("use_dictionary is enabled but no dictionary path was given")
        return self
