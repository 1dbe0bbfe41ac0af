"""Tile values and tile sets."""

from typing import Dict
from pydantic import field_validator

from .models import BLANK, Record


# Standard English letter values; the blank is worth nothing
TILE_SCORES: Dict[str, int] = {
    BLANK: 0,
    "a": 1, "b": 3, "c": 3, "d": 2, "e": 1, "f": 4, "g": 2,
    "h": 4, "i": 1, "j": 8, "k": 5, "l": 1, "m": 3, "n": 1,
    "o": 1, "p": 3, "q": 10, "r": 1, "s": 1, "t": 1, "u": 1,
    "v": 4, "w": 4, "x": 8, "y": 4, "z": 10,
}


class TileSet(Record):
    """Point value of every tile key."""

    tile_scores: Dict[str, int]

    @field_validator("tile_scores")
    @classmethod
    def _check_scores(cls, scores: Dict[str, int]) -> Dict[str, int]:
        # Tiles are keyed by lowercase letter
        normalized: Dict[str, int] = {}
        for key, value in scores.items():
            if len(key) != 1 or not (key.isalpha() or key == BLANK):
                raise ValueError(f"Tile key must be a single letter or the blank: {key!r}")
            if key == BLANK and value != 0:
                raise ValueError(f"The blank must be worth 0 points, got {value}")
            if value < 0:
                raise ValueError(f"Tile {key!r} has a negative score ({value})")
            lowered = key.lower()
            if lowered in normalized:
                raise ValueError(f"Tile {lowered!r} is given more than once")
            normalized[lowered] = value
        return normalized

    def is_known(self, key: str) -> bool:
        """True if `key` is a tile of this set (the blank always is)."""
        return key == BLANK or key in self.tile_scores

    def score(self, key: str) -> int:
        """Points for a tile key. Raises KeyError for unknown keys."""
        if key == BLANK:
            return 0
        return self.tile_scores[key]


STANDARD_TILE_SET = TileSet(tile_scores=TILE_SCORES)
