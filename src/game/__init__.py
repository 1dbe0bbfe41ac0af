"""Game state and move history for lettergrid."""

from .models import GameConfig, Player, Move, Board, RunConfig
from .game import Game, MoveResult, UNKNOWN_PLAYER

__all__ = [
    "GameConfig",
    "Player",
    "Move",
    "Board",
    "RunConfig",
    "Game",
    "MoveResult",
    "UNKNOWN_PLAYER",
]
