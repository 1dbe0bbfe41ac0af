"""Game state, move history and scores for lettergrid."""

import logging
from pathlib import Path
from typing import List, Dict, Optional, Sequence, Tuple, Union
from pydantic import BaseModel, Field

from .models import GameConfig, Player, Move, Board
from ..scoring.models import Record, Placement, MoveError
from ..scoring.layout import STANDARD_LAYOUT, parse_squares
from ..scoring.tiles import TileSet, STANDARD_TILE_SET
from ..scoring.grid import remove_placements
from ..scoring.dictionary import Dictionary
from ..scoring.engine import evaluate_move

log = logging.getLogger("lettergrid")

UNKNOWN_PLAYER = "unknown"


class Game(Record):
    """
    Scores a word game turn by turn.

    A Game is immutable: every operation that changes it returns a new
    Game and leaves the original untouched, so a rejected move never has
    anything to roll back.

    Attributes:
        config: Rule switches (dictionary checking, placement rules)
        board: Square multipliers and the tiles played so far
        tile_set: Point value of every tile
        players: Players in turn order
        moves: Committed moves, oldest first
        dictionary: Word list for dictionary checking (never serialized)
    """

    config: GameConfig = Field(default_factory=GameConfig)
    board: Board
    tile_set: TileSet = STANDARD_TILE_SET
    players: List[Player] = Field(default_factory=list)
    moves: List[Move] = Field(default_factory=list)
    dictionary: Optional[Dictionary] = Field(default=None, exclude=True)

    @classmethod
    def create(
        cls,
        players: Sequence[str] = (),
        use_dictionary: Optional[bool] = None,
        check_placement: bool = True,
        layout: str = STANDARD_LAYOUT,
        tile_set: TileSet = STANDARD_TILE_SET,
        dictionary: Optional[Dictionary] = None,
    ) -> "Game":
        """
        Factory method to create a new game with an empty board.

        Args:
            players: Player names in turn order
            use_dictionary: Reject words missing from the dictionary
                (defaults to whether a dictionary is given)
            check_placement: Enforce the placement rules
            layout: Board layout text
            tile_set: Point values for tiles
            dictionary: Word list to check words against

        Returns:
            A new Game with no moves
        """
        if use_dictionary is None:
            use_dictionary = dictionary is not None

        return cls(
            config=GameConfig(use_dictionary=use_dictionary, check_placement=check_placement),
            board=Board.create(parse_squares(layout)),
            tile_set=tile_set,
            players=[Player(name=name) for name in players],
            dictionary=dictionary,
        )

    def set_players(self, names: Sequence[str]) -> "Game":
        """A copy of this game with a new player list."""
        return self.model_copy(update={"players": [Player(name=name) for name in names]})

    def configure(
        self,
        use_dictionary: Optional[bool] = None,
        check_placement: Optional[bool] = None,
    ) -> "Game":
        """A copy of this game with the given rule switches changed."""
        update = {}
        if use_dictionary is not None:
            update["use_dictionary"] = use_dictionary
        if check_placement is not None:
            update["check_placement"] = check_placement
        return self.model_copy(update={"config": self.config.model_copy(update=update)})

    def make_move(self, placements: Sequence[Placement]) -> "MoveResult":
        """
        Validate, score and commit a move.

        An empty sequence of placements is a pass.

        Returns:
            MoveResult holding the new game on success, or this same game
            and the reason on rejection

        Raises:
            ValueError: If dictionary checking is on but no dictionary was given
        """
        dictionary = None
        if self.config.use_dictionary:
            if self.dictionary is None:
                raise ValueError("Dictionary checking is enabled but the game has no dictionary")
            dictionary = self.dictionary

        outcome = evaluate_move(
            self.board.squares,
            self.board.tiles,
            self.tile_set,
            placements,
            check_placement=self.config.check_placement,
            dictionary=dictionary,
        )
        if not outcome.valid:
            return MoveResult(valid=False, game=self, error=outcome.error)

        move = Move(placements=list(placements), words=outcome.words, points=outcome.points)
        board = self.board if move.is_pass else self.board.with_tiles(outcome.tiles)
        game = self.model_copy(update={"board": board, "moves": [*self.moves, move]})

        log.debug("%s", game.describe_move(len(game.moves) - 1))
        return MoveResult(valid=True, game=game, move=move)

    def pass_turn(self) -> "Game":
        """Record a pass for the current player."""
        return self.make_move([]).game

    def undo(self) -> "Game":
        """Take back the last move. Does nothing if there are no moves."""
        if not self.moves:
            return self

        last = self.moves[-1]
        tiles = remove_placements(self.board.tiles, last.placements)
        log.debug("Undoing move %d", len(self.moves) - 1)
        return self.model_copy(update={
            "board": self.board.with_tiles(tiles),
            "moves": self.moves[:-1],
        })

    def player_for_move(self, index: int) -> Optional[Player]:
        """Player who made (or will make) move `index`, or None without players."""
        if not self.players:
            return None
        return self.players[index % len(self.players)]

    def player_name_for_move(self, index: int) -> str:
        player = self.player_for_move(index)
        return player.name if player else UNKNOWN_PLAYER

    def current_player(self) -> Optional[Player]:
        """Player whose turn it is."""
        return self.player_for_move(len(self.moves))

    def scores_by_player(self) -> Dict[str, int]:
        """
        Total points per player, recomputed from the move history.

        Every player starts at 0. Without players, all moves are credited
        to "unknown".
        """
        if self.players:
            scores = {p.name: 0 for p in self.players}
        else:
            scores = {UNKNOWN_PLAYER: 0}

        for i, move in enumerate(self.moves):
            scores[self.player_name_for_move(i)] += move.points
        return scores

    def scoreboard(self) -> List[Tuple[str, int]]:
        """(name, score) pairs, highest score first."""
        return sorted(self.scores_by_player().items(), key=lambda item: item[1], reverse=True)

    def describe_move(self, index: int) -> str:
        """One-line summary of a move, e.g. 'Ann played CAT/AT for 9 points'."""
        move = self.moves[index]
        name = self.player_name_for_move(index)
        if move.is_pass:
            return f"{name} passed"
        if not move.words:
            count = len(move.placements)
            return f"{name} placed {count} tile{'s' if count != 1 else ''} for {move.points} points"
        return f"{name} played {'/'.join(w.upper() for w in move.words)} for {move.points} points"

    def render(self) -> str:
        return self.board.render()

    def to_json(self) -> str:
        """Serialize the game (without the dictionary)."""
        return self.model_dump_json(by_alias=True, indent=2)

    @classmethod
    def from_json(cls, text: str, dictionary: Optional[Dictionary] = None) -> "Game":
        """Restore a game saved with to_json, attaching `dictionary` if given."""
        game = cls.model_validate_json(text)
        if dictionary is not None:
            game = game.model_copy(update={"dictionary": dictionary})
        return game

    def save(self, path: Union[str, Path]) -> None:
        """Save the game as JSON, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(self.to_json())
        log.info("Saved game with %d moves to %s", len(self.moves), path)

    @classmethod
    def load(cls, path: Union[str, Path], dictionary: Optional[Dictionary] = None) -> "Game":
        """
        Load a game saved with save().

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Saved game not found: {path}")

        with open(path) as f:
            game = cls.from_json(f.read(), dictionary=dictionary)
        log.info("Loaded game with %d moves from %s", len(game.moves), path)
        return game

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Useful for logging and summaries.
        """
        current = self.current_player()
        return {
            "num_moves": len(self.moves),
            "tiles_on_board": self.board.count_tiles(),
            "current_player": current.name if current else UNKNOWN_PLAYER,
            "scores": self.scores_by_player(),
            "use_dictionary": self.config.use_dictionary,
            "check_placement": self.config.check_placement,
        }


class MoveResult(BaseModel):
    """Result of Game.make_move."""
    valid: bool
    game: Game
    move: Optional[Move] = None
    error: Optional[MoveError] = None

    @property
    def message(self) -> str:
        """The rejection message, or an empty string for a valid move."""
        return self.error.message if self.error else ""
