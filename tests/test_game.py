"""
Tests for game state and move history.

Covers committing moves, passes, rejection leaving the game untouched,
undo, turn order, the scoreboard and saving/loading.
"""

import json

import pytest

from src.game import Game, Move, Board, GameConfig
from src.scoring import Placement, parse_squares


def row_word(row, col, letters):
    return [Placement.at(row, col + i, ch) for i, ch in enumerate(letters)]


def play(game, placements):
    result = game.make_move(placements)
    assert result.valid, result.message
    return result.game


class TestCreate:
    """Test cases for new games."""

    def test_defaults(self):
        game = Game.create()
        assert game.board.size == 15
        assert game.board.is_empty()
        assert game.players == []
        assert game.moves == []
        assert game.config.check_placement is True
        assert game.config.use_dictionary is False

    def test_dictionary_turns_on_checking(self, dictionary):
        game = Game.create(dictionary=dictionary)
        assert game.config.use_dictionary is True

    def test_custom_layout(self):
        game = Game.create(layout="T..\n.d.\n..D")
        assert game.board.size == 3
        assert game.board.squares[2][2].word_multiplier == 2

    def test_mismatched_board_rejected(self):
        """Square and tile grids must have the same shape."""
        squares = parse_squares("...\n...\n...")
        with pytest.raises(ValueError):
            Board(squares=squares, tiles=[[None] * 3, [None] * 2, [None] * 3])


class TestMakeMove:
    """Test cases for committing moves."""

    def test_move_commits(self, game):
        result = game.make_move(row_word(7, 7, "cat"))
        assert result.valid is True
        assert result.error is None
        assert result.move == Move(placements=row_word(7, 7, "cat"), words=["cat"], points=10)
        assert result.game.moves == [result.move]
        assert result.game.board.get(7, 8).letter == "a"

    def test_original_game_untouched(self, game):
        """Committing builds a new game; the old one keeps its empty board."""
        new_game = play(game, row_word(7, 7, "cat"))
        assert game.board.is_empty()
        assert game.moves == []
        assert new_game.board.count_tiles() == 3

    def test_pass(self, game):
        """A pass records an empty move and advances the turn."""
        assert game.current_player().name == "Ann"
        result = game.make_move([])
        assert result.valid is True
        assert result.move == Move(placements=[], words=[], points=0)
        assert len(result.game.moves) == 1
        assert result.game.board == game.board
        assert result.game.current_player().name == "Bob"

    def test_pass_turn(self, game):
        game = game.pass_turn().pass_turn()
        assert len(game.moves) == 2
        assert all(m.is_pass for m in game.moves)

    def test_first_move_single_tile(self, game):
        """A lone tile on an empty board is accepted with no words."""
        result = game.make_move([Placement.at(3, 3, "a")])
        assert result.valid is True
        assert result.move.words == []
        assert result.move.points == 0


class TestRejectionIsAtomic:
    """A rejected move leaves the game exactly as it was."""

    def test_rejected_returns_same_game(self, game):
        game = play(game, row_word(7, 7, "cat"))
        snapshot = game.model_copy(deep=True)

        result = game.make_move([Placement.at(6, 6, "a"), Placement.at(8, 8, "b")])

        assert result.valid is False
        assert result.error.code == "NOT_IN_LINE"
        assert result.move is None
        assert result.game is game
        assert result.game == snapshot

    def test_dictionary_rejection_returns_same_game(self, dict_game):
        result = dict_game.make_move(row_word(7, 7, "xyz"))
        assert result.valid is False
        assert result.game is dict_game
        assert dict_game.board.is_empty()
        assert dict_game.moves == []


class TestUndo:
    """Test cases for taking back moves."""

    def test_undo_empty_history(self, game):
        assert game.undo() is game

    def test_undo_restores_previous_state(self, game):
        before = play(game, row_word(7, 7, "cat"))
        after = play(before, [Placement.at(6, 8, "b"), Placement.at(5, 8, "a")])
        assert after.undo() == before

    def test_undo_first_move(self, game):
        after = play(game, row_word(7, 7, "cat"))
        assert after.undo() == game

    def test_undo_pass(self, game):
        before = play(game, row_word(7, 7, "cat"))
        assert before.pass_turn().undo() == before

    def test_undo_all(self, game):
        played = play(play(game, row_word(7, 7, "cat")), [Placement.at(7, 10, "s")])
        assert played.undo().undo() == game
        assert played.undo().undo().undo() == game

    def test_undo_frees_cells(self, game):
        """A cell freed by undo can be played again."""
        game = play(game, row_word(7, 7, "cat")).undo()
        assert game.make_move(row_word(7, 7, "bat")).valid


class TestTurnOrder:
    """Moves are credited to players round-robin."""

    def test_player_for_move(self, game):
        assert game.player_for_move(0).name == "Ann"
        assert game.player_for_move(1).name == "Bob"
        assert game.player_for_move(2).name == "Ann"

    def test_third_move_goes_to_first_player(self, game):
        game = play(game, row_word(7, 7, "cat"))
        game = play(game, [Placement.at(7, 10, "s")])
        game = play(game, [Placement.at(6, 8, "b")])
        assert game.player_name_for_move(2) == "Ann"
        assert game.current_player().name == "Bob"

    def test_no_players(self):
        game = Game.create()
        assert game.player_for_move(0) is None
        assert game.player_name_for_move(3) == "unknown"
        assert game.current_player() is None


class TestScoreboard:
    """Test cases for cumulative scores."""

    def test_scores_start_at_zero(self, game):
        assert game.scores_by_player() == {"Ann": 0, "Bob": 0}

    def test_scores_by_player(self, game):
        game = play(game, row_word(7, 7, "cat"))  # Ann 10
        game = play(game, [Placement.at(7, 10, "s")])  # Bob 6
        game = play(game, [Placement.at(6, 8, "b")])  # Ann 7
        assert game.scores_by_player() == {"Ann": 17, "Bob": 6}
        assert game.scoreboard() == [("Ann", 17), ("Bob", 6)]

    def test_scores_follow_undo(self, game):
        game = play(game, row_word(7, 7, "cat"))
        game = play(game, [Placement.at(7, 10, "s")])
        assert game.undo().scores_by_player() == {"Ann": 10, "Bob": 0}

    def test_unknown_player(self):
        game = play(Game.create(), row_word(7, 7, "cat"))
        assert game.scores_by_player() == {"unknown": 10}

    def test_set_players_reassigns_moves(self, game):
        game = play(game, row_word(7, 7, "cat")).pass_turn()
        game = game.set_players(["Cy"])
        assert game.scores_by_player() == {"Cy": 10}

    def test_describe_move(self, game):
        game = play(game, row_word(7, 7, "cat"))
        game = game.pass_turn()
        game = play(game, [Placement.at(8, 9, "o"), Placement.at(8, 10, "x")])
        assert game.describe_move(0) == "Ann played CAT for 10 points"
        assert game.describe_move(1) == "Bob passed"
        assert game.describe_move(2) == "Ann played OX/TO for 11 points"

    def test_describe_tile_without_word(self, game):
        """A tile that forms no word is a play, not a pass."""
        game = play(game, [Placement.at(7, 7, "a")])
        assert game.describe_move(0) == "Ann placed 1 tile for 0 points"

    def test_get_state(self, game):
        game = play(game, row_word(7, 7, "cat"))
        state = game.get_state()
        assert state["num_moves"] == 1
        assert state["tiles_on_board"] == 3
        assert state["current_player"] == "Bob"
        assert state["scores"] == {"Ann": 10, "Bob": 0}


class TestSaveLoad:
    """Test cases for the saved game format."""

    def test_saved_fields(self, game):
        game = play(game, [Placement.at(7, 7, "c"), Placement.at(7, 8, "a", blank=True)])
        data = json.loads(game.to_json())

        assert set(data) == {"config", "board", "tileSet", "players", "moves"}
        assert data["config"] == {"useDictionary": False, "checkPlacement": True}
        assert data["board"]["squares"][7][7] == {"letterMultiplier": 1, "wordMultiplier": 2}
        assert data["board"]["tiles"][7][8] == {"key": " ", "letter": "a"}
        assert data["board"]["tiles"][0][0] is None
        assert data["tileSet"]["tileScores"]["q"] == 10
        assert data["players"] == [{"name": "Ann"}, {"name": "Bob"}]
        assert data["moves"][0]["words"] == ["ca"]
        assert data["moves"][0]["points"] == 6

    def test_save_and_load(self, game, tmp_path):
        game = play(game, row_word(7, 7, "cat")).pass_turn()
        path = tmp_path / "saves" / "game.json"
        game.save(path)
        assert Game.load(path) == game

    def test_dictionary_not_saved(self, dict_game, dictionary):
        """The word list is supplied again when loading."""
        game = play(dict_game, row_word(7, 7, "cat"))
        assert "dictionary" not in json.loads(game.to_json())

        restored = Game.from_json(game.to_json())
        assert restored.dictionary is None

        restored = Game.from_json(game.to_json(), dictionary=dictionary)
        assert restored == game
        assert restored.make_move([Placement.at(7, 10, "s")]).valid

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Game.load(tmp_path / "missing.json")

    def test_load_snake_case_fields(self):
        """Either field naming is accepted when loading."""
        game = Game.model_validate({
            "config": {"use_dictionary": False, "check_placement": False},
            "board": Board.create(parse_squares("..\n..")).model_dump(),
        })
        assert game.config == GameConfig(use_dictionary=False, check_placement=False)
