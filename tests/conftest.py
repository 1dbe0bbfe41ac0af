"""Shared fixtures for lettergrid tests."""

import pytest

from src.game import Game
from src.scoring import Dictionary


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary.from_words(["cat", "cats", "bat", "ba", "at", "cab", "letters"])


@pytest.fixture
def game() -> Game:
    """Standard board, placement rules on, no dictionary."""
    return Game.create(players=["Ann", "Bob"], use_dictionary=False)


@pytest.fixture
def dict_game(dictionary) -> Game:
    """Standard board with placement rules and dictionary checking."""
    return Game.create(players=["Ann", "Bob"], dictionary=dictionary)
