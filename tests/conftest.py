import random

import pytest

from game.board import Board


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def board():
    """Classic rules with the secret fixed to R R B G."""
    return Board(secret="RRBG")


def play_until_lost(board, guess="WWWW"):
    while not board.is_over:
        board.make_guess(guess)
    return board
