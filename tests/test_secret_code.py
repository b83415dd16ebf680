import random
from collections import Counter

import pytest

from game.errors import ConfigError
from game.guess import Feedback, Guess
from game.ruleset import Color, GameConfig
from game.secret_code import Code


@pytest.mark.parametrize(
    "secret, guess, expected",
    [
        ("RRBG", "RGGB", (1, 2)),
        ("RRBG", "RRRR", (2, 0)),
        ("RRBG", "RRBG", (4, 0)),
        ("RRBG", "GBRR", (0, 4)),
        ("RRBG", "WWWW", (0, 0)),
        ("RBGY", "YRBG", (0, 4)),
        ("RRRB", "BRRR", (2, 2)),
        ("RBBB", "BRRR", (0, 2)),
        ("GGYY", "YGGG", (1, 2)),
    ],
)
def test_compare_with(secret, guess, expected):
    code = Code(secret)
    assert code.compare_with(Guess(guess)) == Feedback(*expected)


def test_compare_with_accepts_plain_sequence():
    code = Code([Color.RED, Color.RED, Color.BLUE, Color.GREEN])
    feedback = code.compare_with(["R", "G", "G", "B"])
    assert feedback.correct_position == 1
    assert feedback.correct_color == 2


def test_compare_with_does_not_touch_sequences():
    code = Code("RRBG")
    guess = Guess("RGGB")
    code.compare_with(guess)
    assert code.sequence == ["R", "R", "B", "G"]
    assert guess.sequence == ["R", "G", "G", "B"]


def test_feedback_never_exceeds_code_length():
    config = GameConfig(code_length=5, available_colors=("a", "b", "c"))
    rng = random.Random(7)
    for _ in range(300):
        code = Code(rng.choices(config.available_colors, k=5), config=config)
        guess = rng.choices(config.available_colors, k=5)
        black, white = code.compare_with(guess)
        assert black >= 0 and white >= 0
        assert black + white <= 5
        # black + white is the size of the multiset intersection
        common = sum((Counter(code.sequence) & Counter(guess)).values())
        assert black + white == common


def test_generate_random_uses_palette_and_length():
    config = GameConfig(code_length=6, available_colors=(1, 2, 3))
    code = Code(config=config)
    code.generate_random(random.Random(3))
    assert len(code.sequence) == 6
    assert all(c in config.available_colors for c in code.sequence)


def test_generate_random_is_reproducible_with_seed():
    a = Code()
    b = Code()
    a.generate_random(random.Random(99))
    b.generate_random(random.Random(99))
    assert a.sequence == b.sequence


def test_generate_random_draws_every_color():
    code = Code(config=GameConfig(code_length=200))
    code.generate_random(random.Random(0))
    assert set(code.sequence) == set(Color)


def test_single_color_palette():
    config = GameConfig(code_length=3, available_colors=("X",))
    code = Code(config=config)
    code.generate_random()
    assert code.sequence == ["X", "X", "X"]


def test_fixed_sequence_is_validated():
    with pytest.raises(ConfigError):
        Code("RRB")
    with pytest.raises(ConfigError):
        Code("RRBZ")


def test_code_string_and_copy():
    code = Code("R R B G")
    assert code.sequence == ["R", "R", "B", "G"]
    assert str(code) == "RRBG"
    assert code.copy_sequence() is not code.sequence


def test_string_secret_keeps_case():
    config = GameConfig(code_length=2, available_colors=("x", "y"))
    assert Code("xy", config=config).sequence == ["x", "y"]
    with pytest.raises(ConfigError):
        Code("rrbg")
