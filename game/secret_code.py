import logging
import random

from .errors import ConfigError
from .guess import Feedback
from .ruleset import GameConfig

logger = logging.getLogger(__name__)


class Code:
    """
        Represents the secret code for the Mastermind game.
    Attributes:
        sequence (list): The sequence of colors representing the code.
        config (GameConfig): The config the code belongs to."""

    def __init__(self, sequence=None, config=None):
        """
        Initialize a Code instance.

        Args:
            sequence (list or None): The colors representing the code. If
            given, it is validated against the config.
            config (GameConfig or None): Defines length and palette.
        """

        self.config = config or GameConfig()
        if isinstance(sequence, str):
            self.sequence = list(sequence.replace(" ", ""))
        elif sequence is None:
            self.sequence = []
        else:
            self.sequence = list(sequence)

        if self.sequence:
            self.validate()

    def generate_random(self, rng=None):
        """
        Draw a new code: every position independently and uniformly from
        the palette, with replacement.

        Args:
            rng (random.Random, optional): Source of randomness. Defaults
            to the module level generator.
        """

        rng = rng or random
        self.sequence = rng.choices(
            self.config.available_colors, k=self.config.code_length
        )
        logger.debug("Generated a secret of length %d", len(self.sequence))

    def validate(self) -> bool:
        """
        Validate the current code (length, colors).

        Raises:
            ConfigError: If the code does not fit the config.
        """

        if len(self.sequence) != self.config.code_length:
            raise ConfigError(
                f"Code length must be {self.config.code_length}, "
                f"but got {len(self.sequence)}."
            )

        for color in self.sequence:
            if color not in self.config.available_colors:
                raise ConfigError(f"Invalid color '{color}' in secret code.")

        return True

    def compare_with(self, guess) -> Feedback:
        """
        Compare this secret code with a guess and compute Mastermind-style
        feedback.

        Args:
            guess (Guess | sequence): The guess to score. Must have the
            same length as the code.

        Returns:
            Feedback: (correct_position, correct_color)

        Notes:
            Every secret slot is claimed at most once, exact matches first.
            Secret R R B G against guess R R R R gives (2, 0).
        """

        guessed = getattr(guess, "sequence", guess)
        length = len(self.sequence)

        code_used = [False] * length
        guess_used = [False] * length
        correct_position = 0
        correct_color = 0

        # Exact matches.
        for i in range(length):
            if guessed[i] == self.sequence[i]:
                correct_position += 1
                code_used[i] = True
                guess_used[i] = True

        # Right color, wrong place: leftmost free secret slot wins.
        for i in range(length):
            if guess_used[i]:
                continue
            for j in range(length):
                if not code_used[j] and self.sequence[j] == guessed[i]:
                    correct_color += 1
                    code_used[j] = True
                    break

        return Feedback(correct_position, correct_color)

    def copy_sequence(self):
        return list(self.sequence)

    def as_string(self):
        """
        Return a string representation of the code (e.g. 'RGBY').
        Returns:
            str: The code as a string.
        """
        return "".join(str(c) for c in self.sequence) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
