from dataclasses import dataclass
from typing import NamedTuple

from .errors import InvalidGuessError
from .ruleset import GameConfig, plain_color


class Feedback(NamedTuple):
    """Result of scoring a guess. Unpacks as the classic (black, white)."""

    correct_position: int = 0
    correct_color: int = 0


@dataclass(frozen=True)
class GuessAttempt:
    """One accepted and scored guess, as recorded in the history."""

    guess: tuple
    feedback: Feedback
    attempt_number: int

    def to_dict(self) -> dict:
        return {
            "guess": [plain_color(c) for c in self.guess],
            "feedback": list(self.feedback),
            "attempt_number": self.attempt_number,
        }


class Guess:
    """
        Represents a single player guess in the Mastermind game.
    Attributes:
        sequence (list): The guessed sequence of colors.
        config (GameConfig): The config used for validation.
        is_valid (bool): Whether the guess is valid for the config."""

    def __init__(self, sequence, config=None):
        """
        Initialize a Guess instance.
        Args:
            sequence (list | tuple | str | None): The guessed sequence. A
            string like "RGBY" is split into single letters.
            config (GameConfig, optional): Config used for validation.
            Defaults to the classic rules.
        """

        # --- Input normalization ---
        if isinstance(sequence, str):
            self.sequence = list(sequence.replace(" ", ""))
        elif sequence is None:
            self.sequence = []
        else:
            self.sequence = list(sequence)

        self.config = config or GameConfig()
        self.is_valid = self.validate(strict=False)

    def validate(self, strict: bool = True) -> bool:
        """
        Check if the guess follows the config (length, valid colors).

        Args:
            strict (bool): If True, raise InvalidGuessError on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        """

        def fail(msg: str) -> bool:
            if strict:
                raise InvalidGuessError(msg)
            return False

        # Length check
        if len(self.sequence) != self.config.code_length:
            return fail(
                f"Guess must be {self.config.code_length} colors long, "
                f"but got {len(self.sequence)}."
            )

        # Color check
        for color in self.sequence:
            if color not in self.config.available_colors:
                allowed = ", ".join(str(c) for c in self.config.available_colors)
                return fail(f"Invalid color '{color}'. Allowed: {allowed}.")

        return True

    def as_tuple(self) -> tuple:
        """Return the guess as an immutable sequence."""
        return tuple(self.sequence)

    def as_string(self):
        """
        Return a string representation of the guess (e.g. 'RGBY').
        Returns:
            str: The guess as a string."""
        return "".join(str(c) for c in self.sequence) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
