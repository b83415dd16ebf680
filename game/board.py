import logging

from .errors import IllegalStateError, InvalidGuessError, StateFileError
from .guess import Guess, GuessAttempt
from .ruleset import GameConfig
from .secret_code import Code
from state.game_state import GameState
from state.persistence import load_state, save_state

logger = logging.getLogger(__name__)


class Board:
    """Main game board class. Manages gameplay, the secret code and guess history.

    A board is not thread safe: calls to make_guess() on one instance must
    be serialized by the caller, otherwise the order of the history is
    undefined. Separate boards share no state.
    """

    def __init__(self, rules=None, rng=None, secret=None):
        """
        Initialize the board and start a game.

        Args:
            rules (dict | GameConfig | None): Partial rules merged over the
            defaults (code_length=4, max_attempts=8, six colors).
            rng (random.Random, optional): Source for secret generation.
            Pass a seeded generator for reproducible games.
            secret (list, optional): Fixed secret code instead of a random
            one. Validated against the rules.

        Raises:
            ConfigError: If the rules or the secret are not usable.
        """
        self._config = GameConfig.from_rules(rules)
        self._rng = rng
        self._fixed_secret = secret
        self.initialize_game()

    def initialize_game(self):
        """Set up a new game: generate a secret code and reset state."""
        if self._fixed_secret is not None:
            self._code = Code(self._fixed_secret, config=self._config)
            # A fixed secret is only used for the first game
            self._fixed_secret = None
        else:
            self._code = Code(config=self._config)
            self._code.generate_random(self._rng)
        self._attempts = []
        self._is_over = False
        self._is_won = False

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def attempts(self) -> list:
        return list(self._attempts)

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def is_won(self) -> bool:
        return self._is_won

    def make_guess(self, guess_input):
        """
        Validate a guess, score it against the secret and record it.

        Args:
            guess_input (list | tuple | str): The guessed colors.

        Returns:
            Feedback: (correct_position, correct_color)

        Raises:
            IllegalStateError: If the game is already over.
            InvalidGuessError: If the guess has the wrong length or a color
            outside the palette. The board is left unchanged.
        """
        if self._is_over:
            raise IllegalStateError("Game is already over.")

        new_guess = Guess(guess_input, config=self._config)
        try:
            new_guess.validate()
        except InvalidGuessError:
            logger.warning("Rejected guess %s", new_guess)
            raise

        feedback = self._code.compare_with(new_guess)
        attempt = GuessAttempt(
            guess=new_guess.as_tuple(),
            feedback=feedback,
            attempt_number=len(self._attempts) + 1,
        )
        self._attempts.append(attempt)
        logger.debug(
            "Attempt %d: %s -> %s", attempt.attempt_number, new_guess, feedback
        )

        self.check_game_over(feedback)
        return feedback

    def check_game_over(self, feedback):
        """Check if the game is finished (win or all attempts used)."""
        if feedback.correct_position == self._config.code_length:
            self._is_over = True
            self._is_won = True
            logger.info("Game won after %d attempts", len(self._attempts))
        elif len(self._attempts) >= self._config.max_attempts:
            self._is_over = True
            logger.info("Game lost, no attempts left")

    def get_feedback_history(self):
        """Return the full history of guesses and feedback."""
        return [(list(a.guess), a.feedback) for a in self._attempts]

    def get_secret_code(self):
        """
        Return a copy of the secret code.

        Raises:
            IllegalStateError: While the game is still in progress.
        """
        if not self._is_over:
            raise IllegalStateError(
                "Cannot reveal secret code while game is in progress."
            )
        return self._code.copy_sequence()

    def reveal_code(self):
        """Return the secret code as a string (used at the end of the game)."""
        self.get_secret_code()
        return self._code.as_string()

    def get_available_colors(self):
        return list(self._config.available_colors)

    def reset(self):
        """Reset the board for a new game with the same rules."""
        self.initialize_game()
        logger.info("Board reset")

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self._config.max_attempts - len(self._attempts))

    def get_game_state(self):
        """Return a GameState snapshot, independent of the board."""
        return GameState(
            config=self._config,
            attempts=tuple(self._attempts),
            attempts_remaining=self.remaining_attempts(),
            game_won=self._is_won,
            game_over=self._is_over,
            secret_code=tuple(self._code.sequence) if self._is_over else None,
        )

    def save(self, filename="game_state.json"):
        """Write the game, including the secret, to a JSON file."""
        record = self.get_game_state().to_dict(secret_code=self._code.sequence)
        save_state(record, filename)

    @classmethod
    def from_file(cls, filename, rng=None):
        """
        Resume a game saved with save().

        The stored guesses are replayed against the stored secret, so
        feedback and flags are recomputed instead of trusted.

        Raises:
            StateFileError: If the file is malformed or does not replay to
            the stored feedback.
        """
        data = load_state(filename)
        try:
            state = GameState.from_dict(data)
            if state.secret_code is None:
                raise StateFileError("Saved game has no secret code.")

            board = cls(
                rules=state.config, rng=rng, secret=list(state.secret_code)
            )
            for attempt in state.attempts:
                if board.is_over:
                    raise StateFileError("Saved game has guesses after its end.")
                feedback = board.make_guess(list(attempt.guess))
                if feedback != attempt.feedback:
                    raise StateFileError(
                        f"Attempt {attempt.attempt_number} does not match the "
                        f"stored feedback."
                    )
        except (KeyError, TypeError, ValueError) as e:
            raise StateFileError(f"Cannot restore saved game: {e}") from e

        if (board.is_over, board.is_won) != (state.game_over, state.game_won):
            raise StateFileError("Stored game result does not match its guesses.")
        return board
