# state/game_state.py
from dataclasses import dataclass
from typing import Optional

from game.guess import Feedback, GuessAttempt
from game.ruleset import GameConfig, plain_color


@dataclass(frozen=True)
class GameState:
    """Container for a Mastermind game snapshot.

    Built on demand by Board.get_game_state(); holds copies only, so
    changing it never touches the board. The secret code is only filled
    in once the game is over.
    """

    config: GameConfig
    attempts: tuple
    attempts_remaining: int
    game_won: bool
    game_over: bool
    secret_code: Optional[tuple] = None

    @property
    def current_attempts(self):
        return len(self.attempts)

    def to_dict(self, secret_code=None):
        # Return the gamestate as dictionary for i.e. json
        secret = secret_code if secret_code is not None else self.secret_code
        return {
            "rules": self.config.to_dict(),
            "guesses": [a.to_dict() for a in self.attempts],
            "attempts_remaining": self.attempts_remaining,
            "is_over": self.game_over,
            "is_won": self.game_won,
            "secret_code": (
                [plain_color(c) for c in secret]
                if secret is not None
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data):
        # Load the gamestate from a dictionary
        attempts = tuple(
            GuessAttempt(
                guess=tuple(g["guess"]),
                feedback=Feedback(*g["feedback"]),
                attempt_number=g.get("attempt_number", i + 1),
            )
            for i, g in enumerate(data["guesses"])
        )
        config = GameConfig.from_dict(data["rules"])
        secret = data.get("secret_code")
        return cls(
            config=config,
            attempts=attempts,
            attempts_remaining=data.get(
                "attempts_remaining",
                max(0, config.max_attempts - len(attempts)),
            ),
            game_won=data["is_won"],
            game_over=data["is_over"],
            secret_code=tuple(secret) if secret is not None else None,
        )
