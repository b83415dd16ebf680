# Configuration: colors, code length, attempts per game.
from dataclasses import dataclass
from enum import Enum

from .errors import ConfigError


class Color(str, Enum):
    """Default peg colors. Each compares equal to its letter ("R", ...)."""

    RED = "R"
    BLUE = "B"
    GREEN = "G"
    YELLOW = "Y"
    WHITE = "W"
    BLACK = "K"

    def __str__(self):
        return self.value


DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code
    "max_attempts": 8,  # Number of guesses per game
    "colors": [
        Color.RED,
        Color.BLUE,
        Color.GREEN,
        Color.YELLOW,
        Color.WHITE,
        Color.BLACK,
    ],
    "display": {
        "emoji_map": {  # Only used by the CLI
            "R": "🔴",
            "B": "🔵",
            "G": "🟢",
            "Y": "🟡",
            "W": "⚪",
            "K": "⚫",
        },
        "exact_peg": "●",
        "color_peg": "○",
    },
}


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings for one game."""

    code_length: int = DEFAULT_RULES["code_length"]
    max_attempts: int = DEFAULT_RULES["max_attempts"]
    available_colors: tuple = tuple(DEFAULT_RULES["colors"])

    @classmethod
    def from_rules(cls, rules=None) -> "GameConfig":
        """
        Build a config by merging a (partial) rules mapping over the
        defaults.

        Args:
            rules (dict | GameConfig | None): Either a ready config or a
            mapping with any of "code_length", "max_attempts" and
            "colors" (or "available_colors").

        Returns:
            GameConfig: A validated config.
        """
        if isinstance(rules, GameConfig):
            rules.validate()
            return rules

        rules = dict(rules or {})
        colors = rules.get("available_colors", rules.get("colors"))
        if colors is None:
            colors = DEFAULT_RULES["colors"]
        if isinstance(colors, str):
            colors = list(colors)

        config = cls(
            code_length=rules.get("code_length", DEFAULT_RULES["code_length"]),
            max_attempts=rules.get(
                "max_attempts", DEFAULT_RULES["max_attempts"]
            ),
            available_colors=tuple(colors),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigError if the config cannot be played."""
        for field in ("code_length", "max_attempts"):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{field} must be an integer, got {value!r}.")
            if value < 1:
                raise ConfigError(f"{field} must be at least 1, got {value}.")

        if not self.available_colors:
            raise ConfigError("At least one color is required.")

    def to_dict(self) -> dict:
        """Return the config as a JSON friendly dictionary."""
        return {
            "code_length": self.code_length,
            "max_attempts": self.max_attempts,
            "colors": [plain_color(c) for c in self.available_colors],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameConfig":
        return cls.from_rules(data)


def plain_color(color):
    # Enum members are stored by value so saved games stay plain JSON
    return color.value if isinstance(color, Enum) else color
