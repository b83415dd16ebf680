class MastermindError(Exception):
    """Base exception for everything the game engine raises."""


class IllegalStateError(MastermindError, RuntimeError):
    """Raised when an operation is not allowed in the current game state
    (guessing after the game ended, revealing the code while it runs)."""


class InvalidGuessError(MastermindError, ValueError):
    """Raised when a guess has the wrong length or an unknown color."""


class ConfigError(MastermindError, ValueError):
    """Raised when a ruleset cannot be used to start a game."""


class StateFileError(MastermindError):
    """Raised when a saved game cannot be read or does not replay cleanly."""
