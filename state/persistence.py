# state/persistence.py
import logging
from pathlib import Path

from .serializer import from_json, to_json

logger = logging.getLogger(__name__)


def save_state(data: dict, path):
    """
    Save a game record to disk as JSON.
    Args:
        data (dict): The record to save (see GameState.to_dict).
        path (str | Path): The file path to save the game state to.
    """
    path = Path(path)
    path.write_text(to_json(data), encoding="utf-8")
    logger.info("Saved game to %s", path)


def load_state(path) -> dict:
    """
    Load a game record from disk.
    Args:
        path (str | Path): The file path to load the game state from.
    Returns:
        dict: The loaded record.
    Raises:
        StateFileError: If the file does not hold a JSON object.
        OSError: If the file cannot be read."""
    path = Path(path)
    data = from_json(path.read_text(encoding="utf-8"))
    logger.info("Loaded game from %s", path)
    return data
