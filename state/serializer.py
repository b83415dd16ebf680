# Convert game states to readable formats (for saving or export)
import json

from game.errors import StateFileError


def to_json(data_dict: dict) -> str:
    """
    Convert a dictionary to a JSON string.
    Args:
        data_dict (dict): The dictionary to convert.
    Returns:
        str: The JSON string representation of the dictionary.
    """
    return json.dumps(data_dict, indent=2, ensure_ascii=False)


def from_json(json_string: str) -> dict:
    """
    Convert a JSON string back to a dictionary.
    Args:
        json_string (str): The JSON string to convert.
    Returns:
        dict: The resulting dictionary.
    Raises:
        StateFileError: If the string is not a JSON object.
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise StateFileError(f"Not a valid game file: {e}") from e
    if not isinstance(data, dict):
        raise StateFileError("A game file must contain a JSON object.")
    return data
