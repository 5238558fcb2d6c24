from typing import Dict, Any, Union
from pathlib import Path
import json

from .exceptions import ParseError

def is_valid_file_path(path: Union[str, Path]) -> bool:
    """Check if a given path is an existing regular file."""
    try:
        return Path(path).exists() and Path(path).is_file()
    except (OSError, ValueError):
        return False

def load_json_data(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load JSON data from a file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Dict containing the JSON data

    Raises:
        ParseError: If the file cannot be read or the JSON is invalid
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON format: {str(e)}")
    except OSError as e:
        raise ParseError(f"Error reading file: {str(e)}")
