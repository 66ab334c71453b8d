"""
Loading of slice request files.
"""
import json
from pathlib import Path
from typing import Union


def _read_slices_document(slices_path: Path):
    """Parse the file, turning decode failures into ValueError with the path."""
    if not slices_path.is_file():
        raise FileNotFoundError(f"Slices file not found: {slices_path}")

    try:
        return json.loads(slices_path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in slices file '{slices_path}': {e}") from e


def load_slices(path: Union[str, Path]) -> list:
    """
    Load slice requests from a JSON file.

    Accepts either a bare list of [cw, ch] pairs or an object with a
    "slices" key holding that list. Pair contents are validated later by
    the slicer, which knows the grid size.

    Args:
        path: Path to the slices JSON file

    Returns:
        List of raw slice entries

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or has no slice list
    """
    data = _read_slices_document(Path(path))

    if isinstance(data, dict):
        if "slices" not in data:
            raise ValueError(f"Slices file '{path}' must contain a 'slices' key")
        data = data["slices"]

    if not isinstance(data, list):
        raise ValueError(f"Slices in '{path}' must be a JSON list of [width, height] pairs")

    return data
