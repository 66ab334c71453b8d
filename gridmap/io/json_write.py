"""
JSON writing for slicing results.
"""
import json
from pathlib import Path
from typing import Any, Union


def write_json(path: Union[str, Path], data: Any, indent: int = 2) -> None:
    """
    Write JSON data to file.

    Creates parent directories if they don't exist.

    Args:
        path: Path to output JSON file
        data: Data to serialize (must be JSON-serializable)
        indent: Indentation level for pretty printing

    Raises:
        ValueError: If data cannot be serialized to JSON
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        text = json.dumps(data, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot serialize data to JSON: {e}") from e

    output_path.write_text(text + "\n", encoding='utf-8')
