"""
IO utilities for slice request and area JSON files.
"""
from .json_load import load_slices
from .json_write import write_json

__all__ = ["load_slices", "write_json"]
