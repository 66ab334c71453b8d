"""
Error types raised by the grid slicer.

All errors derive from ValueError so callers that already treat bad input
as ValueError keep working.
"""
from typing import Optional


class GridMapError(ValueError):
    """Base class for grid slicing errors."""


class ConfigError(GridMapError):
    """Canvas or grid dimensions are invalid."""


class PlacementError(GridMapError):
    """
    A slice could not be seated on the grid.

    Attributes:
        slice: Requested (cw, ch) in grid cells
        index: Position of the failing slice in the input sequence
        grid: (grids_w, grids_h) of the grid being filled
    """

    def __init__(
        self,
        message: str,
        slice: Optional[tuple] = None,
        index: Optional[int] = None,
        grid: Optional[tuple[int, int]] = None,
    ):
        super().__init__(message)
        self.slice = slice
        self.index = index
        self.grid = grid

    def to_dict(self) -> dict:
        """Export error details for JSON responses."""
        return {
            "error": type(self).__name__,
            "message": str(self),
            "index": self.index,
            "slice": list(self.slice) if isinstance(self.slice, (tuple, list)) else None,
        }


class InvalidSliceError(PlacementError):
    """Slice dimensions are malformed, non-positive, or larger than the grid."""
