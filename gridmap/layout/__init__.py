"""Grid geometry, occupancy tracking and first-fit slicing."""

from .errors import GridMapError, ConfigError, PlacementError, InvalidSliceError
from .geometry import CanvasConfig, GridLines, grid_lines
from .occupancy import OccupancyGrid
from .placer import (
    GridMap,
    Slice,
    Area,
    FillNotice,
    SliceResult,
    slice_canvas,
    format_slice_result,
)

__all__ = [
    'GridMapError',
    'ConfigError',
    'PlacementError',
    'InvalidSliceError',
    'CanvasConfig',
    'GridLines',
    'grid_lines',
    'OccupancyGrid',
    'GridMap',
    'Slice',
    'Area',
    'FillNotice',
    'SliceResult',
    'slice_canvas',
    'format_slice_result',
]
