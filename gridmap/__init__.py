"""Deterministic first-fit slicing of a pixel canvas into grid-aligned areas."""

from .layout import (
    GridMap,
    CanvasConfig,
    Area,
    FillNotice,
    SliceResult,
    ConfigError,
    PlacementError,
    InvalidSliceError,
    slice_canvas,
)

__version__ = "0.1.0"

__all__ = [
    "GridMap",
    "CanvasConfig",
    "Area",
    "FillNotice",
    "SliceResult",
    "ConfigError",
    "PlacementError",
    "InvalidSliceError",
    "slice_canvas",
]
