"""
Grid geometry: pixel boundaries of the grid lines along each axis.
"""
from dataclasses import dataclass

from .errors import ConfigError


def _check_dimension(name: str, value) -> int:
    # bool is an int subclass but never a valid dimension
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class CanvasConfig:
    """Pixel extents of the canvas and the number of grid cells per axis."""
    area_w: int
    area_h: int
    grids_w: int = 24
    grids_h: int = 12

    def __post_init__(self):
        _check_dimension("area_w", self.area_w)
        _check_dimension("area_h", self.area_h)
        _check_dimension("grids_w", self.grids_w)
        _check_dimension("grids_h", self.grids_h)

    @property
    def capacity(self) -> int:
        """Total number of grid cells."""
        return self.grids_w * self.grids_h


def grid_lines(extent: int, count: int) -> tuple[int, ...]:
    """
    Compute grid line positions for one axis.

    Line k sits at floor(k * extent / count), so the first line is 0, the
    last is exactly `extent`, and trailing cells absorb the remainder.

    Args:
        extent: Axis length in pixels
        count: Number of grid cells along the axis

    Returns:
        Tuple of count + 1 non-decreasing pixel positions
    """
    return tuple((k * extent) // count for k in range(count + 1))


@dataclass(frozen=True)
class GridLines:
    """Column and row boundaries of a canvas, in pixels."""
    cols: tuple[int, ...]
    rows: tuple[int, ...]

    @classmethod
    def for_config(cls, config: CanvasConfig) -> "GridLines":
        return cls(
            cols=grid_lines(config.area_w, config.grids_w),
            rows=grid_lines(config.area_h, config.grids_h),
        )
