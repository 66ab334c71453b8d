"""
Per-invocation occupancy tracking for grid cells.
"""
import numpy as np


class OccupancyGrid:
    """
    Boolean cell grid, row-major with shape (grids_h, grids_w).

    Cell (gx, gy) is stored at [gy, gx], which is flat index gy * grids_w + gx.
    """

    def __init__(self, grids_w: int, grids_h: int):
        self.grids_w = grids_w
        self.grids_h = grids_h
        self._taken = np.zeros((grids_h, grids_w), dtype=bool)

    @property
    def capacity(self) -> int:
        return self.grids_w * self.grids_h

    @property
    def occupied_count(self) -> int:
        """Number of cells marked taken."""
        return int(np.count_nonzero(self._taken))

    def is_taken(self, gx: int, gy: int) -> bool:
        return bool(self._taken[gy, gx])

    def is_free(self, gx: int, gy: int, cw: int, ch: int) -> bool:
        """Check that every cell in [gx, gx+cw) x [gy, gy+ch) is free."""
        return not self._taken[gy:gy + ch, gx:gx + cw].any()

    def mark(self, gx: int, gy: int, cw: int, ch: int) -> None:
        """Mark every cell in [gx, gx+cw) x [gy, gy+ch) as taken."""
        self._taken[gy:gy + ch, gx:gx + cw] = True
