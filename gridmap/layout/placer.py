"""
Deterministic grid slicer.

Splits a fixed-size canvas into a logical grid and seats each requested slice
at the first free origin in row-major order. Results are pixel rectangles
snapped to integer grid lines, so adjacent slices always share exact edges.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence, Union

from .errors import InvalidSliceError, PlacementError
from .geometry import CanvasConfig, GridLines
from .occupancy import OccupancyGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slice:
    """Requested slice size in grid cells."""
    cw: int
    ch: int


@dataclass(frozen=True)
class Area:
    """Pixel rectangle assigned to a slice."""
    x: int
    y: int
    width: int
    height: int
    gx: int = field(default=0, compare=False)
    gy: int = field(default=0, compare=False)
    cw: int = field(default=0, compare=False)
    ch: int = field(default=0, compare=False)

    def intersects(self, other: 'Area') -> bool:
        """Check if the interiors of two areas overlap."""
        return not (
            self.x + self.width <= other.x or
            other.x + other.width <= self.x or
            self.y + self.height <= other.y or
            other.y + other.height <= self.y
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class FillNotice:
    """Informational notice: the slices did not cover the whole grid."""
    occupied: int
    capacity: int

    @property
    def message(self) -> str:
        return f"Grid not fully occupied: {self.occupied}/{self.capacity}"


@dataclass
class SliceResult:
    """Areas placed by one slicing run plus the optional fill notice."""
    areas: list[Area]
    occupied: int
    capacity: int
    notice: Optional[FillNotice] = None

    @property
    def fully_occupied(self) -> bool:
        return self.occupied == self.capacity


SliceLike = Union[Slice, Sequence[int]]
NoticeCallback = Callable[[FillNotice], None]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class GridMap:
    """
    Grid-based deterministic slicer.

    The canvas configuration is fixed at construction. Each call to
    `slice` starts from an empty grid, so one instance can serve any number
    of independent (and concurrent) runs.
    """

    def __init__(
        self,
        area_w: int,
        area_h: int,
        grids_w: int = 24,
        grids_h: int = 12,
    ):
        """
        Initialize slicer.

        Args:
            area_w: Canvas width in pixels
            area_h: Canvas height in pixels
            grids_w: Number of grid cells horizontally
            grids_h: Number of grid cells vertically

        Raises:
            ConfigError: If any dimension is not a positive integer
        """
        self.config = CanvasConfig(
            area_w=area_w,
            area_h=area_h,
            grids_w=grids_w,
            grids_h=grids_h,
        )

    @classmethod
    def from_config(cls, config: CanvasConfig) -> 'GridMap':
        return cls(config.area_w, config.area_h, config.grids_w, config.grids_h)

    def __repr__(self) -> str:
        c = self.config
        return f"GridMap({c.area_w}x{c.area_h}, grid={c.grids_w}x{c.grids_h})"

    def grid_lines(self) -> GridLines:
        """Pixel positions of the column and row grid lines."""
        return GridLines.for_config(self.config)

    def coerce_slice(self, slice_: SliceLike, index: int) -> Slice:
        """
        Normalize and validate one slice request.

        Args:
            slice_: Slice or (cw, ch) pair
            index: Position in the input, for error reporting

        Returns:
            Validated Slice

        Raises:
            InvalidSliceError: If the request is malformed or exceeds the grid
        """
        gw = self.config.grids_w
        gh = self.config.grids_h

        if isinstance(slice_, Slice):
            cw, ch = slice_.cw, slice_.ch
        else:
            try:
                cw, ch = slice_
            except (TypeError, ValueError):
                raise InvalidSliceError(
                    f"Slice #{index} must be a [width, height] pair, got {slice_!r}",
                    slice=slice_,
                    index=index,
                    grid=(gw, gh),
                ) from None

        if not (_is_int(cw) and _is_int(ch)):
            raise InvalidSliceError(
                f"Slice #{index} dimensions must be integers, got [{cw!r},{ch!r}]",
                slice=(cw, ch),
                index=index,
                grid=(gw, gh),
            )

        if cw < 1 or ch < 1 or cw > gw or ch > gh:
            raise InvalidSliceError(
                f"Cannot place slice [{cw},{ch}] within {gw}x{gh} grid "
                f"(slice #{index} is outside 1..{gw} x 1..{gh}).",
                slice=(cw, ch),
                index=index,
                grid=(gw, gh),
            )

        return Slice(cw=cw, ch=ch)

    def find_free_origin(
        self,
        occupancy: OccupancyGrid,
        slice_: Slice,
    ) -> Optional[tuple[int, int]]:
        """
        Find the first free origin for a slice in row-major order.

        Rows are scanned top to bottom, columns left to right within a row.
        The first origin whose whole cw x ch block is free wins.

        Returns:
            (gx, gy) of the origin, or None if no free block exists
        """
        gx_max = self.config.grids_w - slice_.cw
        gy_max = self.config.grids_h - slice_.ch

        for gy in range(gy_max + 1):
            for gx in range(gx_max + 1):
                if occupancy.is_free(gx, gy, slice_.cw, slice_.ch):
                    return (gx, gy)

        return None

    def slice(
        self,
        slices: Iterable[SliceLike] = (),
        on_notice: Optional[NoticeCallback] = None,
    ) -> SliceResult:
        """
        Place all slices deterministically.

        Args:
            slices: Ordered (cw, ch) requests in grid cells
            on_notice: Optional callback invoked with the FillNotice, if any

        Returns:
            SliceResult with one Area per slice, in input order

        Raises:
            InvalidSliceError: If a slice is malformed or larger than the grid
            PlacementError: If a slice has no free block left
        """
        gw = self.config.grids_w
        gh = self.config.grids_h
        lines = self.grid_lines()
        cols, rows = lines.cols, lines.rows

        occupancy = OccupancyGrid(gw, gh)
        areas = []
        occupied = 0

        for index, raw in enumerate(slices):
            try:
                slice_ = self.coerce_slice(raw, index)
            except InvalidSliceError as e:
                logger.warning(f"[GridMap] {e}")
                raise

            origin = self.find_free_origin(occupancy, slice_)

            if origin is None:
                error = PlacementError(
                    f"Cannot place slice [{slice_.cw},{slice_.ch}] within "
                    f"{gw}x{gh} grid (slice #{index}).",
                    slice=(slice_.cw, slice_.ch),
                    index=index,
                    grid=(gw, gh),
                )
                logger.warning(f"[GridMap] {error}")
                raise error

            gx, gy = origin
            occupancy.mark(gx, gy, slice_.cw, slice_.ch)
            occupied += slice_.cw * slice_.ch

            x1 = cols[gx]
            x2 = cols[gx + slice_.cw]
            y1 = rows[gy]
            y2 = rows[gy + slice_.ch]

            areas.append(Area(
                x=x1,
                y=y1,
                width=x2 - x1,
                height=y2 - y1,
                gx=gx,
                gy=gy,
                cw=slice_.cw,
                ch=slice_.ch,
            ))
            logger.debug(
                f"[GridMap] slice #{index} [{slice_.cw},{slice_.ch}] -> "
                f"cell ({gx},{gy}) px ({x1},{y1},{x2 - x1},{y2 - y1})"
            )

        capacity = self.config.capacity
        result = SliceResult(areas=areas, occupied=occupied, capacity=capacity)

        if occupied != capacity:
            result.notice = FillNotice(occupied=occupied, capacity=capacity)
            logger.info(f"[GridMap] {result.notice.message}")
            if on_notice is not None:
                on_notice(result.notice)

        return result

    def place(
        self,
        slices: Iterable[SliceLike] = (),
        on_notice: Optional[NoticeCallback] = None,
    ) -> list[Area]:
        """Place all slices and return only the areas."""
        return self.slice(slices, on_notice=on_notice).areas


def slice_canvas(
    area_w: int,
    area_h: int,
    slices: Iterable[SliceLike],
    grids_w: int = 24,
    grids_h: int = 12,
) -> SliceResult:
    """One-shot helper: build a GridMap and slice it."""
    return GridMap(area_w, area_h, grids_w, grids_h).slice(slices)


def format_slice_result(result: SliceResult) -> str:
    """
    Format a slicing result as a human-readable multi-line summary.

    Args:
        result: SliceResult to format

    Returns:
        Formatted string with one line per area plus the fill status
    """
    lines = [f"✓ Placed {len(result.areas)} slice(s)"]

    for i, area in enumerate(result.areas):
        lines.append(
            f"  [{i}] [{area.cw},{area.ch}] at cell ({area.gx},{area.gy}) -> "
            f"x={area.x} y={area.y} w={area.width} h={area.height}"
        )

    if result.notice:
        lines.append(f"\nNotice: {result.notice.message}")
    else:
        lines.append(f"\nGrid fully occupied: {result.occupied}/{result.capacity}")

    return "\n".join(lines)
