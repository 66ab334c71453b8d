"""Tests for the deterministic grid slicer."""

import logging
import random

import pytest
from gridmap.layout import (
    GridMap,
    Slice,
    Area,
    FillNotice,
    ConfigError,
    PlacementError,
    InvalidSliceError,
    slice_canvas,
    format_slice_result,
)


def test_dashboard_tiling_fills_canvas():
    """Test that four quarters and two halves tile a 1920x1080 canvas exactly."""
    grid = GridMap(1920, 1080, 24, 12)

    result = grid.slice([[6, 6], [6, 6], [6, 6], [6, 6], [12, 6], [12, 6]])

    assert result.areas == [
        Area(x=0, y=0, width=480, height=540),
        Area(x=480, y=0, width=480, height=540),
        Area(x=960, y=0, width=480, height=540),
        Area(x=1440, y=0, width=480, height=540),
        Area(x=0, y=540, width=960, height=540),
        Area(x=960, y=540, width=960, height=540),
    ]
    assert result.notice is None
    assert result.fully_occupied
    assert result.occupied == result.capacity == 288


def test_block_under_short_slice():
    """Test that a large block seats under the shortest slice of the top row."""
    grid = GridMap(1200, 800, 20, 10)

    areas = grid.place([[4, 4], [8, 4], [4, 2], [6, 6]])

    assert areas[0] == Area(x=0, y=0, width=240, height=320)
    assert areas[1] == Area(x=240, y=0, width=480, height=320)
    assert areas[2] == Area(x=720, y=0, width=240, height=160)
    # Columns 12..17 are free from row 2 down, ahead of (0, 4) in row-major order
    assert areas[3] == Area(x=720, y=160, width=360, height=480)
    assert (areas[3].gx, areas[3].gy) == (12, 2)


def test_no_free_block_raises_placement_error():
    """Test that a slice that fits the grid but not the free space fails."""
    grid = GridMap(1200, 800, 20, 10)

    with pytest.raises(PlacementError) as exc_info:
        grid.slice([[4, 4], [8, 4], [4, 2], [6, 6], [20, 6]])

    err = exc_info.value
    assert not isinstance(err, InvalidSliceError)
    assert err.index == 4
    assert err.slice == (20, 6)
    assert err.grid == (20, 10)
    assert "Cannot place slice [20,6] within 20x10 grid" in str(err)


def test_oversized_slice_is_invalid():
    """Test that a slice wider than the grid is rejected before scanning."""
    grid = GridMap(100, 100, 3, 3)

    with pytest.raises(InvalidSliceError, match=r"\[4,1\] within 3x3"):
        grid.slice([[4, 1]])

    # InvalidSliceError is also a PlacementError
    with pytest.raises(PlacementError):
        grid.slice([[1, 4]])


def test_oversized_slice_fails_after_prior_placements():
    """Test that an oversized slice fails regardless of what came before."""
    grid = GridMap(100, 100, 3, 3)

    with pytest.raises(InvalidSliceError) as exc_info:
        grid.slice([[1, 1], [1, 1], [3, 4]])

    assert exc_info.value.index == 2


def test_single_slice_fills_small_grid():
    """Test a single slice covering the whole 2x2 grid."""
    result = GridMap(100, 100, 2, 2).slice([[2, 2]])

    assert result.areas == [Area(x=0, y=0, width=100, height=100)]
    assert result.notice is None


def test_partial_fill_returns_notice():
    """Test that an unfilled grid yields a FillNotice without failing."""
    result = GridMap(100, 100, 2, 2).slice([[1, 1]])

    assert result.areas == [Area(x=0, y=0, width=50, height=50)]
    assert result.notice == FillNotice(occupied=1, capacity=4)
    assert result.notice.message == "Grid not fully occupied: 1/4"
    assert not result.fully_occupied


def test_partial_fill_is_logged(caplog):
    """Test that the fill notice goes to the log at INFO level."""
    caplog.set_level(logging.INFO, logger="gridmap.layout.placer")

    GridMap(100, 100, 2, 2).slice([[1, 1]])

    assert "Grid not fully occupied: 1/4" in caplog.text


def test_placement_failure_is_logged(caplog):
    """Test that failures are logged before raising."""
    caplog.set_level(logging.WARNING, logger="gridmap.layout.placer")

    with pytest.raises(PlacementError):
        GridMap(100, 100, 2, 2).slice([[2, 1], [2, 1], [1, 1]])

    assert "Cannot place slice [1,1]" in caplog.text


def test_notice_callback():
    """Test that the optional callback receives the notice once."""
    received = []

    GridMap(100, 100, 2, 2).slice([[1, 2]], on_notice=received.append)

    assert received == [FillNotice(occupied=2, capacity=4)]


def test_notice_callback_not_called_when_full():
    """Test that a full grid never triggers the callback."""
    received = []

    GridMap(100, 100, 2, 2).slice([[1, 2], [1, 2]], on_notice=received.append)

    assert received == []


def test_notice_callback_not_called_on_failure():
    """Test that a failed run reports no notice at all."""
    received = []

    with pytest.raises(PlacementError):
        GridMap(100, 100, 2, 2).slice([[2, 2], [1, 1]], on_notice=received.append)

    assert received == []


def test_empty_slices():
    """Test that no slices gives no areas and an empty-grid notice."""
    result = GridMap(100, 100, 2, 2).slice([])

    assert result.areas == []
    assert result.notice == FillNotice(occupied=0, capacity=4)


def test_row_major_tie_break():
    """Test that the scan finishes a row before moving down."""
    grid = GridMap(300, 300, 3, 3)

    areas = grid.place([[2, 1], [1, 2]])

    # (2, 0) comes before (0, 1) in row-major order
    assert (areas[1].gx, areas[1].gy) == (2, 0)
    assert areas[1] == Area(x=200, y=0, width=100, height=200)


def test_first_fit_skips_partially_blocked_origins():
    """Test that origins overlapping a taken cell are skipped, not clipped."""
    grid = GridMap(400, 200, 4, 2)

    areas = grid.place([[1, 1], [2, 2], [1, 1]])

    assert [(a.gx, a.gy) for a in areas] == [(0, 0), (1, 0), (3, 0)]
    assert areas[1] == Area(x=100, y=0, width=200, height=200)


def test_uneven_grid_lines_are_pixel_exact():
    """Test that trailing cells absorb the remainder on uneven grids."""
    result = GridMap(100, 10, 3, 1).slice([[1, 1], [1, 1], [1, 1]])

    assert [a.to_dict() for a in result.areas] == [
        {"x": 0, "y": 0, "width": 33, "height": 10},
        {"x": 33, "y": 0, "width": 33, "height": 10},
        {"x": 66, "y": 0, "width": 34, "height": 10},
    ]
    assert sum(a.width for a in result.areas) == 100


def test_default_grid_is_24_by_12():
    """Test the default grid counts."""
    grid = GridMap(1920, 1080)

    assert grid.config.grids_w == 24
    assert grid.config.grids_h == 12
    assert grid.place([[24, 12]]) == [Area(x=0, y=0, width=1920, height=1080)]


def test_slice_values_and_tuples_accepted():
    """Test that Slice objects, tuples and lists are interchangeable."""
    grid = GridMap(100, 100, 2, 2)

    a = grid.place([Slice(1, 2), (1, 1), [1, 1]])
    b = grid.place([[1, 2], [1, 1], [1, 1]])

    assert a == b


@pytest.mark.parametrize("bad", [
    [0, 1],
    [1, 0],
    [-1, 2],
    [1],
    [1, 2, 3],
    [1.5, 1],
    ["1", "1"],
    [True, 1],
    5,
])
def test_malformed_slices_rejected(bad):
    """Test that malformed slice requests raise InvalidSliceError."""
    grid = GridMap(100, 100, 2, 2)

    with pytest.raises(InvalidSliceError) as exc_info:
        grid.slice([[1, 1], bad])

    assert exc_info.value.index == 1


@pytest.mark.parametrize("args", [
    (0, 100),
    (100, -1),
    (100, 100, 0, 2),
    (100, 100, 2, 0),
    (100.0, 100),
    (True, 100),
])
def test_invalid_config_rejected(args):
    """Test that non-positive or non-integer dimensions raise ConfigError."""
    with pytest.raises(ConfigError):
        GridMap(*args)


def test_errors_are_value_errors():
    """Test that callers catching ValueError see every slicer error."""
    with pytest.raises(ValueError):
        GridMap(0, 100)
    with pytest.raises(ValueError):
        GridMap(100, 100, 2, 2).slice([[3, 3]])


def test_deterministic_placement():
    """Test that repeated runs on one instance give identical results."""
    grid = GridMap(1920, 1080)
    slices = [[5, 3], [7, 4], [2, 2], [12, 5], [3, 9], [1, 1]]

    first = grid.slice(slices)
    second = grid.slice(slices)

    assert first.areas == second.areas
    assert [(a.gx, a.gy) for a in first.areas] == [(a.gx, a.gy) for a in second.areas]
    assert first.notice == second.notice


def test_runs_do_not_share_occupancy():
    """Test that a full grid from one run does not block the next."""
    grid = GridMap(100, 100, 2, 2)

    grid.place([[2, 2]])

    assert grid.place([[2, 2]]) == [Area(x=0, y=0, width=100, height=100)]


@pytest.mark.parametrize("seed", range(10))
def test_random_runs_never_overlap(seed):
    """Test that successful random runs keep order and never overlap."""
    rng = random.Random(seed)
    grids_w, grids_h = rng.randint(1, 12), rng.randint(1, 8)
    grid = GridMap(rng.randint(50, 2000), rng.randint(50, 2000), grids_w, grids_h)

    slices = []
    for _ in range(rng.randint(1, 10)):
        slices.append([rng.randint(1, grids_w), rng.randint(1, grids_h)])

    try:
        result = grid.slice(slices)
    except PlacementError:
        return

    assert len(result.areas) == len(slices)
    for area, (cw, ch) in zip(result.areas, slices):
        assert (area.cw, area.ch) == (cw, ch)
        assert area.x + area.width <= grid.config.area_w
        assert area.y + area.height <= grid.config.area_h

    for i, a in enumerate(result.areas):
        for b in result.areas[i + 1:]:
            assert not a.intersects(b)

    assert result.occupied == sum(cw * ch for cw, ch in slices)
    assert (result.notice is None) == (result.occupied == result.capacity)


def test_area_intersects():
    """Test rectangle interior overlap detection."""
    a = Area(x=0, y=0, width=10, height=10)
    b = Area(x=5, y=5, width=10, height=10)
    c = Area(x=10, y=0, width=10, height=10)

    assert a.intersects(b)
    assert b.intersects(a)
    assert not a.intersects(c)  # Shared edge only
    assert not c.intersects(a)


def test_slice_canvas_helper():
    """Test the one-shot helper."""
    result = slice_canvas(100, 100, [[2, 2]], grids_w=2, grids_h=2)

    assert result.areas == [Area(x=0, y=0, width=100, height=100)]


def test_format_slice_result():
    """Test the human-readable summary."""
    text = format_slice_result(GridMap(100, 100, 2, 2).slice([[1, 1]]))

    assert "Placed 1 slice(s)" in text
    assert "x=0 y=0 w=50 h=50" in text
    assert "Grid not fully occupied: 1/4" in text

    text = format_slice_result(GridMap(100, 100, 2, 2).slice([[2, 2]]))
    assert "Grid fully occupied: 4/4" in text
