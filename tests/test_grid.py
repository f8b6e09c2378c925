import math

from led_planner.grid import CutoutRequest, Rounding, cutout_panels_removed, plan_grid, size_grid
from led_planner.specs import PANELS


def test_size_grid_round_up():
    assert size_grid(6.0, 3.0, 1.0, 0.5, Rounding.UP) == (6, 6)
    assert size_grid(6.2, 3.1, 1.0, 0.5, "UP") == (7, 7)


def test_size_grid_round_down_keeps_one_panel():
    assert size_grid(6.9, 3.4, 1.0, 0.5, Rounding.DOWN) == (6, 6)
    assert size_grid(0.3, 0.2, 1.0, 0.5, Rounding.DOWN) == (1, 1)


def test_size_grid_matches_ceil_and_floor():
    for tenths in range(1, 120):
        screen = tenths / 10
        cols_up, _ = size_grid(screen, 1.0, 0.5, 0.5, Rounding.UP)
        cols_down, _ = size_grid(screen, 1.0, 0.5, 0.5, Rounding.DOWN)
        assert cols_up == math.ceil(screen / 0.5)
        assert cols_down == max(1, math.floor(screen / 0.5))


def test_cutout_centred_on_bottom_row():
    cut = cutout_panels_removed(1.0, 0.5, 6, 6, 2.0, 0.5, 0.0)
    assert cut.cut_rect.cut_left == 2.0
    assert cut.cut_rect.cut_right == 4.0
    assert cut.cut_rect.cut_top == 0.5
    assert cut.removed == 2
    assert cut.removed_cells == ((0, 2), (0, 3))


def test_cutout_one_metre_high_spans_two_half_metre_rows():
    cut = cutout_panels_removed(1.0, 0.5, 6, 6, 2.0, 1.0, 0.0)
    assert (cut.cut_rect.cut_bottom, cut.cut_rect.cut_top) == (0.0, 1.0)
    assert set(cut.removed_cells) == {(0, 2), (0, 3), (1, 2), (1, 3)}


def test_cutout_partial_overlap_removes_whole_panel():
    # 1.0m wide cut on a 5 x 0.5m wall: left 0.75 .. right 1.75 touches cols 1-3
    cut = cutout_panels_removed(0.5, 0.5, 5, 4, 1.0, 0.1, 0.0)
    assert cut.removed_cells == ((0, 1), (0, 2), (0, 3))


def test_zero_sized_cutout_removes_nothing():
    for w, h in ((0.0, 1.0), (2.0, 0.0), (0.0, 0.0)):
        cut = cutout_panels_removed(1.0, 0.5, 6, 6, w, h, 0.5)
        assert cut.removed == 0
        assert cut.removed_cells == ()
        assert cut.cut_rect is None


def test_cutout_above_wall_collapses():
    cut = cutout_panels_removed(1.0, 0.5, 6, 6, 2.0, 1.0, 5.0)
    assert cut.removed == 0


def test_oversized_cutout_is_clamped_to_wall():
    cut = cutout_panels_removed(1.0, 0.5, 4, 2, 50.0, 50.0, 0.0)
    assert cut.removed == 8


def test_plan_grid_net_and_mask():
    grid = plan_grid(6.0, 3.0, PANELS["ELX_1x0p5"], Rounding.UP, CutoutRequest(2.0, 0.5, 0.0))
    assert grid.gross == 36
    assert grid.removed == 2
    assert grid.net == 34
    mask = grid.removed_mask()
    assert mask.shape == (6, 6)
    assert mask.sum() == 2
    assert mask[0, 2] and mask[0, 3]


def test_plan_grid_without_cutout():
    grid = plan_grid(6.0, 3.0, PANELS["ELX_1x0p5"])
    assert (grid.cols, grid.rows, grid.net) == (6, 6, 36)
    assert not grid.cutout_enabled


def test_removed_cells_are_inside_the_grid():
    panel = PANELS["ELX_0p5x0p5"]
    for bottom in (0.0, 0.3, 1.0, 2.2):
        for width in (0.2, 1.1, 2.5, 9.0):
            grid = plan_grid(4.0, 2.5, panel, Rounding.UP, CutoutRequest(width, 0.7, bottom))
            assert grid.removed <= grid.gross
            assert grid.net == grid.gross - grid.removed
            for r, c in grid.removed_cells:
                assert 0 <= r < grid.rows
                assert 0 <= c < grid.cols
