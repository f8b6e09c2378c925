# led_planner/grid.py
# Panel grid sizing and cut-out removal.
#
# Notes:
# - Row 0 is the bottom row of the wall; column 0 is the left column.
# - A cut-out is centred horizontally and sits `bottom_offset_m` above the floor line.
# - Any overlap removes the whole panel cell (conservative planning, not a bug).

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class Rounding(str, Enum):
    UP = "UP"
    DOWN = "DOWN"


@dataclass(frozen=True)
class CutoutRequest:
    width_m: float
    height_m: float
    bottom_offset_m: float = 0.0


@dataclass(frozen=True)
class CutRect:
    cut_left: float
    cut_right: float
    cut_bottom: float
    cut_top: float


@dataclass(frozen=True)
class CutoutResult:
    removed: int = 0
    removed_cells: Tuple[Tuple[int, int], ...] = ()
    cut_rect: Optional[CutRect] = None


@dataclass(frozen=True)
class GridResult:
    cols: int
    rows: int
    removed_cells: Tuple[Tuple[int, int], ...] = ()
    cut_rect: Optional[CutRect] = None
    cutout_enabled: bool = False
    gross: int = field(init=False)
    net: int = field(init=False)

    def __post_init__(self):
        gross = self.cols * self.rows
        object.__setattr__(self, "gross", gross)
        object.__setattr__(self, "net", max(0, gross - len(self.removed_cells)))

    @property
    def removed(self) -> int:
        return len(self.removed_cells)

    def removed_mask(self) -> np.ndarray:
        """Boolean (rows, cols) array, True where a panel was cut out."""
        mask = np.zeros((max(0, self.rows), max(0, self.cols)), dtype=bool)
        for r, c in self.removed_cells:
            mask[r, c] = True
        return mask


def _clamp(n, lo, hi):
    return max(lo, min(hi, n))


# -----------------------
# Grid sizing
# -----------------------

def size_grid(screen_w, screen_h, panel_w, panel_h, rounding=Rounding.UP):
    """
    Panels across / panels high for a requested screen size.
    UP rounds each axis up; DOWN floors it but never below one panel.
    Inputs are not validated: callers must pass positive dimensions.
    """
    w_raw = screen_w / panel_w
    h_raw = screen_h / panel_h
    if Rounding(rounding) is Rounding.UP:
        return math.ceil(w_raw), math.ceil(h_raw)
    return max(1, math.floor(w_raw)), max(1, math.floor(h_raw))


# -----------------------
# Cut-out
# -----------------------

def cutout_panels_removed(panel_w, panel_h, cols, rows, cut_w, cut_h, cut_bottom) -> CutoutResult:
    wall_w = cols * panel_w
    wall_h = rows * panel_h

    cw = _clamp(cut_w, 0, wall_w)
    ch = _clamp(cut_h, 0, wall_h)

    cut_left = (wall_w - cw) / 2
    cut_right = cut_left + cw

    bottom = _clamp(cut_bottom, 0, wall_h)
    top = _clamp(bottom + ch, 0, wall_h)

    if cw <= 0 or ch <= 0 or top <= bottom:
        logger.debug("Cut-out %sm x %sm @ %sm collapses to nothing", cut_w, cut_h, cut_bottom)
        return CutoutResult()

    col_start = math.floor(cut_left / panel_w)
    col_end = math.ceil(cut_right / panel_w) - 1
    row_start = math.floor(bottom / panel_h)
    row_end = math.ceil(top / panel_h) - 1

    cells = tuple(
        (r, c)
        for r in range(max(0, row_start), min(rows - 1, row_end) + 1)
        for c in range(max(0, col_start), min(cols - 1, col_end) + 1)
    )
    rect = CutRect(cut_left=cut_left, cut_right=cut_right, cut_bottom=bottom, cut_top=top)
    logger.debug("Cut-out removes %d cells (cols %d-%d, rows %d-%d)",
                 len(cells), col_start, col_end, row_start, row_end)
    return CutoutResult(removed=len(cells), removed_cells=cells, cut_rect=rect)


def plan_grid(screen_w, screen_h, panel, rounding=Rounding.UP, cutout: Optional[CutoutRequest] = None) -> GridResult:
    """Size the grid for `panel` and apply an optional cut-out."""
    cols, rows = size_grid(screen_w, screen_h, panel.panel_w_m, panel.panel_h_m, rounding)
    if cutout is None:
        return GridResult(cols=cols, rows=rows)

    cut = cutout_panels_removed(panel.panel_w_m, panel.panel_h_m, cols, rows,
                                cutout.width_m, cutout.height_m, cutout.bottom_offset_m)
    return GridResult(cols=cols, rows=rows, removed_cells=cut.removed_cells,
                      cut_rect=cut.cut_rect, cutout_enabled=True)
