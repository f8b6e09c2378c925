# led_planner/power.py
# Power planning: circuits, per-row load and power cabling.
#
# Notes:
# - Circuits are sized on an 80% continuous-load derating unless told otherwise.
# - PD620-style 3-phase distros are planned as a set of single-phase circuits.
#   Real distro wiring depends on the outlet configuration.

import logging
import math
from dataclasses import dataclass

import numpy as np

from led_planner.config import CONTINUOUS_FACTOR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PowerPlan:
    continuous_factor: float
    usable_w: float
    rms_circuits: int
    peak_circuits: int
    rms_a: float
    peak_a: float


@dataclass(frozen=True)
class RowPower:
    row: int
    panels: int
    rms_w: float
    peak_w: float


@dataclass(frozen=True)
class PowerCables:
    chains: int
    mains_feeds: int
    jumpers: int
    total_power_cables: int


def power_plan(total_rms_w, total_peak_w, voltage, circuit_a, continuous_factor=CONTINUOUS_FACTOR) -> PowerPlan:
    """Zero circuits and zero current mean the circuit or voltage gives no usable power."""
    usable_a = circuit_a * continuous_factor
    usable_w = voltage * usable_a
    if usable_w > 0:
        rms_circuits = max(1, math.ceil(total_rms_w / usable_w))
        peak_circuits = max(1, math.ceil(total_peak_w / usable_w))
    else:
        logger.warning("No usable power per circuit (%sV, %sA, factor %s)", voltage, circuit_a, continuous_factor)
        rms_circuits = peak_circuits = 0

    logger.debug("Power: %.0fW RMS / %.0fW peak over %.0fW circuits -> %d / %d",
                 total_rms_w, total_peak_w, usable_w, rms_circuits, peak_circuits)

    return PowerPlan(
        continuous_factor=continuous_factor,
        usable_w=usable_w,
        rms_circuits=rms_circuits,
        peak_circuits=peak_circuits,
        rms_a=total_rms_w / voltage if voltage else 0.0,
        peak_a=total_peak_w / voltage if voltage else 0.0,
    )


def per_row_power(removed_mask, power_rms_w, power_peak_w):
    """Surviving panels and wattage for each grid row, bottom row first (row numbers are 1-based).

    `removed_mask` is the (rows, cols) boolean array from `GridResult.removed_mask()`.
    """
    counts = (~np.asarray(removed_mask, dtype=bool)).sum(axis=1)

    return [
        RowPower(row=r + 1, panels=int(n), rms_w=int(n) * power_rms_w, peak_w=int(n) * power_peak_w)
        for r, n in enumerate(counts)
    ]


def estimate_power_cables(total_panels, max_panels_per_chain) -> PowerCables:
    """Simple daisy-chain model: one mains feed per chain, one jumper between neighbouring panels."""
    chains = max(1, math.ceil(total_panels / max_panels_per_chain))
    jumpers = max(0, total_panels - chains)
    return PowerCables(chains=chains, mains_feeds=chains, jumpers=jumpers,
                       total_power_cables=chains + jumpers)
