"""Pytest configuration.

Puts the repository root on sys.path so `led_planner` imports work without an install.
"""

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from led_planner.grid import CutoutRequest  # noqa: E402
from led_planner.planner import ScreenRequest  # noqa: E402


@pytest.fixture
def base_request():
    """6m x 3m wall of 1.0m x 0.5m ELX panels on 230V / 10A."""
    return ScreenRequest(panel_key="ELX_1x0p5", screen_w_m=6.0, screen_h_m=3.0)


@pytest.fixture
def stage_cutout():
    return CutoutRequest(width_m=2.0, height_m=1.0, bottom_offset_m=0.0)
