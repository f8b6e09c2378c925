# led_planner/config.py
# Planner defaults. The Streamlit sidebar starts from these values.

import os

BUILD = "v1.1"

DEFAULT_PANEL = "ELX_1x0p5"
DEFAULT_SCREEN_W_M = 6.0
DEFAULT_SCREEN_H_M = 3.0

DEFAULT_CUTOUT_W_M = 2.0
DEFAULT_CUTOUT_H_M = 1.0
DEFAULT_CUTOUT_BOTTOM_M = 0.0

DEFAULT_MAX_PX_PER_PORT = 650_000
DEFAULT_MAX_PANELS_DATA = 10
DEFAULT_MAX_PANELS_POWER = 8

DEFAULT_DISTRO = "SP10"
CONTINUOUS_FACTOR = 0.8

JSON_FILENAME = "led_screen_plan.json"
BOM_FILENAME = "led_wall_bom.csv"

LOG_FILE = os.environ.get("LED_PLANNER_LOG_FILE", "led_planner.log")
LOG_LEVEL = os.environ.get("LED_PLANNER_LOG_LEVEL", "INFO").upper()
