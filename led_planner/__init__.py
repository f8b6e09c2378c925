from led_planner.config import BUILD
from led_planner.grid import CutoutRequest, Rounding
from led_planner.planner import PlanResult, ScreenRequest, plan_screen

__version__ = "1.1.0"

__all__ = ["BUILD", "CutoutRequest", "PlanResult", "Rounding", "ScreenRequest", "plan_screen"]
