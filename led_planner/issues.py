# led_planner/issues.py
"""
Problems reported to the UI as data.

Planning never raises for an awkward wall: no processor fitting, running out
of ports or a cut-out that misses the wall all come back as `Issue` rows on
the result. `validate_request` is for the UI to call before planning; the
planner itself does not validate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from led_planner.processors import AUTO
from led_planner.specs import PANELS, PROCESSORS


class Level(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Issue:
    level: Level
    code: str
    message: str
    field: Optional[str] = None
    hint: Optional[str] = None


NO_PROCESSOR_FIT = "NO_PROCESSOR_FIT"
OVER_CAPACITY = "OVER_CAPACITY"
LAST_PORT_OVER_CAP = "LAST_PORT_OVER_CAP"
CUTOUT_EMPTY = "CUTOUT_EMPTY"
NO_USABLE_POWER = "NO_USABLE_POWER"


def has_errors(issues):
    return any(i.level is Level.ERROR for i in issues)


def validate_request(request, panels=None, processors=None):
    panels = PANELS if panels is None else panels
    processors = PROCESSORS if processors is None else processors
    issues = []

    if request.panel_key not in panels:
        issues.append(Issue(Level.ERROR, "UNKNOWN_PANEL", f"Unknown panel type {request.panel_key!r}.",
                            field="panel_key"))
    if request.proc_mode != AUTO and request.proc_mode not in processors:
        issues.append(Issue(Level.ERROR, "UNKNOWN_PROCESSOR", f"Unknown processor {request.proc_mode!r}.",
                            field="proc_mode", hint="Pick Auto or a model from the list."))

    for name, label in (("screen_w_m", "Screen width"), ("screen_h_m", "Screen height"),
                        ("voltage", "Voltage"), ("circuit_a", "Circuit rating")):
        if not getattr(request, name) > 0:
            issues.append(Issue(Level.ERROR, "NOT_POSITIVE", f"{label} must be greater than zero.", field=name))

    if not 0 < request.continuous_factor <= 1:
        issues.append(Issue(Level.ERROR, "BAD_CONTINUOUS_FACTOR",
                            "Continuous-duty factor must be in (0, 1].", field="continuous_factor"))

    if request.max_px_per_port is not None and request.max_px_per_port < 0:
        issues.append(Issue(Level.ERROR, "NOT_POSITIVE", "Pixels per port cap cannot be negative.",
                            field="max_px_per_port", hint="Use 0 for the processor default."))

    cut = request.cutout
    if cut is not None and (cut.width_m < 0 or cut.height_m < 0 or cut.bottom_offset_m < 0):
        issues.append(Issue(Level.ERROR, "NEGATIVE_CUTOUT", "Cut-out dimensions cannot be negative.",
                            field="cutout"))
    return issues
