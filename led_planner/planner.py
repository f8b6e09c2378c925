# led_planner/planner.py
# One screen request in, one plan out.
#
# Flow: grid sizing -> cut-out -> processor + ports, power, structure -> PlanResult.
# Nothing here touches Streamlit; the app keeps the latest result for export.

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from led_planner import config
from led_planner.grid import CutoutRequest, GridResult, Rounding, plan_grid
from led_planner.issues import (
    CUTOUT_EMPTY,
    LAST_PORT_OVER_CAP,
    NO_PROCESSOR_FIT,
    NO_USABLE_POWER,
    OVER_CAPACITY,
    Issue,
    Level,
)
from led_planner.ports import PortPlan, build_port_plan
from led_planner.power import PowerCables, PowerPlan, RowPower, estimate_power_cables, per_row_power, power_plan
from led_planner.processors import AUTO, select_processor
from led_planner.specs import PANELS, PROCESSORS, PanelSpec, ProcessorSpec, get_panel
from led_planner.structure import structure_suggestion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreenRequest:
    panel_key: str = config.DEFAULT_PANEL
    screen_w_m: float = config.DEFAULT_SCREEN_W_M
    screen_h_m: float = config.DEFAULT_SCREEN_H_M
    rounding: Rounding = Rounding.UP
    cutout: Optional[CutoutRequest] = None
    proc_mode: str = AUTO
    max_px_per_port: Optional[int] = config.DEFAULT_MAX_PX_PER_PORT
    max_panels_data: int = config.DEFAULT_MAX_PANELS_DATA
    max_panels_power: int = config.DEFAULT_MAX_PANELS_POWER
    distro_template: str = config.DEFAULT_DISTRO
    voltage: float = 230
    circuit_a: float = 10
    continuous_factor: float = config.CONTINUOUS_FACTOR


@dataclass(frozen=True)
class DataCables:
    processor_feeds: int = 0
    patch_leads: int = 0
    total_data_cables: int = 0


@dataclass
class PlanResult:
    request: ScreenRequest
    panel: PanelSpec
    grid: GridResult
    built_w_m: float
    built_h_m: float
    area_m2: float
    canvas_w_px: int
    canvas_h_px: int
    total_pixels_net: int
    weight_kg: float
    power_rms_w: float
    power_peak_w: float
    processor: Optional[ProcessorSpec]
    port_plan: Optional[PortPlan]
    power: PowerPlan
    per_row: List[RowPower]
    data_cables: DataCables
    power_cables: PowerCables
    structure: str
    issues: List[Issue] = field(default_factory=list)

    @property
    def processor_summary(self) -> str:
        if self.processor is None:
            return ("No processor fits the total pixel load (based on current DB). "
                    "Add a larger model or change constraints.")
        text = (f"{self.processor.model} • Ports: {self.processor.ports} • "
                f"Wall pixels: {self.total_pixels_net:,} • Ports needed by cap: {self.port_plan.ports_needed}")
        if self.port_plan.over_capacity:
            text += " • OVER CAPACITY (needs more ports/processors)"
        return text


def plan_screen(request: ScreenRequest, panels=None, processors=None) -> PlanResult:
    panels = PANELS if panels is None else panels
    processors = PROCESSORS if processors is None else processors

    panel = get_panel(request.panel_key, panels)
    max_panels_data = max(1, int(request.max_panels_data))
    max_panels_power = max(1, int(request.max_panels_power))
    issues = []

    # -----------------------
    # Grid + cut-out
    # -----------------------
    grid = plan_grid(request.screen_w_m, request.screen_h_m, panel, request.rounding, request.cutout)
    if grid.cutout_enabled and grid.removed == 0:
        issues.append(Issue(Level.INFO, CUTOUT_EMPTY, "Cut-out is enabled but removes no panels.",
                            field="cutout", hint="Check the cut-out size and bottom offset against the wall."))

    built_w = grid.cols * panel.panel_w_m
    built_h = grid.rows * panel.panel_h_m
    area = built_w * built_h
    total_pixels_net = grid.net * panel.pixels_per_panel

    # -----------------------
    # Processor + ports
    # -----------------------
    proc = select_processor(request.proc_mode, total_pixels_net, processors)
    port_plan = None
    data_cables = DataCables()
    if proc is None:
        issues.append(Issue(Level.ERROR, NO_PROCESSOR_FIT,
                            f"No processor fits {total_pixels_net:,} px.",
                            field="proc_mode", hint="Add a larger model or change constraints."))
    else:
        max_px_port = request.max_px_per_port or proc.default_max_px_per_port
        port_plan = build_port_plan(grid.net, panel.pixels_per_panel, grid.cols, grid.rows,
                                    proc.ports, max_px_port, max_panels_data)
        data_cables = DataCables(port_plan.processor_feeds, port_plan.patch_leads, port_plan.total_data_cables)
        if port_plan.over_capacity:
            issues.append(Issue(Level.WARNING, OVER_CAPACITY,
                                f"{proc.model} has {proc.ports} ports; {port_plan.ports_needed} needed at "
                                f"{max_px_port:,} px/port.",
                                field="proc_mode", hint="Needs more ports/processors."))
        if port_plan.last_port_over_cap:
            issues.append(Issue(Level.WARNING, LAST_PORT_OVER_CAP,
                                f"Port {port_plan.ports[-1].port} carries {port_plan.ports[-1].pixels:,} px, "
                                f"above the {max_px_port:,} px cap.",
                                field="max_px_per_port"))

    # -----------------------
    # Power (net panels only)
    # -----------------------
    weight = grid.net * panel.weight_kg
    rms_w = grid.net * panel.power_rms_w
    peak_w = grid.net * panel.power_peak_w
    power = power_plan(rms_w, peak_w, request.voltage, request.circuit_a, request.continuous_factor)
    if power.usable_w <= 0:
        issues.append(Issue(Level.ERROR, NO_USABLE_POWER,
                            "Circuits give no usable power; circuit count not planned.",
                            field="circuit_a", hint="Check voltage, circuit rating and continuous-duty factor."))
    rows = per_row_power(grid.removed_mask(), panel.power_rms_w, panel.power_peak_w)
    power_cables = estimate_power_cables(grid.net, max_panels_power)

    logger.debug("Planned %s: %dx%d grid, %d net panels, %s, %d RMS circuits",
                 panel.key, grid.cols, grid.rows, grid.net,
                 proc.model if proc else "no processor", power.rms_circuits)

    return PlanResult(
        request=request,
        panel=panel,
        grid=grid,
        built_w_m=built_w,
        built_h_m=built_h,
        area_m2=area,
        canvas_w_px=grid.cols * panel.pixels_w,
        canvas_h_px=grid.rows * panel.pixels_h,
        total_pixels_net=total_pixels_net,
        weight_kg=weight,
        power_rms_w=rms_w,
        power_peak_w=peak_w,
        processor=proc,
        port_plan=port_plan,
        power=power,
        per_row=rows,
        data_cables=data_cables,
        power_cables=power_cables,
        structure=structure_suggestion(area),
        issues=issues,
    )
