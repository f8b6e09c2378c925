# led_planner/specs.py
# Reference data: LED panels, video processors and power distro templates.
#
# Notes:
# - EDIT these tables to match the spec sheets you actually deploy.
# - Processor order is ascending capacity; auto selection relies on it for ties.

from dataclasses import dataclass


@dataclass(frozen=True)
class PanelSpec:
    key: str
    label: str
    panel_w_m: float
    panel_h_m: float
    pixels_w: int
    pixels_h: int
    weight_kg: float
    power_rms_w: float
    power_peak_w: float

    @property
    def pixels_per_panel(self) -> int:
        return self.pixels_w * self.pixels_h

    @property
    def hint(self) -> str:
        return f"{self.panel_w_m}m × {self.panel_h_m}m • {self.pixels_w}px × {self.pixels_h}px"


@dataclass(frozen=True)
class ProcessorSpec:
    key: str
    model: str
    ports: int
    max_pixels_total: int
    default_max_px_per_port: int


@dataclass(frozen=True)
class DistroTemplate:
    key: str
    label: str
    voltage: float
    circuit_a: float
    note: str = ""


# -----------------------
# Panels
# -----------------------

PANELS = {
    "ELX_1x0p5": PanelSpec(
        key="ELX_1x0p5",
        label="ELX Series 3.9mm — 1.0m x 0.5m",
        panel_w_m=1.0,
        panel_h_m=0.5,
        pixels_w=256,
        pixels_h=128,
        weight_kg=12.0,
        power_rms_w=250,
        power_peak_w=800,
    ),
    "ELX_0p5x0p5": PanelSpec(
        key="ELX_0p5x0p5",
        label="ELX Series 3.9mm — 0.5m x 0.5m",
        panel_w_m=0.5,
        panel_h_m=0.5,
        pixels_w=128,
        pixels_h=128,
        weight_kg=6.5,
        power_rms_w=125,
        power_peak_w=400,
    ),
}

# -----------------------
# Processors (NovaStar)
# -----------------------

PROCESSORS = {
    "VX600": ProcessorSpec(key="VX600", model="NovaStar VX600", ports=6,
                           max_pixels_total=3_900_000, default_max_px_per_port=650_000),
    "VX1000": ProcessorSpec(key="VX1000", model="NovaStar VX1000", ports=10,
                            max_pixels_total=6_500_000, default_max_px_per_port=650_000),
}

# -----------------------
# Distro templates
# -----------------------

DISTRO_TEMPLATES = {
    "SP10": DistroTemplate("SP10", "10A single-phase", 230, 10, "Single-phase planning (10A)."),
    "SP15": DistroTemplate("SP15", "15A single-phase", 230, 15, "Single-phase planning (15A)."),
    # 3-phase 32A distro; outputs are planned as individual single-phase circuits
    "PD620": DistroTemplate(
        "PD620", "PD620 (3-phase 32A)", 230, 10,
        "PD620 planning view (treating outputs as multiple SP circuits; confirm outlet mix).",
    ),
}

_FALLBACK_DISTRO = DistroTemplate("", "Custom", 230, 10, "")


def distro_template(key):
    """Template for a distro key; unknown keys get the 230V / 10A fallback."""
    return DISTRO_TEMPLATES.get(key, _FALLBACK_DISTRO)


def get_panel(key, panels=None) -> PanelSpec:
    table = PANELS if panels is None else panels
    try:
        return table[key]
    except KeyError:
        raise KeyError(f"Unknown panel type: {key!r}") from None


def get_processor(key, processors=None) -> ProcessorSpec:
    table = PROCESSORS if processors is None else processors
    try:
        return table[key]
    except KeyError:
        raise KeyError(f"Unknown processor: {key!r}") from None
