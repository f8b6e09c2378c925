# led_planner/ports.py
# Processor port planning and data cable counts.
#
# Strategy:
#   1) Ports required = pixels / pixels-per-port cap (rounded up, at least one).
#   2) Spread pixels evenly over the ports we actually have; the last port takes the rest.
#   3) Convert each port's pixel share into a panel count.
#   4) Split every port into data chains no longer than the chain cap.
#
# The last port is not checked against the pixel cap after it absorbs the remainder.

import logging
import math
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass
class PortAssignment:
    port: int
    panels: int
    pixels: int
    chains: int
    chain_sizes: List[int]


@dataclass
class PortPlan:
    total_pixels: int
    ports_needed: int
    ports_used: int
    over_capacity: bool
    px_per_port_cap: int
    processor_feeds: int
    patch_leads: int
    total_data_cables: int
    ports: List[PortAssignment]

    @property
    def last_port_over_cap(self) -> bool:
        return bool(self.ports) and self.ports[-1].pixels > self.px_per_port_cap


def split_chains(panels, max_panels_per_chain):
    """Chain sizes for one port; every chain except the last is as full as the cap allows."""
    chains = max(1, math.ceil(panels / max_panels_per_chain))
    sizes = []
    rem = panels
    for c in range(chains):
        if c == chains - 1:
            size = rem
        else:
            size = min(max_panels_per_chain, rem - (chains - c - 1))
        sizes.append(size)
        rem -= size
    return sizes


def _assignment(port, panels, px_per_panel, max_panels_per_chain):
    sizes = split_chains(panels, max_panels_per_chain)
    return PortAssignment(port=port, panels=panels, pixels=panels * px_per_panel,
                          chains=len(sizes), chain_sizes=sizes)


def build_port_plan(total_panels, px_per_panel, cols, rows, ports_available,
                    max_px_per_port, max_panels_per_chain) -> PortPlan:
    total_pixels = total_panels * px_per_panel
    ports_needed = max(1, math.ceil(total_pixels / max_px_per_port))
    ports_used = max(1, min(ports_available, ports_needed))
    over_capacity = ports_used < ports_needed

    px_per_port_target = math.ceil(total_pixels / ports_used)
    plan = []
    remaining = total_panels

    for i in range(ports_used):
        if i == ports_used - 1:
            panels = remaining
        else:
            # half-up, not banker's rounding
            share = math.floor(px_per_port_target / px_per_panel + 0.5)
            panels = min(remaining, max(1, share))
        remaining -= panels
        plan.append(_assignment(i + 1, panels, px_per_panel, max_panels_per_chain))

    # Rounding drift lands on the last port
    if remaining != 0 and plan:
        last = plan[-1]
        plan[-1] = _assignment(last.port, last.panels + remaining, px_per_panel, max_panels_per_chain)

    processor_feeds = sum(p.chains for p in plan)
    patch_leads = sum(max(0, s - 1) for p in plan for s in p.chain_sizes)

    if over_capacity:
        logger.warning("Over capacity: %d ports needed, %d available (%dx%d grid)",
                       ports_needed, ports_available, cols, rows)
    logger.debug("Port plan: %d panels over %d ports, %d feeds, %d patch leads",
                 total_panels, ports_used, processor_feeds, patch_leads)

    return PortPlan(
        total_pixels=total_pixels,
        ports_needed=ports_needed,
        ports_used=ports_used,
        over_capacity=over_capacity,
        px_per_port_cap=max_px_per_port,
        processor_feeds=processor_feeds,
        patch_leads=patch_leads,
        total_data_cables=processor_feeds + patch_leads,
        ports=plan,
    )
