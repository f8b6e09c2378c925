# led_planner/exports.py
# JSON plan export, BOM table/CSV and the display tables used by the app.

import json
from dataclasses import asdict

import pandas as pd

from led_planner import config
from led_planner.grid import Rounding

BOM_COLUMNS = ["Category", "Item", "Qty", "Unit", "Notes"]


# -----------------------
# Structured (JSON) export
# -----------------------

def _port_plan_dict(port_plan):
    if port_plan is None:
        return None
    return {
        "totalPixels": port_plan.total_pixels,
        "portsNeeded": port_plan.ports_needed,
        "portsUsed": port_plan.ports_used,
        "overCapacity": port_plan.over_capacity,
        "pxPerPortCap": port_plan.px_per_port_cap,
        "processorFeeds": port_plan.processor_feeds,
        "patchLeads": port_plan.patch_leads,
        "totalDataCables": port_plan.total_data_cables,
        "plan": [
            {"port": p.port, "panels": p.panels, "pixels": p.pixels,
             "chains": p.chains, "chainSizes": list(p.chain_sizes)}
            for p in port_plan.ports
        ],
    }


def plan_to_dict(result):
    req = result.request
    grid = result.grid
    cut = req.cutout

    if cut is not None:
        cutout = {"enabled": True, "width_m": cut.width_m, "height_m": cut.height_m,
                  "bottomOffset_m": cut.bottom_offset_m}
    else:
        cutout = {"enabled": False}

    power = result.power
    return {
        "build": config.BUILD,
        "inputs": {
            "panelKey": req.panel_key,
            "screenW_m": req.screen_w_m,
            "screenH_m": req.screen_h_m,
            "rounding": Rounding(req.rounding).value,
            "cutout": cutout,
            "procMode": req.proc_mode,
            "maxPxPerPort": req.max_px_per_port,
            "maxPanelsData": req.max_panels_data,
            "maxPanelsPower": req.max_panels_power,
            "distroTemplate": req.distro_template,
            "voltage_v": req.voltage,
            "circuitA": req.circuit_a,
        },
        "panel": asdict(result.panel),
        "derived": {
            "panelsW": grid.cols,
            "panelsH": grid.rows,
            "totalPanelsGross": grid.gross,
            "panelsRemoved": grid.removed,
            "removedCells": [{"r": r, "c": c} for r, c in grid.removed_cells],
            "cutRect": asdict(grid.cut_rect) if grid.cut_rect else None,
            "totalPanelsNet": grid.net,
            "builtW_m": result.built_w_m,
            "builtH_m": result.built_h_m,
            "area_m2": result.area_m2,
            "canvasGrid_px": {"w": result.canvas_w_px, "h": result.canvas_h_px},
            "totalPixelsNet": result.total_pixels_net,
            "totals": {
                "weight_kg": result.weight_kg,
                "power_rms_w": result.power_rms_w,
                "power_peak_w": result.power_peak_w,
            },
            "processor": asdict(result.processor) if result.processor else None,
            "portPlan": _port_plan_dict(result.port_plan),
            "power": {
                "continuousFactor": power.continuous_factor,
                "usableW": power.usable_w,
                "rmsCircuits": power.rms_circuits,
                "peakCircuits": power.peak_circuits,
                "rmsA": power.rms_a,
                "peakA": power.peak_a,
            },
            "perRow": [{"row": r.row, "panels": r.panels, "rmsW": r.rms_w, "peakW": r.peak_w}
                       for r in result.per_row],
            "cables": {
                "data": {
                    "processorFeeds": result.data_cables.processor_feeds,
                    "patchLeads": result.data_cables.patch_leads,
                    "totalDataCables": result.data_cables.total_data_cables,
                },
                "power": {
                    "chains": result.power_cables.chains,
                    "mainsFeeds": result.power_cables.mains_feeds,
                    "jumpers": result.power_cables.jumpers,
                    "totalPowerCables": result.power_cables.total_power_cables,
                },
            },
            "structureConcept": result.structure,
            "issues": [{"level": i.level.value, "code": i.code, "message": i.message} for i in result.issues],
        },
    }


def plan_to_json(result):
    return json.dumps(plan_to_dict(result), indent=2, ensure_ascii=False)


# -----------------------
# Bill of materials
# -----------------------

def bom_items(result):
    req = result.request
    panel = result.panel
    proc = result.processor
    data = result.data_cables
    power_cables = result.power_cables

    items = [
        {"Category": "LED", "Item": panel.label, "Qty": result.grid.net, "Unit": "panel",
         "Notes": f"{panel.panel_w_m}m x {panel.panel_h_m}m • {panel.pixels_w}x{panel.pixels_h}px"},
    ]
    if proc is not None:
        items.append({"Category": "Processing", "Item": proc.model, "Qty": 1, "Unit": "unit",
                      "Notes": f"Ports {proc.ports}"})

    items += [
        {"Category": "Cables - Data", "Item": "Processor feeds (data)", "Qty": data.processor_feeds,
         "Unit": "cable", "Notes": "Processor → first panel per chain"},
        {"Category": "Cables - Data", "Item": "Patch leads (data)", "Qty": data.patch_leads,
         "Unit": "cable", "Notes": "Panel → panel within chains"},
        {"Category": "Cables - Power", "Item": "Mains feeds (power)", "Qty": power_cables.mains_feeds,
         "Unit": "cable", "Notes": "Feed per power chain"},
        {"Category": "Cables - Power", "Item": "Power jumpers", "Qty": power_cables.jumpers,
         "Unit": "cable", "Notes": "Panel → panel within power chains"},
        {"Category": "Power", "Item": "Estimated RMS", "Qty": round(result.power_rms_w), "Unit": "W",
         "Notes": "Total wall RMS estimate"},
        {"Category": "Power", "Item": "Estimated Peak", "Qty": round(result.power_peak_w), "Unit": "W",
         "Notes": "Total wall peak estimate"},
        {"Category": "Power", "Item": "Circuits (RMS)", "Qty": result.power.rms_circuits, "Unit": "circuit",
         "Notes": f"{req.voltage:g}V @ {req.circuit_a:g}A ({result.power.continuous_factor:.0%})"},
        {"Category": "Rigging", "Item": "Structure concept", "Qty": 1, "Unit": "note",
         "Notes": result.structure},
    ]

    if result.grid.cutout_enabled:
        items.append({"Category": "LED", "Item": "Cut-out (removed panels)", "Qty": result.grid.removed,
                      "Unit": "panel", "Notes": "Removed from gross panel grid"})
    return items


def bom_dataframe(result):
    return pd.DataFrame(bom_items(result), columns=BOM_COLUMNS)


def bom_csv(result):
    return bom_dataframe(result).to_csv(index=False, lineterminator="\n")


# -----------------------
# Display tables
# -----------------------

def ports_dataframe(port_plan):
    if port_plan is None:
        return pd.DataFrame(columns=["Port", "Panels", "Pixels", "Chains", "Chain sizes"])
    return pd.DataFrame({
        "Port": [p.port for p in port_plan.ports],
        "Panels": [p.panels for p in port_plan.ports],
        "Pixels": [p.pixels for p in port_plan.ports],
        "Chains": [p.chains for p in port_plan.ports],
        "Chain sizes": [", ".join(str(s) for s in p.chain_sizes) for p in port_plan.ports],
    })


def rows_dataframe(per_row):
    return pd.DataFrame({
        "Row": [r.row for r in per_row],
        "Panels": [r.panels for r in per_row],
        "RMS (W)": [r.rms_w for r in per_row],
        "Peak (W)": [r.peak_w for r in per_row],
    })
