# led_wall_estimator.py
# Streamlit app: LED Screen Planner (panel grid, ports, power, cabling and BOM)
#
# Usage:
#   1) pip install -e .
#   2) streamlit run led_wall_estimator.py
#
# Notes:
# - Planning math lives in the led_planner package; this script only collects inputs and shows results.
# - The cut-out is centred horizontally and measured up from the bottom of the wall.
# - Any panel the cut-out touches is removed from the plan.
# - The distro template sets voltage/circuit defaults; you can still override them afterwards.

import logging

import streamlit as st

from led_planner import config
from led_planner.exports import bom_csv, plan_to_json, ports_dataframe, rows_dataframe
from led_planner.figures import grid_figure
from led_planner.grid import CutoutRequest, Rounding
from led_planner.issues import Level, has_errors, validate_request
from led_planner.logging_setup import init_logging
from led_planner.planner import ScreenRequest, plan_screen
from led_planner.processors import AUTO
from led_planner.specs import DISTRO_TEMPLATES, PANELS, PROCESSORS, distro_template

st.set_page_config(page_title="LED Screen Planner", layout="wide")

init_logging()
logger = logging.getLogger("led_wall_estimator")

# -----------------------
# Helpers
# -----------------------

def fmt(n, d=0):
    return f"{n:,.{d}f}"


def show_issues(issues):
    for issue in issues:
        text = issue.message + (f" {issue.hint}" if issue.hint else "")
        if issue.level is Level.ERROR:
            st.error(text)
        elif issue.level is Level.WARNING:
            st.warning(text)
        else:
            st.info(text)


def apply_distro_template():
    d = distro_template(st.session_state.distro)
    st.session_state.voltage = float(d.voltage)
    st.session_state.circuit_a = float(d.circuit_a)


if "voltage" not in st.session_state:
    _d = distro_template(config.DEFAULT_DISTRO)
    st.session_state.voltage = float(_d.voltage)
    st.session_state.circuit_a = float(_d.circuit_a)

# -----------------------
# Sidebar Controls
# -----------------------

st.sidebar.title("Planner Controls")

st.sidebar.subheader("Panel & Screen")
panel_keys = list(PANELS)
panel_key = st.sidebar.selectbox("Panel type", panel_keys, index=panel_keys.index(config.DEFAULT_PANEL),
                                 format_func=lambda k: PANELS[k].label)
st.sidebar.caption(PANELS[panel_key].hint)
screen_w = st.sidebar.number_input("Screen width (m)", min_value=0.1, step=0.5,
                                   value=config.DEFAULT_SCREEN_W_M, format="%.2f")
screen_h = st.sidebar.number_input("Screen height (m)", min_value=0.1, step=0.5,
                                   value=config.DEFAULT_SCREEN_H_M, format="%.2f")
rounding = st.sidebar.selectbox("Rounding", [Rounding.UP.value, Rounding.DOWN.value],
                                format_func=lambda r: "Round up" if r == "UP" else "Round down (min 1)")

st.sidebar.subheader("Cut-out")
cutout_enabled = st.sidebar.checkbox("Enable cut-out", value=False)
cut_w = st.sidebar.number_input("Cut-out width (m)", min_value=0.0, step=0.5, value=config.DEFAULT_CUTOUT_W_M,
                                format="%.2f", disabled=not cutout_enabled)
cut_h = st.sidebar.number_input("Cut-out height (m)", min_value=0.0, step=0.5, value=config.DEFAULT_CUTOUT_H_M,
                                format="%.2f", disabled=not cutout_enabled)
cut_bottom = st.sidebar.number_input("Cut-out bottom offset (m)", min_value=0.0, step=0.5,
                                     value=config.DEFAULT_CUTOUT_BOTTOM_M, format="%.2f",
                                     disabled=not cutout_enabled)

st.sidebar.subheader("Processing & Data")
proc_modes = [AUTO] + list(PROCESSORS)
proc_mode = st.sidebar.selectbox("Processor", proc_modes,
                                 format_func=lambda k: "Auto (smallest that fits)" if k == AUTO else PROCESSORS[k].model)
max_px_per_port = st.sidebar.number_input("Max pixels per port (0 = processor default)", min_value=0, step=10_000,
                                          value=config.DEFAULT_MAX_PX_PER_PORT)
max_panels_data = st.sidebar.number_input("Max panels per data chain", min_value=1, step=1,
                                          value=config.DEFAULT_MAX_PANELS_DATA)

st.sidebar.subheader("Power")
distro_keys = list(DISTRO_TEMPLATES)
st.sidebar.selectbox("Distro template", distro_keys, index=distro_keys.index(config.DEFAULT_DISTRO),
                     format_func=lambda k: DISTRO_TEMPLATES[k].label, key="distro",
                     on_change=apply_distro_template)
voltage = st.sidebar.number_input("Voltage (V)", min_value=1.0, step=10.0, key="voltage")
circuit_a = st.sidebar.number_input("Circuit rating (A)", min_value=1.0, step=1.0, key="circuit_a")
max_panels_power = st.sidebar.number_input("Max panels per power chain", min_value=1, step=1,
                                           value=config.DEFAULT_MAX_PANELS_POWER)

# -----------------------
# Plan
# -----------------------

request = ScreenRequest(
    panel_key=panel_key,
    screen_w_m=float(screen_w),
    screen_h_m=float(screen_h),
    rounding=Rounding(rounding),
    cutout=CutoutRequest(float(cut_w), float(cut_h), float(cut_bottom)) if cutout_enabled else None,
    proc_mode=proc_mode,
    max_px_per_port=int(max_px_per_port),
    max_panels_data=int(max_panels_data),
    max_panels_power=int(max_panels_power),
    distro_template=st.session_state.distro,
    voltage=float(voltage),
    circuit_a=float(circuit_a),
    continuous_factor=config.CONTINUOUS_FACTOR,
)

st.title("LED Screen Planner")
st.caption(f"Build {config.BUILD} • For planning purposes only; confirm against spec sheets and site power.")

input_issues = validate_request(request)
if has_errors(input_issues):
    show_issues(input_issues)
    st.stop()

result = plan_screen(request)
# The app, not the planner, keeps the latest plan for downloads
st.session_state.latest = result
grid = result.grid
distro = distro_template(request.distro_template)

show_issues(result.issues)

left, right = st.columns([1, 1])

with left:
    st.subheader("Panel Grid")
    st.plotly_chart(grid_figure(result), use_container_width=True)

    st.subheader("Ports")
    if result.port_plan is not None:
        st.caption(f"Pixels/port cap: {fmt(result.port_plan.px_per_port_cap)} • "
                   f"Data chains cap: {request.max_panels_data} panels/chain")
        st.dataframe(ports_dataframe(result.port_plan), use_container_width=True, hide_index=True)
    else:
        st.write("No processor selected / fits.")

    st.subheader("Power per Row")
    st.dataframe(rows_dataframe(result.per_row), use_container_width=True, hide_index=True)

with right:
    st.subheader("Specs")
    removed_text = f", {grid.removed} removed" if grid.cutout_enabled else ""
    st.metric("Panels", f"{grid.cols} × {grid.rows} ({grid.net} net{removed_text})")
    st.metric("Size (m)", f"{result.built_w_m:.2f} × {result.built_h_m:.2f} ({result.area_m2:.1f} m²)")
    st.metric("Pixels", f"{result.canvas_w_px} × {result.canvas_h_px}")
    st.caption(f"Per-grid canvas; net {fmt(result.total_pixels_net)} px")
    st.metric("Weight", f"{result.weight_kg:.1f} kg")
    st.caption("LED only")

    st.subheader("Processor")
    st.write(result.processor_summary)

    st.subheader("Structure")
    st.write(result.structure)

    st.subheader("Power")
    power = result.power
    st.text(
        f"RMS: {fmt(result.power_rms_w)} W\n"
        f"Peak: {fmt(result.power_peak_w)} W\n\n"
        f"Assumed: {request.voltage:g}V, {request.circuit_a:g}A, {power.continuous_factor:.0%} cont.\n"
        f"Usable per circuit: {fmt(power.usable_w)} W\n\n"
        f"RMS current: {power.rms_a:.1f} A\n"
        f"Peak current: {power.peak_a:.1f} A\n\n"
        f"Circuits needed (RMS): {power.rms_circuits}\n"
        f"Circuits needed (Peak): {power.peak_circuits}\n"
        f"Template note: {distro.note}"
    )

    st.subheader("Cables")
    data, pc = result.data_cables, result.power_cables
    st.text(
        "DATA\n"
        f"Processor→First panel feeds: {data.processor_feeds}\n"
        f"Panel→Panel patch leads: {data.patch_leads}\n"
        f"Total data cables: {data.total_data_cables}\n\n"
        "POWER\n"
        f"Power chains: {pc.chains}\n"
        f"Mains feeds: {pc.mains_feeds}\n"
        f"Power jumpers: {pc.jumpers}\n"
        f"Total power cables: {pc.total_power_cables}"
    )

st.markdown("---")

plan_json = plan_to_json(st.session_state.latest)
dl_left, dl_right = st.columns([1, 1])
with dl_left:
    st.download_button("Download plan (JSON)", plan_json, file_name=config.JSON_FILENAME,
                       mime="application/json")
with dl_right:
    st.download_button("Download BOM (CSV)", bom_csv(st.session_state.latest), file_name=config.BOM_FILENAME,
                       mime="text/csv")

with st.expander("Plan JSON"):
    st.code(plan_json, language="json")

st.caption("For rapid planning purposes only.")
