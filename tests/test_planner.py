from dataclasses import replace

import pytest

from led_planner.grid import CutoutRequest, Rounding
from led_planner.issues import (
    CUTOUT_EMPTY,
    LAST_PORT_OVER_CAP,
    NO_PROCESSOR_FIT,
    NO_USABLE_POWER,
    OVER_CAPACITY,
    Level,
    has_errors,
    validate_request,
)
from led_planner.planner import plan_screen


def codes(result):
    return {i.code for i in result.issues}


def test_example_wall(base_request):
    r = plan_screen(base_request)
    assert (r.grid.cols, r.grid.rows, r.grid.gross, r.grid.net) == (6, 6, 36, 36)
    assert (r.canvas_w_px, r.canvas_h_px) == (1536, 768)
    assert r.total_pixels_net == 1536 * 768
    assert (r.built_w_m, r.built_h_m, r.area_m2) == (6.0, 3.0, 18.0)
    assert r.weight_kg == 432
    assert r.power_rms_w == 9000
    assert r.power_peak_w == 28800
    assert r.power.rms_circuits == 5
    assert r.power.peak_circuits == 16
    assert r.processor.key == "VX600"
    assert r.port_plan.ports_needed == 2
    assert r.port_plan.ports_used == 2
    assert r.data_cables.total_data_cables == 36
    assert r.power_cables.total_power_cables == 36
    assert "towers + substantial header" in r.structure
    assert r.issues == []


def test_cutout_reduces_net_panels_and_totals(base_request, stage_cutout):
    r = plan_screen(replace(base_request, cutout=stage_cutout))
    assert r.grid.removed == 4
    assert r.grid.net == 32
    assert r.power_rms_w == 32 * 250
    assert r.total_pixels_net == 32 * 256 * 128
    assert sum(p.panels for p in r.port_plan.ports) == 32
    assert [row.panels for row in r.per_row][:3] == [4, 4, 6]


def test_cutout_that_misses_the_wall_is_reported(base_request):
    r = plan_screen(replace(base_request, cutout=CutoutRequest(2.0, 1.0, 10.0)))
    assert r.grid.removed == 0
    assert r.grid.net == 36
    assert CUTOUT_EMPTY in codes(r)


def test_no_processor_fits(base_request):
    r = plan_screen(replace(base_request, screen_w_m=30.0, screen_h_m=10.0))
    assert r.processor is None
    assert r.port_plan is None
    assert r.data_cables.total_data_cables == 0
    assert NO_PROCESSOR_FIT in codes(r)
    assert "No processor fits" in r.processor_summary
    # power is still planned
    assert r.power.rms_circuits > 1


def test_fixed_processor_over_capacity(base_request):
    r = plan_screen(replace(base_request, screen_w_m=20.0, screen_h_m=5.0, proc_mode="VX600"))
    assert r.processor.key == "VX600"
    assert r.port_plan.over_capacity
    assert r.port_plan.ports_used == 6
    assert {OVER_CAPACITY, LAST_PORT_OVER_CAP} <= codes(r)
    assert "OVER CAPACITY" in r.processor_summary


def test_zero_port_cap_uses_processor_default(base_request):
    r = plan_screen(replace(base_request, max_px_per_port=0))
    assert r.port_plan.px_per_port_cap == 650_000


def test_chain_caps_are_at_least_one(base_request):
    r = plan_screen(replace(base_request, max_panels_data=0, max_panels_power=0))
    assert r.power_cables.chains == 36
    assert all(size == 1 for p in r.port_plan.ports for size in p.chain_sizes)


def test_round_down(base_request):
    r = plan_screen(replace(base_request, screen_w_m=6.7, screen_h_m=3.2, rounding=Rounding.DOWN))
    assert (r.grid.cols, r.grid.rows) == (6, 6)


def test_plan_is_repeatable(base_request, stage_cutout):
    req = replace(base_request, cutout=stage_cutout)
    assert plan_screen(req) == plan_screen(req)


def test_validate_request_accepts_defaults(base_request):
    assert validate_request(base_request) == []


def test_validate_request_flags_bad_inputs(base_request):
    bad = replace(base_request, screen_w_m=0, voltage=-1, proc_mode="VX9", panel_key="nope",
                  continuous_factor=1.5, cutout=CutoutRequest(-1.0, 1.0, 0.0))
    issues = validate_request(bad)
    assert has_errors(issues)
    fields = {i.field for i in issues}
    assert {"screen_w_m", "voltage", "proc_mode", "panel_key", "continuous_factor", "cutout"} <= fields
    assert all(i.level is Level.ERROR for i in issues)


def test_unknown_panel_raises(base_request):
    with pytest.raises(KeyError):
        plan_screen(replace(base_request, panel_key="nope"))


def test_bad_inputs_still_produce_a_plan(base_request):
    for change in ({"voltage": 0}, {"circuit_a": 0}, {"continuous_factor": 0},
                   {"screen_w_m": -6.0}, {"screen_w_m": 0.0, "screen_h_m": 0.0},
                   {"screen_h_m": -3.0, "rounding": Rounding.DOWN}):
        r = plan_screen(replace(base_request, **change))
        assert r.grid.net >= 0
        assert len(r.per_row) == max(0, r.grid.rows)
        assert r.power.rms_circuits >= 0


def test_zero_usable_power_is_reported(base_request):
    r = plan_screen(replace(base_request, circuit_a=0))
    assert r.power.rms_circuits == 0
    assert NO_USABLE_POWER in codes(r)


def test_negative_width_leaves_no_panels(base_request):
    r = plan_screen(replace(base_request, screen_w_m=-6.0))
    assert r.grid.net == 0
    assert all(row.panels == 0 for row in r.per_row)
    assert r.power_rms_w == 0
