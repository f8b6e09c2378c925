import os

import pytest
from streamlit.testing.v1 import AppTest

from led_planner import config

APP = os.path.join(os.path.dirname(__file__), "..", "led_wall_estimator.py")


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "LOG_FILE", str(tmp_path / "planner.log"))
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    return at


def metric(at, label):
    return next(m.value for m in at.metric if m.label == label)


def test_default_plan_renders(app):
    assert not app.exception
    assert metric(app, "Panels") == "6 × 6 (36 net)"
    assert metric(app, "Pixels") == "1536 × 768"
    assert "latest" in app.session_state


def test_cutout_toggle_removes_panels(app):
    app.checkbox[0].check().run()
    assert not app.exception
    assert metric(app, "Panels") == "6 × 6 (32 net, 4 removed)"


def test_distro_template_sets_circuit_rating(app):
    app.selectbox(key="distro").set_value("SP15").run()
    assert not app.exception
    assert app.number_input(key="circuit_a").value == 15.0
    assert app.number_input(key="voltage").value == 230.0
