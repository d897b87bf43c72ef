import math

import pytest

from orbital_mechanics.core.scenarios import ScenarioRegistry, load_builtin_scenarios, scenario_registry
from orbital_mechanics.core.scenarios.three_body_demo import ThreeBodyDemoScenario


@pytest.fixture(autouse=True)
def _clean_orbital_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ORBITAL_G", "ORBITAL_ACCURACY_THRESHOLD", "ORBITAL_DT", "ORBITAL_INTEGRATOR", "ORBITAL_FRAME_INTERVAL"):
        monkeypatch.delenv(name, raising=False)


def test_builtin_scenarios_register() -> None:
    load_builtin_scenarios()
    ids = {scenario.scenario_id for scenario in scenario_registry.all()}
    assert {"three_body_demo", "sun_earth_moon", "circular_orbit"} <= ids


def test_duplicate_registration_rejected() -> None:
    registry = ScenarioRegistry()
    registry.register(ThreeBodyDemoScenario())
    assert "three_body_demo" in registry
    with pytest.raises(ValueError):
        registry.register(ThreeBodyDemoScenario())
    with pytest.raises(KeyError):
        registry.get("missing")


def test_three_body_demo_initial_state() -> None:
    sim = ThreeBodyDemoScenario().create_simulation()
    assert sim.dt == 1.0
    assert [body.body_id for body in sim.bodies] == ["A", "B", "C"]
    b = sim.body("B")
    assert float(b.position.j) == 600.0
    assert float(b.velocity.i) == 10.0
    defaults = ThreeBodyDemoScenario().ui_defaults()
    assert defaults.view_range == (0.0, 1000.0, 0.0, 1000.0)
    assert set(defaults.colors) == {"A", "B", "C"}


def test_every_builtin_scenario_steps() -> None:
    load_builtin_scenarios()
    for scenario in scenario_registry.all():
        sim = scenario.create_simulation()
        sim.run(10)
        assert sim.tick == 10
        for body in sim.bodies:
            assert math.isfinite(float(body.position.i))
            assert math.isfinite(float(body.position.j))


def test_earth_stays_near_its_orbit_for_a_day() -> None:
    load_builtin_scenarios()
    sim = scenario_registry.get("sun_earth_moon").create_simulation()
    sun_to_earth = float((sim.body("Earth").position - sim.body("Sun").position).length())
    sim.run(24)
    after = float((sim.body("Earth").position - sim.body("Sun").position).length())
    assert after == pytest.approx(sun_to_earth, rel=1e-3)


def test_environment_step_overrides_scenario_default(monkeypatch: pytest.MonkeyPatch) -> None:
    load_builtin_scenarios()
    monkeypatch.setenv("ORBITAL_DT", "0.5")
    for scenario in scenario_registry.all():
        assert scenario.create_simulation().dt == 0.5


def test_scenario_defaults_apply_without_environment() -> None:
    load_builtin_scenarios()
    steps = {scenario.scenario_id: scenario.create_simulation().dt for scenario in scenario_registry.all()}
    assert steps["three_body_demo"] == 1.0
    assert steps["sun_earth_moon"] == 3600.0
    assert steps["circular_orbit"] == 0.05
