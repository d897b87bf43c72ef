from __future__ import annotations

from ..config import SimulationSettings
from ..model import Body
from ..sim import Simulation
from .base import ScenarioUIDefaults
from .registry import scenario_registry


class ThreeBodyDemoScenario:
    scenario_id = "three_body_demo"
    name = "Three Body Demo"

    def create_simulation(self) -> Simulation:
        bodies = [
            Body(1e14, (500.0, 500.0), (0.0, 0.0), body_id="A"),
            Body(1e12, (500.0, 600.0), (10.0, 0.0), body_id="B"),
            Body(3e12, (600.0, 700.0), (-5.0, 0.0), body_id="C"),
        ]
        return Simulation(bodies=bodies, settings=SimulationSettings.from_env(defaults={"dt": 1.0}))

    def ui_defaults(self) -> ScenarioUIDefaults:
        return ScenarioUIDefaults(
            view_range=(0.0, 1000.0, 0.0, 1000.0),
            body_scale=10.0,
            colors={"A": (1.0, 0.0, 0.0), "B": (0.0, 1.0, 0.0), "C": (0.0, 0.0, 1.0)},
        )


scenario_registry.register(ThreeBodyDemoScenario())
