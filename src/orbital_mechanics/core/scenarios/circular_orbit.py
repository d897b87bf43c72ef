from __future__ import annotations

import math

from ..config import SimulationSettings
from ..model import Body
from ..sim import Simulation
from .base import ScenarioUIDefaults
from .registry import scenario_registry

ATTRACTOR_MASS = 1e16
SATELLITE_MASS = 1.0
ORBIT_RADIUS = 200.0


def circular_speed(G: float, attractor_mass: float, radius: float) -> float:
    return math.sqrt(G * attractor_mass / radius)


class CircularOrbitScenario:
    scenario_id = "circular_orbit"
    name = "Circular Orbit"

    def create_simulation(self) -> Simulation:
        settings = SimulationSettings.from_env(defaults={"dt": 0.05})
        speed = circular_speed(settings.constants.G, ATTRACTOR_MASS, ORBIT_RADIUS)
        bodies = [
            Body(ATTRACTOR_MASS, (500.0, 500.0), (0.0, 0.0), body_id="Attractor"),
            Body(SATELLITE_MASS, (500.0 + ORBIT_RADIUS, 500.0), (0.0, speed), body_id="Satellite"),
        ]
        return Simulation(bodies=bodies, settings=settings)

    def ui_defaults(self) -> ScenarioUIDefaults:
        return ScenarioUIDefaults(
            view_range=(0.0, 1000.0, 0.0, 1000.0),
            body_scale=10.0,
            colors={"Attractor": (1.0, 1.0, 0.0), "Satellite": (0.0, 0.6, 1.0)},
        )


scenario_registry.register(CircularOrbitScenario())
