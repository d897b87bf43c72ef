from __future__ import annotations

from ..config import SimulationSettings
from ..model import Body
from ..sim import Simulation
from .base import ScenarioUIDefaults
from .registry import scenario_registry

EARTH_ORBIT_RADIUS = 149600000000.0
MOON_ORBIT_RADIUS = 360000000.0
EARTH_ORBITAL_SPEED = 29780.0
MOON_ORBITAL_SPEED = 1083.0

# Half the width of the view; the sun sits in the middle.
SYSTEM_EXTENT = (EARTH_ORBIT_RADIUS + MOON_ORBIT_RADIUS) * 2.0


class SunEarthMoonScenario:
    scenario_id = "sun_earth_moon"
    name = "Sun, Earth and Moon"

    def create_simulation(self) -> Simulation:
        centre = SYSTEM_EXTENT
        bodies = [
            Body(1.989e30, (centre, centre), (0.0, 0.0), body_id="Sun"),
            Body(5.972e24, (centre + EARTH_ORBIT_RADIUS, centre), (0.0, EARTH_ORBITAL_SPEED), body_id="Earth"),
            Body(
                7.348e22,
                (centre + EARTH_ORBIT_RADIUS + MOON_ORBIT_RADIUS, centre),
                (0.0, EARTH_ORBITAL_SPEED + MOON_ORBITAL_SPEED),
                body_id="Moon",
            ),
        ]
        return Simulation(bodies=bodies, settings=SimulationSettings.from_env(defaults={"dt": 3600.0}))

    def ui_defaults(self) -> ScenarioUIDefaults:
        return ScenarioUIDefaults(
            view_range=(0.0, SYSTEM_EXTENT * 2.0, 0.0, SYSTEM_EXTENT * 2.0),
            body_scale=SYSTEM_EXTENT * 2.0 / 250.0,
            colors={"Sun": (1.0, 1.0, 0.0), "Earth": (0.0, 1.0, 0.0), "Moon": (1.0, 1.0, 1.0)},
        )


scenario_registry.register(SunEarthMoonScenario())
