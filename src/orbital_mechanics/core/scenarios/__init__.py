from .base import Scenario, ScenarioUIDefaults
from .registry import ScenarioRegistry, scenario_registry


def load_builtin_scenarios() -> None:
    # Import side effects to register built-in scenarios.
    from . import three_body_demo  # noqa: F401
    from . import sun_earth_moon  # noqa: F401
    from . import circular_orbit  # noqa: F401


__all__ = [
    "Scenario",
    "ScenarioUIDefaults",
    "ScenarioRegistry",
    "scenario_registry",
    "load_builtin_scenarios",
]
