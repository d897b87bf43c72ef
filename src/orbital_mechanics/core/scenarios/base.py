from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ..sim import Simulation

Color = tuple[float, float, float]


@dataclass(frozen=True)
class ScenarioUIDefaults:
    view_range: tuple[float, float, float, float] | None = None
    body_scale: float = 10.0
    # Keyed by body id; bodies without an entry use the renderer default.
    colors: dict[str, Color] = field(default_factory=dict)


class Scenario(Protocol):
    scenario_id: str
    name: str

    def create_simulation(self) -> Simulation:
        ...

    def ui_defaults(self) -> ScenarioUIDefaults | None:
        ...
