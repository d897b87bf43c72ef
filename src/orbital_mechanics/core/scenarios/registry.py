from __future__ import annotations

import logging
from typing import Dict, List

from .base import Scenario

_LOG = logging.getLogger(__name__)


class ScenarioRegistry:
    def __init__(self) -> None:
        self._scenarios: Dict[str, Scenario] = {}

    def register(self, scenario: Scenario) -> None:
        if scenario.scenario_id in self._scenarios:
            raise ValueError(f"Duplicate scenario id: {scenario.scenario_id}")
        self._scenarios[scenario.scenario_id] = scenario
        _LOG.debug("Registered scenario %s", scenario.scenario_id)

    def get(self, scenario_id: str) -> Scenario:
        return self._scenarios[scenario_id]

    def __contains__(self, scenario_id: object) -> bool:
        return scenario_id in self._scenarios

    def all(self) -> List[Scenario]:
        return list(self._scenarios.values())


scenario_registry = ScenarioRegistry()
