from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, List, Protocol, Sequence

import numpy as np

from ..config import SimulationSettings
from ..model import Body, BodyState, Vector2
from ..model.vector import PRECISION
from ..physics.gravity import gravitational_acceleration

_LOG = logging.getLogger(__name__)


class Integrator(Protocol):
    def step(self, sim: "Simulation") -> None:
        ...


def _others(snapshot: Sequence[BodyState], index: int) -> Iterable[BodyState]:
    return (state for other_index, state in enumerate(snapshot) if other_index != index)


def _acceleration_for(sim: "Simulation", snapshot: Sequence[BodyState], index: int) -> Vector2:
    return gravitational_acceleration(snapshot[index].position, _others(snapshot, index), sim.settings.constants)


@dataclass
class SymplecticEulerIntegrator:
    """Semi-implicit Euler over a frozen snapshot of every body.

    All accelerations are computed before any body moves, so the result of
    a tick does not depend on the order bodies are stored in.
    """

    def step(self, sim: "Simulation") -> None:
        snapshot = sim.snapshot()
        accelerations = [_acceleration_for(sim, snapshot, index) for index in range(len(snapshot))]
        sim.apply(accelerations)


@dataclass
class ThreadedSymplecticEulerIntegrator:
    """Same scheme as :class:`SymplecticEulerIntegrator`, with the per-body
    acceleration sums spread over a thread pool. Workers only read the
    snapshot and each writes its own slot.

    The pool is created on the first tick and reused until :meth:`close`.
    """

    max_workers: int | None = None
    _pool: ThreadPoolExecutor | None = field(default=None, init=False, repr=False, compare=False)

    def step(self, sim: "Simulation") -> None:
        snapshot = sim.snapshot()
        pool = self._executor()
        accelerations = list(
            pool.map(lambda index: _acceleration_for(sim, snapshot, index), range(len(snapshot)))
        )
        sim.apply(accelerations)

    def close(self) -> None:
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None

    def _executor(self) -> ThreadPoolExecutor:
        if self._pool is None:
            self._pool = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="orbital-step")
        return self._pool


INTEGRATOR_IDS: dict[str, type[Integrator]] = {
    "symplectic_euler": SymplecticEulerIntegrator,
    "symplectic_euler_threaded": ThreadedSymplecticEulerIntegrator,
}


def integrator_from_id(integrator_id: str) -> Integrator:
    integrator_cls = INTEGRATOR_IDS.get(integrator_id)
    if integrator_cls is None:
        raise ValueError(f"Unknown integrator id: {integrator_id}")
    return integrator_cls()


@dataclass
class Simulation:
    bodies: List[Body]
    settings: SimulationSettings = field(default_factory=SimulationSettings)
    integrator: Integrator | None = None
    time: float = 0.0
    tick: int = 0

    def __post_init__(self) -> None:
        self.bodies = list(self.bodies)
        if self.integrator is None:
            self.integrator = integrator_from_id(self.settings.integrator)
        _LOG.debug(
            "Simulation created with %d bodies, dt=%s, integrator=%s",
            len(self.bodies),
            self.settings.dt,
            type(self.integrator).__name__,
        )

    @property
    def dt(self) -> float:
        return self.settings.dt

    def step(self) -> None:
        self.integrator.step(self)
        self.time += self.settings.dt
        self.tick += 1

    def run(self, ticks: int) -> None:
        for _ in range(ticks):
            self.step()

    def close(self) -> None:
        close = getattr(self.integrator, "close", None)
        if close is not None:
            close()

    def snapshot(self) -> tuple[BodyState, ...]:
        return tuple(body.state() for body in self.bodies)

    def apply(self, accelerations: Sequence[Vector2]) -> None:
        if len(accelerations) != len(self.bodies):
            raise ValueError("Need exactly one acceleration per body")
        for body, acceleration in zip(self.bodies, accelerations):
            body.advance(acceleration, self.settings.dt)

    def positions(self) -> np.ndarray:
        if not self.bodies:
            return np.zeros((0, 2), dtype=PRECISION)
        return np.stack([body.position.as_array() for body in self.bodies])

    def body(self, body_id: str) -> Body:
        for body in self.bodies:
            if body.body_id == body_id:
                return body
        raise KeyError(body_id)
