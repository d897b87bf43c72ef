import numpy as np
import pytest

from orbital_mechanics.core.config import SimulationSettings
from orbital_mechanics.core.model import Body, Vector2
from orbital_mechanics.core.sim import (
    Simulation,
    SymplecticEulerIntegrator,
    ThreadedSymplecticEulerIntegrator,
    integrator_from_id,
)


def _three_bodies() -> list[Body]:
    return [
        Body(1e14, (500.0, 500.0), (0.0, 0.0), body_id="A"),
        Body(1e12, (500.0, 600.0), (10.0, 0.0), body_id="B"),
        Body(3e12, (600.0, 700.0), (-5.0, 0.0), body_id="C"),
    ]


def test_tick_reads_old_state_and_writes_new() -> None:
    sim = Simulation(bodies=_three_bodies(), settings=SimulationSettings(dt=1.0))
    reference = [Body.from_state(state) for state in sim.snapshot()]
    frozen = [Body.from_state(state) for state in sim.snapshot()]
    for index, body in enumerate(reference):
        others = [other for other_index, other in enumerate(frozen) if other_index != index]
        body.step(others, 1.0)

    sim.step()

    for body, expected in zip(sim.bodies, reference):
        assert body.position == expected.position
        assert body.velocity == expected.velocity


def test_sequential_in_place_updates_differ_from_snapshot_tick() -> None:
    sim = Simulation(bodies=_three_bodies(), settings=SimulationSettings(dt=1.0))
    naive = _three_bodies()
    for body in naive:
        body.step([other for other in naive if other is not body], 1.0)

    sim.step()

    # Bodies stepped later saw already-moved neighbours.
    assert sim.bodies[0].position == naive[0].position
    assert sim.bodies[2].velocity != naive[2].velocity


def test_tick_is_independent_of_storage_order() -> None:
    forward = Simulation(bodies=_three_bodies(), settings=SimulationSettings(dt=1.0))
    backward = Simulation(bodies=list(reversed(_three_bodies())), settings=SimulationSettings(dt=1.0))

    forward.run(50)
    backward.run(50)

    for body_id in ("A", "B", "C"):
        np.testing.assert_allclose(
            forward.body(body_id).position.as_array().astype(float),
            backward.body(body_id).position.as_array().astype(float),
            rtol=1e-12,
        )


def test_runs_are_deterministic() -> None:
    first = Simulation(bodies=_three_bodies(), settings=SimulationSettings(dt=1.0))
    second = Simulation(bodies=_three_bodies(), settings=SimulationSettings(dt=1.0))

    first.run(200)
    second.run(200)

    assert np.array_equal(first.positions(), second.positions())
    assert first.snapshot() == second.snapshot()


def test_threaded_integrator_matches_serial() -> None:
    serial = Simulation(
        bodies=_three_bodies(),
        settings=SimulationSettings(dt=1.0),
        integrator=SymplecticEulerIntegrator(),
    )
    threaded = Simulation(
        bodies=_three_bodies(),
        settings=SimulationSettings(dt=1.0, integrator="symplectic_euler_threaded"),
    )
    assert isinstance(threaded.integrator, ThreadedSymplecticEulerIntegrator)

    serial.run(100)
    threaded.run(100)

    assert serial.snapshot() == threaded.snapshot()


def test_time_and_tick_advance() -> None:
    sim = Simulation(bodies=_three_bodies(), settings=SimulationSettings(dt=0.25))
    sim.run(8)
    assert sim.tick == 8
    assert sim.time == pytest.approx(2.0)


def test_empty_and_single_body_simulations() -> None:
    empty = Simulation(bodies=[])
    empty.step()
    assert empty.positions().shape == (0, 2)

    lone = Simulation(bodies=[Body(1.0, (0.0, 0.0), (2.0, 1.0))], settings=SimulationSettings(dt=0.5))
    lone.run(4)
    assert lone.bodies[0].position == Vector2(4.0, 2.0)


def test_positions_array_for_renderers() -> None:
    sim = Simulation(bodies=_three_bodies())
    positions = sim.positions()
    assert positions.shape == (3, 2)
    np.testing.assert_allclose(positions.astype(float), [[500.0, 500.0], [500.0, 600.0], [600.0, 700.0]])


def test_body_lookup_and_apply_validation() -> None:
    sim = Simulation(bodies=_three_bodies())
    assert sim.body("B").body_id == "B"
    with pytest.raises(KeyError):
        sim.body("missing")
    with pytest.raises(ValueError):
        sim.apply([Vector2.zero()])


def test_unknown_integrator_id() -> None:
    with pytest.raises(ValueError):
        integrator_from_id("runge_kutta")


def test_threaded_integrator_reuses_its_pool() -> None:
    integrator = ThreadedSymplecticEulerIntegrator(max_workers=2)
    sim = Simulation(bodies=_three_bodies(), settings=SimulationSettings(dt=1.0), integrator=integrator)

    sim.step()
    pool = integrator._pool
    assert pool is not None
    sim.run(5)
    assert integrator._pool is pool

    sim.close()
    assert integrator._pool is None
    sim.step()
    assert integrator._pool is not None
    sim.close()


def test_close_is_harmless_for_serial_integrator() -> None:
    sim = Simulation(bodies=_three_bodies(), integrator=SymplecticEulerIntegrator())
    sim.close()
    sim.step()
    assert sim.tick == 1
