"""Tests for the simulator controller."""

import numpy as np
import pytest
from universe_sim.physics.body import Body
from universe_sim.physics.settings import GenerationSettings, SimulationSettings
from universe_sim.physics.simulator import Simulator
from universe_sim.physics.universe import Universe


def make_sim(dt=0.1):
    settings = SimulationSettings(gravitational_constant=1.0, enable_collisions=False)
    universe = Universe(
        simulation_settings=settings,
        bodies=[Body(position=[0.0, 0.0]), Body(position=[10.0, 0.0])],
    )
    return Simulator(universe, dt=dt)


def test_simulator_basic():
    """Fixed steps advance time and step count."""
    sim = make_sim(dt=0.1)

    sim.run(10)

    assert sim.step_count == 10
    assert sim.time == pytest.approx(1.0)
    bodies, t, count = sim.get_state()
    assert len(bodies) == 2
    assert count == 10


def test_pause_and_resume():
    """Paused simulators do not advance."""
    sim = make_sim()
    sim.pause()
    sim.step()
    sim.run(5)

    assert sim.step_count == 0

    sim.resume()
    sim.step()
    assert sim.step_count == 1


def test_step_realtime():
    """First real-time call starts the clock, later calls use elapsed time."""
    sim = make_sim()

    assert sim.step_realtime() == 0.0
    dt = sim.step_realtime()

    assert dt >= 0.0
    assert sim.step_count == 2
    assert sim.time == pytest.approx(dt)


def test_callback_and_profiling():
    """Step callback fires and timing is recorded."""
    sim = make_sim()
    seen = []
    sim.on_step_callback = lambda s: seen.append(s.step_count)
    sim.set_profiling(True)

    sim.run(3)

    assert seen == [1, 2, 3]
    assert sim.get_timing()["step_ms"] is not None


def test_generate_resets_clock():
    """Regeneration replaces bodies and restarts time."""
    sim = make_sim()
    sim.run(4)

    sim.generate(GenerationSettings(seed=3, body_count=25))

    assert len(sim.universe) == 25
    assert sim.time == 0.0
    assert sim.step_count == 0


def test_set_timestep():
    """Changing dt affects subsequent steps."""
    sim = make_sim(dt=0.1)
    sim.set_timestep(0.5)
    sim.step()

    assert sim.time == pytest.approx(0.5)
    assert np.all(np.isfinite(sim.universe.bodies[0].position))
