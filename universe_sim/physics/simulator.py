"""Main simulator controller."""

from typing import Callable, Optional
import time
from universe_sim.physics.universe import Universe
from universe_sim.physics.settings import GenerationSettings


class Simulator:
    """Frame-loop controller around a single Universe.

    Tracks simulated time and step count, and supports fixed-step and
    wall-clock driven stepping.
    """

    def __init__(self, universe: Optional[Universe] = None, dt: float = 0.01):
        """Initialize simulator.

        Args:
            universe: Universe to drive (a new empty one if None)
            dt: Fixed time step used by step()
        """
        self.universe = universe if universe is not None else Universe()
        self.dt = dt
        self.time = 0.0
        self.paused = False
        self.step_count = 0

        # Wall-clock reference for step_realtime()
        self._last_frame: Optional[float] = None

        # Profiling: last step timing (ms)
        self._last_step_ms: Optional[float] = None
        self._profile: bool = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None

    def set_profiling(self, enabled: bool = True):
        """Enable or disable step timing."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last step timing in ms."""
        return {"step_ms": self._last_step_ms}

    def generate(self, settings: Optional[GenerationSettings] = None):
        """Regenerate the universe and reset the clock.

        Args:
            settings: Generation settings (the universe's own if None)
        """
        self.universe.generate_bodies(settings)
        self.time = 0.0
        self.step_count = 0
        self._last_frame = None

    def advance(self, dt: float):
        """Advance the universe by an arbitrary dt (no-op while paused)."""
        if self.paused:
            return

        if self._profile:
            t0 = time.perf_counter()
        self.universe.step(dt)
        if self._profile:
            self._last_step_ms = (time.perf_counter() - t0) * 1000.0

        self.time += dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def step(self):
        """Perform one fixed-size simulation step."""
        self.advance(self.dt)

    def step_realtime(self) -> float:
        """Advance by the wall-clock time elapsed since the previous call.

        The first call only starts the clock and advances by zero.

        Returns:
            The dt that was applied
        """
        now = time.perf_counter()
        dt = 0.0 if self._last_frame is None else now - self._last_frame
        self._last_frame = now
        self.advance(dt)
        return dt

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            if self.paused:
                return
            self.step()

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False
        self._last_frame = None

    def set_timestep(self, dt: float):
        """Set time step.

        Args:
            dt: New time step
        """
        self.dt = dt

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (bodies, time, step_count)
        """
        return self.universe.bodies, self.time, self.step_count
