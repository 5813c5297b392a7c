"""Universe engine: owns the bodies and advances them through time."""

from typing import Iterator, List, Optional
from universe_sim.physics.body import Body
from universe_sim.physics.settings import GenerationSettings, SimulationSettings
from universe_sim.physics.generation import generate_bodies
from universe_sim.physics.collisions import resolve_collisions
from universe_sim.physics.gravity import GravitySolver
from universe_sim.utils.reproducibility import make_rng, resolve_seed


class Universe:
    """A group of bodies all interacting with each other.

    Settings are plain attributes and may be changed between steps without
    validation. `generate_bodies` and `step` must not be called concurrently.
    """

    def __init__(
        self,
        simulation_settings: Optional[SimulationSettings] = None,
        generation_settings: Optional[GenerationSettings] = None,
        gravity_method: str = "vectorized",
        bodies: Optional[List[Body]] = None
    ):
        """Initialize an empty universe.

        Args:
            simulation_settings: Settings applied every step (default values if None)
            generation_settings: Settings used by generate_bodies() when called
                without arguments (default values if None)
            gravity_method: "vectorized" or "pairwise" (see GravitySolver)
            bodies: Optional initial bodies; the universe takes ownership
        """
        self.simulation_settings = simulation_settings or SimulationSettings()
        self.generation_settings = generation_settings or GenerationSettings()
        self.gravity = GravitySolver(gravity_method)
        self.bodies: List[Body] = list(bodies) if bodies is not None else []
        self.last_seed: Optional[int] = None
        self.last_merge_count = 0

    def __len__(self) -> int:
        return len(self.bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies)

    @property
    def body_count(self) -> int:
        return len(self.bodies)

    def generate_bodies(self, settings: Optional[GenerationSettings] = None):
        """Replace all bodies with a freshly generated population.

        Args:
            settings: Generation settings (uses self.generation_settings if None).
                A seed of 0 seeds from the wall clock.
        """
        settings = settings or self.generation_settings
        self.last_seed = resolve_seed(settings.seed)
        rng = make_rng(self.last_seed)
        self.bodies = generate_bodies(settings, rng)

    generate = generate_bodies

    def step(self, dt: float):
        """Advance the universe by dt.

        Order: collision merging (if enabled), gravitational velocity updates,
        then position integration with the updated velocities.

        Args:
            dt: Time step in seconds, must be >= 0
        """
        if dt < 0:
            raise ValueError(f"Time step must be non-negative, got {dt}")

        if self.simulation_settings.enable_collisions:
            self.last_merge_count = resolve_collisions(self.bodies)
        else:
            self.last_merge_count = 0

        self.gravity.apply(self.bodies, self.simulation_settings.gravitational_constant, dt)

        for body in self.bodies:
            body.integrate(dt)

    def total_mass(self) -> float:
        return float(sum(body.mass for body in self.bodies))
