"""Point-mass body."""

from dataclasses import dataclass, field
import numpy as np


def _zero_vector() -> np.ndarray:
    return np.zeros(2, dtype=np.float64)


@dataclass(eq=False)
class Body:
    """A massive point in the plane.

    Position and velocity are float64 arrays of shape (2,). Bodies compare by
    identity. Mass must stay strictly positive; it sets both gravitational
    weight and the contact radius used for collisions.
    """
    position: np.ndarray = field(default_factory=_zero_vector)
    velocity: np.ndarray = field(default_factory=_zero_vector)
    mass: float = 1.0

    def __post_init__(self):
        self.position = np.array(self.position, dtype=np.float64).reshape(2)
        self.velocity = np.array(self.velocity, dtype=np.float64).reshape(2)
        self.mass = float(self.mass)

    def integrate(self, dt: float):
        """Explicit Euler position update: r_new = r + v*dt.

        Args:
            dt: Time step
        """
        self.position += self.velocity * dt

    def radius(self) -> float:
        """Return the cube root of the mass (collision and drawing radius)."""
        return float(np.cbrt(self.mass))

    def momentum(self) -> np.ndarray:
        return self.mass * self.velocity

    def kinetic_energy(self) -> float:
        return 0.5 * self.mass * float(np.dot(self.velocity, self.velocity))

    def copy(self) -> "Body":
        return Body(self.position.copy(), self.velocity.copy(), self.mass)
