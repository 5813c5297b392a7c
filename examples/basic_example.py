"""Basic example of using the universe simulator."""

from universe_sim import GenerationSettings, Simulator, Universe
from universe_sim.physics.diagnostics import Diagnostics

def main():
    """Run a small seeded universe and watch bodies merge."""
    universe = Universe()
    universe.simulation_settings.gravitational_constant = 100.0

    # Generate a reproducible population
    settings = GenerationSettings(
        seed=42,
        body_count=500,
        position_range=(0.0, 150.0),
        velocity_range=(0.0, 20.0),
        mass_range=(1.0, 10.0)
    )

    sim = Simulator(universe, dt=0.01)
    sim.generate(settings)

    diagnostics = Diagnostics(G=universe.simulation_settings.gravitational_constant)

    print("Running simulation...")
    print(f"Initial bodies: {universe.body_count}, mass: {diagnostics.total_mass(universe):.2f}")

    for step in range(500):
        sim.step()
        if step % 100 == 0:
            print(f"Step {step}: Time={sim.time:.2f}, Bodies={universe.body_count}, "
                  f"K={diagnostics.kinetic_energy(universe):.2f}")

    print(f"Final bodies: {universe.body_count}, mass: {diagnostics.total_mass(universe):.2f}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
