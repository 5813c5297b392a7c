"""Example with real-time rendering."""

from universe_sim import GenerationSettings, Simulator, Universe
from universe_sim.render import Renderer2D

def main():
    """Run an orbiting disk with rendering, stepping by wall-clock time."""
    universe = Universe()

    # Tangential velocities give a roughly rotating disk
    settings = GenerationSettings(
        seed=0,
        body_count=800,
        position_range=(20.0, 250.0),
        velocity_range=(20.0, 60.0),
        mass_range=(1.0, 10.0),
        tangential_velocity=True
    )

    sim = Simulator(universe)
    sim.generate(settings)
    print(f"Generated {universe.body_count} bodies with seed {universe.last_seed}")

    renderer = Renderer2D(view_radius=300.0)

    print("Running simulation with rendering...")
    print("Close the matplotlib window to stop.")

    renderer.render(universe.bodies)
    try:
        while renderer.is_open():
            sim.step_realtime()
            renderer.render(universe.bodies)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        renderer.close()
        print(f"Simulation complete! {universe.body_count} bodies remain.")

if __name__ == "__main__":
    main()
