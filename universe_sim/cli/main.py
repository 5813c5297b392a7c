"""CLI main entry point."""

import argparse
import sys
from universe_sim.physics.universe import Universe
from universe_sim.physics.simulator import Simulator
from universe_sim.physics.diagnostics import Diagnostics
from universe_sim.physics.gravity import GravitySolver
from universe_sim.utils.config import Config, load_config, save_config


def build_config(args) -> Config:
    """Merge a config file (if any) with command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    generation = config.generation
    simulation = config.simulation

    if args.seed is not None:
        generation.seed = args.seed
    if args.bodies is not None:
        generation.body_count = args.bodies
    if args.position_range is not None:
        generation.position_range = tuple(args.position_range)
    if args.velocity_range is not None:
        generation.velocity_range = tuple(args.velocity_range)
    if args.mass_range is not None:
        generation.mass_range = tuple(args.mass_range)
    if args.tangential:
        generation.tangential_velocity = True

    if args.G is not None:
        simulation.gravitational_constant = args.G
    if args.collisions is not None:
        simulation.enable_collisions = (args.collisions == 'on')

    if args.dt is not None:
        config.dt = args.dt
    if args.steps is not None:
        config.steps = args.steps
    if args.solver is not None:
        config.solver = args.solver
    if args.render:
        config.render = True
    if args.render_every is not None:
        config.render_every = args.render_every
    return config


def validate_config(config: Config):
    """Check caller contracts the engine itself does not enforce.

    Raises:
        ValueError: On the first violated contract
    """
    generation = config.generation
    if generation.body_count < 0:
        raise ValueError(f"Body count must be non-negative, got {generation.body_count}")
    for name in ('position_range', 'velocity_range', 'mass_range'):
        start, end = getattr(generation, name)
        if start > end:
            raise ValueError(f"{name} start {start} is greater than end {end}")
    if generation.mass_range[0] <= 0:
        raise ValueError(f"Mass range must be strictly positive, got {generation.mass_range}")
    if config.dt < 0:
        raise ValueError(f"Time step must be non-negative, got {config.dt}")
    if config.render_every < 1:
        raise ValueError(f"render_every must be at least 1, got {config.render_every}")


def print_row(step, sim_time, stats):
    print(f"{step:<8} {sim_time:<10.3f} {stats['bodies']:<8} {stats['mass']:<14.4f} "
          f"{stats['K']:<14.4e} {stats['U']:<14.4e}")


def run_simulation(config: Config, report_every: int = 100):
    """Generate a universe and run it for config.steps steps."""
    universe = Universe(
        simulation_settings=config.simulation,
        generation_settings=config.generation,
        gravity_method=config.solver,
    )
    sim = Simulator(universe, dt=config.dt)
    sim.generate()

    renderer = None
    if config.render:
        from universe_sim.render.renderer_2d import Renderer2D
        renderer = Renderer2D()

    diagnostics = Diagnostics(G=config.simulation.gravitational_constant)

    print(f"Running simulation: {universe.body_count} bodies, seed {universe.last_seed}")
    print(f"G: {config.simulation.gravitational_constant}, collisions: "
          f"{'on' if config.simulation.enable_collisions else 'off'}, dt: {config.dt}, solver: {config.solver}")
    print(f"{'Step':<8} {'Time':<10} {'Bodies':<8} {'Mass':<14} {'K':<14} {'U':<14}")
    print("-" * 72)
    print_row(0, 0.0, diagnostics.summary(universe))

    for step in range(1, config.steps + 1):
        sim.step()

        if renderer and step % config.render_every == 0:
            renderer.render(universe.bodies)

        if report_every > 0 and step % report_every == 0:
            print_row(step, sim.time, diagnostics.summary(universe))

    if renderer:
        renderer.close()

    print(f"Simulation complete! {universe.body_count} bodies remain.")
    return sim


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Universe Simulator - planar N-body simulation with merging")

    parser.add_argument('--config', type=str, default=None,
                       help='Load settings from a .json or .yaml file (flags override it)')
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the effective settings to a .json or .yaml file and exit')

    # Generation
    parser.add_argument('--seed', type=int, default=None,
                       help='Generation seed (0 seeds from the current time)')
    parser.add_argument('--bodies', type=int, default=None,
                       help='Number of bodies to generate (default: 2500)')
    parser.add_argument('--position-range', type=float, nargs=2, metavar=('START', 'END'), default=None,
                       help='Distance from the origin (default: 0 250)')
    parser.add_argument('--velocity-range', type=float, nargs=2, metavar=('START', 'END'), default=None,
                       help='Initial speed (default: 0 125)')
    parser.add_argument('--mass-range', type=float, nargs=2, metavar=('START', 'END'), default=None,
                       help='Body mass, start must be > 0 (default: 1 10)')
    parser.add_argument('--tangential', action='store_true',
                       help='Start bodies moving perpendicular to their radius vector')

    # Simulation
    parser.add_argument('--G', type=float, default=None,
                       help='Gravitational constant, negative repels (default: 100)')
    parser.add_argument('--collisions', type=str, choices=['on', 'off'], default=None,
                       help='Merge touching bodies (default: on)')
    parser.add_argument('--dt', type=float, default=None,
                       help='Time step (default: 0.01)')
    parser.add_argument('--steps', type=int, default=None,
                       help='Number of simulation steps (default: 1000)')
    parser.add_argument('--solver', type=str, choices=list(GravitySolver.METHODS), default=None,
                       help='Gravity solver (default: vectorized)')
    parser.add_argument('--report-every', type=int, default=100,
                       help='Print statistics every N steps (0 disables)')

    # Rendering
    parser.add_argument('--render', action='store_true',
                       help='Enable real-time rendering')
    parser.add_argument('--render-every', type=int, default=None,
                       help='Render every N steps')
    return parser


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        validate_config(config)
    except (OSError, TypeError, ValueError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    if args.save_config:
        try:
            save_config(config, args.save_config)
        except (OSError, ValueError) as e:
            print(f"Could not save configuration: {e}")
            sys.exit(1)
        print(f"Configuration saved to {args.save_config}")
        return

    run_simulation(config, report_every=args.report_every)


if __name__ == '__main__':
    main()
