"""Tests for the command-line interface."""

import pytest
from universe_sim.cli.main import main, build_parser, build_config
from universe_sim.utils.config import load_config


def test_cli_runs_simulation(capsys):
    """A short run prints the statistics table."""
    main(['--seed', '7', '--bodies', '20', '--steps', '3', '--report-every', '1', '--dt', '0.001'])

    out = capsys.readouterr().out
    assert "Running simulation: 20 bodies, seed 7" in out
    assert "Simulation complete!" in out


def test_cli_overrides(tmp_path):
    """Flags override the config file."""
    path = tmp_path / "base.yaml"
    main(['--bodies', '5', '--G', '3.0', '--save-config', str(path)])

    args = build_parser().parse_args(['--config', str(path), '--collisions', 'off', '--tangential'])
    config = build_config(args)

    assert config.generation.body_count == 5
    assert config.generation.tangential_velocity is True
    assert config.simulation.gravitational_constant == 3.0
    assert config.simulation.enable_collisions is False


def test_cli_save_config(tmp_path, capsys):
    """--save-config writes the effective settings and exits."""
    path = tmp_path / "out.json"

    main(['--mass-range', '2', '4', '--save-config', str(path)])

    assert load_config(str(path)).generation.mass_range == (2.0, 4.0)
    assert "Configuration saved" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ['--mass-range', '0', '5'],
    ['--position-range', '10', '1'],
    ['--dt', '-1'],
    ['--bodies', '-3'],
])
def test_cli_rejects_bad_settings(argv):
    """Contract violations exit with status 1."""
    with pytest.raises(SystemExit) as excinfo:
        main(argv + ['--steps', '0'])
    assert excinfo.value.code == 1
