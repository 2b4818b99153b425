"""Mini README: End-to-end tests for the Typer command line.

Runs ``generate-grid`` on a proxy mesh, feeds its output to ``shorten`` and
checks that invalid configuration exits non-zero without writing output.
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

import survey_cli
from survey_cli import cli, generate_grid_app, shorten_app
from surveyplan.persistence import load_trajectory, save_trajectory
from surveyplan.route_planning import CoverageGridPlanner, GridParameters

runner = CliRunner()


def test_generate_grid_writes_trajectory(tmp_path, proxy_mesh) -> None:
    output = tmp_path / "grid.traj"
    result = runner.invoke(cli, ["generate-grid", str(proxy_mesh), str(output)])

    assert result.exit_code == 0, result.output
    assert "136 waypoints" in result.output
    trajectory = load_trajectory(output)
    assert len(trajectory) == 136
    assert trajectory[0].focal_length == pytest.approx(0.86, rel=1e-6)


def test_generate_grid_options_and_settings(tmp_path, proxy_mesh, monkeypatch) -> None:
    monkeypatch.setenv("SURVEYPLAN_FOCAL_LENGTH", "1.2")
    output = tmp_path / "grid.traj"
    result = runner.invoke(
        generate_grid_app,
        [str(proxy_mesh), str(output), "--side-overlap", "70", "--max-distance", "50"],
    )

    assert result.exit_code == 0, result.output
    trajectory = load_trajectory(output)
    assert trajectory[0].focal_length == pytest.approx(1.2, rel=1e-6)
    assert trajectory[0].position[2] == pytest.approx(45.0)


def test_invalid_overlap_exits_without_output(tmp_path, proxy_mesh) -> None:
    output = tmp_path / "grid.traj"
    result = runner.invoke(cli, ["generate-grid", str(proxy_mesh), str(output), "--forward-overlap", "100"])

    assert result.exit_code == 1
    assert "Forward overlap" in result.output
    assert not output.exists()


def test_missing_mesh_exits_non_zero(tmp_path) -> None:
    output = tmp_path / "grid.traj"
    result = runner.invoke(cli, ["generate-grid", str(tmp_path / "absent.ply"), str(output)])

    assert result.exit_code == 1
    assert "Could not load mesh" in result.output
    assert not output.exists()


def test_invalid_settings_exit_non_zero(tmp_path, proxy_mesh, monkeypatch) -> None:
    monkeypatch.setenv("SURVEYPLAN_SIDE_OVERLAP", "150")
    result = runner.invoke(cli, ["generate-grid", str(proxy_mesh), str(tmp_path / "grid.traj")])

    assert result.exit_code == 1
    assert "SURVEYPLAN_" in result.output


def test_unknown_option_is_rejected(tmp_path) -> None:
    result = runner.invoke(shorten_app, [str(tmp_path / "a"), str(tmp_path / "b"), "--speed", "3"])
    assert result.exit_code != 0


def test_shorten_reorders_trajectory(tmp_path, survey_bounds) -> None:
    source = save_trajectory(
        CoverageGridPlanner(GridParameters()).plan(survey_bounds), tmp_path / "grid.traj"
    )
    output = tmp_path / "short.traj"

    result = runner.invoke(cli, ["shorten", str(source), str(output)])

    assert result.exit_code == 0, result.output
    original = load_trajectory(source)
    shortened = load_trajectory(output)
    assert len(shortened) == len(original)
    assert shortened.length() <= original.length() + 1e-6


def test_shorten_rejects_malformed_input(tmp_path) -> None:
    source = tmp_path / "broken.traj"
    source.write_bytes(b"\x00" * 10)

    result = runner.invoke(shorten_app, [str(source), str(tmp_path / "out.traj")])

    assert result.exit_code == 1
    assert "not a multiple" in result.output
    assert not (tmp_path / "out.traj").exists()


def test_shorten_reports_unknown_strategy(tmp_path, survey_bounds, monkeypatch) -> None:
    monkeypatch.setenv("SURVEYPLAN_TOUR_STRATEGY", "annealing")
    source = save_trajectory(
        CoverageGridPlanner(GridParameters()).plan(survey_bounds), tmp_path / "grid.traj"
    )

    result = runner.invoke(cli, ["shorten", str(source), str(tmp_path / "out.traj")])

    assert result.exit_code == 1
    assert "local-search" in result.output


def test_non_finite_mesh_reports_diagnostic(tmp_path, ply_writer) -> None:
    mesh = ply_writer(tmp_path / "nan.ply", [(0.0, 0.0, 0.0), (float("inf"), 150.0, 2.0)])
    output = tmp_path / "grid.traj"

    result = runner.invoke(cli, ["generate-grid", str(mesh), str(output)])

    assert result.exit_code == 1
    assert "non-finite vertices" in result.output
    assert not output.exists()


def test_unknown_strategy_is_reported_before_reading_input(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SURVEYPLAN_TOUR_STRATEGY", "annealing")

    result = runner.invoke(shorten_app, [str(tmp_path / "absent.traj"), str(tmp_path / "out.traj")])

    assert result.exit_code == 1
    assert "Unknown tour strategy 'annealing'" in result.output
    assert "Could not read" not in result.output


def test_key_error_while_shortening_is_not_reported_as_strategy(tmp_path, monkeypatch) -> None:
    def broken_load(path):
        raise KeyError("vertex")

    monkeypatch.setattr(survey_cli, "load_trajectory", broken_load)

    result = runner.invoke(shorten_app, [str(tmp_path / "in.traj"), str(tmp_path / "out.traj")])

    assert isinstance(result.exception, KeyError)
    assert "available:" not in result.output


@pytest.mark.parametrize("command", [["shorten"], ["generate-grid"]])
def test_verbose_flag_is_not_accepted(tmp_path, command) -> None:
    result = runner.invoke(cli, command + [str(tmp_path / "a"), str(tmp_path / "b"), "--verbose"])
    assert result.exit_code == 2
