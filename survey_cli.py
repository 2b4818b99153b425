"""Mini README: Command line entry points for Surveyplan.

This script exposes a Typer CLI with two commands:

    * generate-grid PROXY_MESH OUT_TRAJECTORY - plan a serpentine nadir survey
      over the bounding box of a proxy mesh.
    * shorten IN_TRAJECTORY OUT_TRAJECTORY - reorder a trajectory's waypoints
      to shorten the flight path.

Each command is also installed as its own console script. Option defaults
come from ``SurveyPlanSettings`` so they can be tuned through ``SURVEYPLAN_*``
environment variables, including ``SURVEYPLAN_LOG_LEVEL`` for logging
verbosity. Failures print a diagnostic and exit with status 1
before any output file is written.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError

from surveyplan.configuration import SurveyPlanSettings, get_settings
from surveyplan.errors import SurveyPlanError
from surveyplan.logging_utils import configure_root_logger, get_logger
from surveyplan.persistence import load_proxy_bounds, load_trajectory, save_trajectory
from surveyplan.route_planning import CoverageGridPlanner, GridParameters
from surveyplan.tour_optimization import REGISTRY, shorten_trajectory

LOGGER = get_logger("surveyplan.cli")

cli = typer.Typer(help="Plan and shorten camera trajectories for aerial surveys.")


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _prepare() -> SurveyPlanSettings:
    """Load settings and configure logging for a command invocation."""

    try:
        settings = get_settings()
    except ValidationError as error:
        _fail(f"invalid SURVEYPLAN_* settings:\n{error}")
    configure_root_logger(settings.log_level)
    LOGGER.debug("Effective settings: %s", settings)
    return settings


def _pick(value: Optional[float], default: float) -> float:
    return default if value is None else value


@cli.command("generate-grid")
def generate_grid(
    proxy_mesh: Path = typer.Argument(..., help="Proxy mesh (PLY) bounding the survey area."),
    out_trajectory: Path = typer.Argument(..., help="Destination trajectory file."),
    focal_length: Optional[float] = typer.Option(None, help="Camera focal length [0.86]."),
    max_distance: Optional[float] = typer.Option(None, help="Maximum distance to surface [80.0]."),
    forward_overlap: Optional[float] = typer.Option(None, help="Forward overlap in percent [80.0]."),
    side_overlap: Optional[float] = typer.Option(None, help="Side overlap in percent [60.0]."),
) -> None:
    """Generate a standard grid trajectory."""

    settings = _prepare()
    try:
        parameters = GridParameters(
            focal_length=_pick(focal_length, settings.focal_length),
            max_distance=_pick(max_distance, settings.max_distance),
            forward_overlap=_pick(forward_overlap, settings.forward_overlap),
            side_overlap=_pick(side_overlap, settings.side_overlap),
        )
        bounds = load_proxy_bounds(proxy_mesh)
        trajectory = CoverageGridPlanner(parameters).plan(bounds)
        save_trajectory(trajectory, out_trajectory)
    except SurveyPlanError as error:
        _fail(str(error))
    typer.echo(f"Wrote {len(trajectory)} waypoints to {out_trajectory}")


@cli.command("shorten")
def shorten(
    in_trajectory: Path = typer.Argument(..., help="Trajectory to reorder."),
    out_trajectory: Path = typer.Argument(..., help="Destination trajectory file."),
) -> None:
    """Search for a short path through the trajectory's view positions."""

    settings = _prepare()
    REGISTRY.discover_plugins()
    try:
        strategy = REGISTRY.create(settings.tour_strategy, max_passes=settings.max_passes)
    except KeyError as error:
        _fail(f"{error.args[0]}; available: {', '.join(REGISTRY.available_strategies())}")
    try:
        trajectory = load_trajectory(in_trajectory)
        shortened = shorten_trajectory(
            trajectory, neighbours=settings.neighbour_count, strategy=strategy
        )
        save_trajectory(shortened, out_trajectory)
    except SurveyPlanError as error:
        _fail(str(error))
    typer.echo(
        f"Path length {trajectory.length():.2f} -> {shortened.length():.2f} "
        f"over {len(shortened)} waypoints; wrote {out_trajectory}"
    )


generate_grid_app = typer.Typer(help="Generate a standard grid trajectory.")
generate_grid_app.command()(generate_grid)

shorten_app = typer.Typer(help="Shorten a trajectory by reordering its waypoints.")
shorten_app.command()(shorten)


if __name__ == "__main__":
    cli()
