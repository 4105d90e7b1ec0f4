from __future__ import annotations

import logging
from pathlib import Path

import typer

from trajclass.cli.report import (
    render_classifications,
    render_json,
    render_neighbor_ids,
    render_neighbors,
)
from trajclass.core.config import RunConfig, load_config
from trajclass.core.constants import EXIT_INTERNAL_ERROR, EXIT_QUERY_ERROR, EXIT_SUCCESS
from trajclass.core.dataset import read_dataset
from trajclass.core.engine import EngineState, load
from trajclass.core.errors import TrajclassError
from trajclass.core.metrics import parse_metric

_QUIT_WORDS = {"q", "quit", "exit"}
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _version_callback(value: bool) -> None:
    if value:
        from trajclass import __version__

        typer.echo(f"trajclass {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Classify trajectories by pairwise length and speed differences")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT)


def _fail(message: str, exit_code: int) -> typer.Exit:
    typer.echo(f"ERROR: {message}", err=True)
    return typer.Exit(exit_code)


def _load_state(dataset: Path) -> EngineState:
    try:
        parsed = read_dataset(dataset)
        return load(parsed.trajectories, declared_count=parsed.declared_count)
    except TrajclassError as exc:
        raise _fail(exc.message, EXIT_QUERY_ERROR) from exc


def _resolve_config(config_path: Path | None) -> RunConfig:
    if config_path is None:
        return RunConfig()
    try:
        return load_config(config_path)
    except (OSError, ValueError) as exc:
        raise _fail(str(exc), EXIT_INTERNAL_ERROR) from exc


@app.command(context_settings={"ignore_unknown_options": True})
def query(
    dataset: Path = typer.Argument(..., help="Trajectory dataset file"),
    trajectory: int = typer.Argument(..., help="Trajectory index"),
    metric: str = typer.Argument(..., help="Metric: length | speed (or 1 | 2)"),
) -> None:
    """Print the retained neighbor ids of one trajectory for one metric, space-separated."""
    state = _load_state(dataset)
    try:
        metric_name = parse_metric(metric)
        neighbor_ids = state.query(trajectory, metric_name)
    except TrajclassError as exc:
        raise _fail(exc.message, EXIT_QUERY_ERROR) from exc
    typer.echo(render_neighbor_ids(neighbor_ids))
    raise typer.Exit(EXIT_SUCCESS)


@app.command()
def dump(
    dataset: Path = typer.Argument(..., help="Trajectory dataset file"),
    as_json: bool = typer.Option(False, "--json", help="Emit the dump as JSON"),
) -> None:
    """Show every trajectory's retention arrays for both metrics."""
    state = _load_state(dataset)
    typer.echo(render_json(state) if as_json else render_classifications(state))
    raise typer.Exit(EXIT_SUCCESS)


def _answer(state: EngineState, raw_trajectory: str, raw_metric: str) -> str | None:
    try:
        trajectory_index = int(raw_trajectory.strip())
        metric_name = parse_metric(raw_metric)
        neighbor_ids = state.query(trajectory_index, metric_name)
    except (ValueError, TrajclassError):
        return None
    return render_neighbors(trajectory_index, metric_name, neighbor_ids)


@app.command()
def interactive(
    dataset: Path | None = typer.Argument(None, help="Trajectory dataset file (or `dataset` in --config)"),
    config: Path | None = typer.Option(None, "--config", help="YAML run configuration"),
    show_classifications: bool | None = typer.Option(
        None,
        "--show-classifications/--hide-classifications",
        help="Print all retention arrays after each answer",
    ),
) -> None:
    """Load a dataset once, then answer trajectory/metric queries until `q` or end of input."""
    run_config = _resolve_config(config)
    if run_config.log_level != "WARNING":
        logging.basicConfig(level=run_config.log_level_value, format=_LOG_FORMAT)

    resolved_dataset = dataset or run_config.dataset
    if resolved_dataset is None:
        raise _fail("No dataset provided. Pass a dataset path or set `dataset` in --config.", EXIT_INTERNAL_ERROR)
    show = run_config.show_classifications if show_classifications is None else show_classifications

    state = _load_state(resolved_dataset)
    upper = max(len(state) - 1, 0)
    while True:
        typer.echo("Please select trajectory and metric.")
        try:
            raw_trajectory = typer.prompt(f"  Trajectories [ 0 - {upper} ]")
            if raw_trajectory.strip().lower() in _QUIT_WORDS:
                break
            raw_metric = typer.prompt("  Metrics ( Length: 1, Speed: 2 )")
            if raw_metric.strip().lower() in _QUIT_WORDS:
                break
        except typer.Abort:
            break

        answer = _answer(state, raw_trajectory, raw_metric)
        if answer is None:
            typer.echo("Trajectory or Metric have bad values")
            continue
        typer.echo(answer)
        if show:
            typer.echo(render_classifications(state))

    raise typer.Exit(EXIT_SUCCESS)


__all__ = ["app"]
