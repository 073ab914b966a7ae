"""Typer application entrypoint for the workflow-metrics CLI."""

import logging
from typing import Optional

import typer

from workflow_metrics.cli.commands.cycles import run as run_cycles
from workflow_metrics.cli.commands.estimate import run as run_estimate
from workflow_metrics.version import __version__

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help=(
        "Estimate wall-clock time, cost, and critical path of a multi-agent "
        "workflow described in YAML, and check its dependencies for cycles."
    ),
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"workflow-metrics {__version__}")
        raise typer.Exit()


@app.callback()
def _configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log mode fallbacks, cycle search, and file loading to stderr.",
    ),
    version: Optional[bool] = typer.Option(  # noqa: ARG001
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the workflow-metrics version and exit.",
    ),
) -> None:
    """Workflow metrics for multi-agent pipelines.

    Run ``estimate`` for a duration/cost report or ``cycles`` to validate
    ``depends_on`` links before running a conditional workflow.
    """
    if verbose:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s", force=True)
        logging.getLogger("workflow_metrics").setLevel(logging.DEBUG)


app.command("estimate", help="Render a metrics report for a workflow file.")(run_estimate)
app.command("cycles", help="Report the first dependency cycle in a workflow file.")(run_cycles)


def main() -> None:
    """Run the workflow-metrics CLI."""
    app()


if __name__ == "__main__":
    main()
