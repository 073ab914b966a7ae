"""Cycles command — report circular ``depends_on`` chains."""

from __future__ import annotations

from pathlib import Path

import typer

from workflow_metrics.adapters.config_loader import load_workflow
from workflow_metrics.core.cycles import find_cycle, format_cycle


def run(
    workflow_file: Path = typer.Argument(
        ..., help="Path to a workflow YAML file (agents + workflow)."
    ),
) -> None:
    """Check agent dependencies for cycles. Exits 1 when one is found."""
    try:
        document = load_workflow(workflow_file)
    except FileNotFoundError:
        typer.echo(f"Error: Workflow file not found: {workflow_file}", err=True)
        raise typer.Exit(code=2)
    except ValueError as exc:
        typer.echo(f"Error: Workflow validation error: {exc}", err=True)
        raise typer.Exit(code=2)

    cycle = find_cycle(document.agents)
    if cycle is None:
        typer.echo("No dependency cycles found.")
        return

    typer.echo(f"Dependency cycle detected: {format_cycle(cycle)}")
    raise typer.Exit(code=1)
