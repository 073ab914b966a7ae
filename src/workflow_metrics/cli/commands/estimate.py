"""Estimate command — metrics for one workflow file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from workflow_metrics.adapters.config_loader import load_pricing, load_workflow
from workflow_metrics.core import compute_metrics
from workflow_metrics.render import MetricsReport, render_json_report, render_markdown_report

logger = logging.getLogger("workflow_metrics")


def run(
    workflow_file: Path = typer.Argument(
        ..., help="Path to a workflow YAML file (agents + workflow)."
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Override the workflow mode: sequential, parallel, conditional, graph.",
    ),
    pricing: Optional[Path] = typer.Option(
        None, "--pricing", "-p", help="Pricing YAML overriding the packaged defaults."
    ),
    format: str = typer.Option(
        "markdown", "--format", help="Output format: markdown or json."
    ),
    title: Optional[str] = typer.Option(
        None, "--title", "-t", help="Report title (defaults to the workflow name)."
    ),
) -> None:
    """Estimate execution time, cost, and critical path for a workflow."""
    if format not in ("markdown", "json"):
        _error(f"Unknown format: {format!r}. Use markdown or json.", 2)

    try:
        document = load_workflow(workflow_file)
    except FileNotFoundError:
        _error(f"Workflow file not found: {workflow_file}", 2)
    except ValueError as exc:
        _error(f"Workflow validation error: {exc}", 2)

    try:
        prices = load_pricing(pricing)
    except FileNotFoundError:
        _error(f"Pricing file not found: {pricing}", 2)
    except ValueError as exc:
        _error(f"Pricing validation error: {exc}", 2)
    except RuntimeError as exc:
        _error(f"Runtime error: {exc}", 1)

    result = compute_metrics(document.agents, document.workflow, mode, pricing=prices)
    logger.info(
        "%s: %d agents, %dmin, $%.2f",
        result.mode.value,
        len(document.agents),
        result.total_time_minutes,
        result.total_cost_dollars,
    )

    strategy = document.workflow.completion_strategy
    report = MetricsReport.build(
        result,
        document.agents,
        pricing=prices,
        title=title or document.name or "Workflow Metrics Report",
        completion_strategy=strategy.value if strategy is not None else None,
    )

    if format == "json":
        typer.echo(render_json_report(report), nl=False)
    else:
        typer.echo(render_markdown_report(report))


def _error(message: str, exit_code: int) -> NoReturn:
    """Print error to stderr and exit."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=exit_code)
