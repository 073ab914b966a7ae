"""Metrics dispatcher: cost, mode calculator, concurrency check and HITL overhead."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from workflow_metrics.core.calculators import (
    calculate_conditional,
    calculate_graph,
    calculate_parallel,
    calculate_sequential,
)
from workflow_metrics.core.cost import DEFAULT_PRICING, estimate_cost, round_half_up
from workflow_metrics.core.hitl import apply_hitl_overhead
from workflow_metrics.core.models import (
    Agent,
    MetricsResult,
    ModeEstimate,
    Pricing,
    WorkflowConfig,
    WorkflowMode,
)
from workflow_metrics.core.warning_collector import WarningCollector, check_concurrency

logger = logging.getLogger("workflow_metrics")

ModeCalculator = Callable[[Sequence[Agent], WorkflowConfig, Pricing], ModeEstimate]

_CALCULATORS: dict[WorkflowMode, ModeCalculator] = {
    WorkflowMode.SEQUENTIAL: calculate_sequential,
    WorkflowMode.PARALLEL: calculate_parallel,
    WorkflowMode.CONDITIONAL: calculate_conditional,
    WorkflowMode.GRAPH: calculate_graph,
}

FALLBACK_MODE = WorkflowMode.SEQUENTIAL


def resolve_mode(mode: WorkflowMode | str | None) -> WorkflowMode:
    """Map a mode value (enum, name or legacy alias) onto a ``WorkflowMode``.

    Anything unrecognised resolves to ``FALLBACK_MODE`` rather than raising.
    """
    if isinstance(mode, WorkflowMode):
        return mode
    if mode is not None:
        try:
            return WorkflowMode(mode)
        except ValueError:
            pass
    logger.debug("Unrecognised workflow mode %r; falling back to %s", mode, FALLBACK_MODE.value)
    return FALLBACK_MODE


def compute_metrics(
    agents: Sequence[Agent],
    workflow: WorkflowConfig,
    mode: WorkflowMode | str | None = None,
    *,
    pricing: Pricing | None = None,
) -> MetricsResult:
    """Estimate duration, cost and critical path for one workflow snapshot.

    Args:
        agents: Agents in display order (possibly empty).
        workflow: Workflow settings.
        mode: Mode to evaluate; defaults to ``workflow.mode``.
        pricing: Unit prices and heuristic factors; defaults to
            ``DEFAULT_PRICING``.

    Returns:
        A fresh ``MetricsResult``. Warnings are ordered mode calculator
        first, then concurrency, then HITL. Never raises for degenerate input.
    """
    resolved = resolve_mode(workflow.mode if mode is None else mode)
    if not agents:
        return MetricsResult.empty(resolved)

    pricing = pricing or DEFAULT_PRICING
    warnings = WarningCollector()

    total_cost = estimate_cost(agents, pricing)
    max_concurrent = workflow.max_concurrent_agents or 1

    logger.debug("Computing %s metrics for %d agents", resolved.value, len(agents))
    estimate = _CALCULATORS[resolved](agents, workflow, pricing)
    warnings.extend(estimate.warnings)
    warnings.extend(check_concurrency(max_concurrent, len(agents)))

    adjusted = apply_hitl_overhead(estimate.total_minutes, agents, pricing)
    warnings.extend(adjusted.warnings)

    return MetricsResult(
        total_time_minutes=int(round_half_up(adjusted.total_minutes)),
        total_cost_dollars=total_cost,
        max_concurrent=max_concurrent,
        critical_path=estimate.critical_path,
        warnings=warnings.freeze(),
        mode=resolved,
        hitl_overhead_minutes=adjusted.overhead_minutes,
    )
