"""Human-in-the-loop wait time added on top of a mode estimate."""

from __future__ import annotations

from collections.abc import Sequence

from workflow_metrics.core.cost import DEFAULT_PRICING, round_half_up
from workflow_metrics.core.models import Agent, HitlAdjustment, Pricing


def hitl_pause_seconds(agent: Agent, pricing: Pricing = DEFAULT_PRICING) -> int | None:
    """Seconds one agent pauses for human input, or ``None`` when HITL is off.

    An enabled agent with a zero ``timeout_seconds`` is charged
    ``pricing.default_hitl_timeout_seconds``.
    """
    if agent.hitl_config is None or not agent.hitl_config.enabled:
        return None
    return agent.hitl_config.timeout_seconds or pricing.default_hitl_timeout_seconds


def apply_hitl_overhead(
    total_minutes: float,
    agents: Sequence[Agent],
    pricing: Pricing = DEFAULT_PRICING,
) -> HitlAdjustment:
    """Add each HITL-enabled agent's pause timeout to ``total_minutes``."""
    pauses = [
        seconds
        for seconds in (hitl_pause_seconds(agent, pricing) for agent in agents)
        if seconds is not None
    ]
    overhead_minutes = sum(pauses) / 60

    warnings: tuple[str, ...] = ()
    if pauses:
        warnings = (
            f"HITL overhead: +{round_half_up(overhead_minutes):.0f}min "
            f"for {len(pauses)} agents",
        )

    return HitlAdjustment(
        total_minutes=total_minutes + overhead_minutes,
        overhead_minutes=overhead_minutes,
        agent_count=len(pauses),
        warnings=warnings,
    )
