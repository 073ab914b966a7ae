"""Shared report data models for renderers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from workflow_metrics.core.cost import DEFAULT_PRICING, estimate_agent_cost
from workflow_metrics.core.hitl import hitl_pause_seconds
from workflow_metrics.core.models import Agent, MetricsResult, Pricing


@dataclass(frozen=True)
class ReportAgent:
    """Flattened per-agent report row for renderers."""

    name: str
    agent_type: str
    model: str
    timeout_minutes: float
    estimated_cost: float
    tools: tuple[str, ...]
    depends_on: tuple[str, ...]
    hitl_minutes: float | None = None

    @classmethod
    def from_agent(cls, agent: Agent, pricing: Pricing = DEFAULT_PRICING) -> "ReportAgent":
        """Construct a report row from an Agent."""
        seconds = hitl_pause_seconds(agent, pricing)
        return cls(
            name=agent.name,
            agent_type=agent.type.value,
            model=agent.llm_config.model,
            timeout_minutes=agent.timeout_minutes,
            estimated_cost=estimate_agent_cost(agent, pricing),
            tools=agent.tavily_config.enabled_apis,
            depends_on=agent.depends_on,
            hitl_minutes=None if seconds is None else seconds / 60,
        )


@dataclass(frozen=True)
class MetricsReport:
    """Renderer input bundle for a workflow metrics report."""

    result: MetricsResult
    agents: tuple[ReportAgent, ...]
    title: str = "Workflow Metrics Report"
    completion_strategy: str | None = None

    @property
    def hitl_overhead_minutes(self) -> float:
        return self.result.hitl_overhead_minutes

    @classmethod
    def build(
        cls,
        result: MetricsResult,
        agents: Sequence[Agent],
        *,
        pricing: Pricing = DEFAULT_PRICING,
        title: str = "Workflow Metrics Report",
        completion_strategy: str | None = None,
    ) -> "MetricsReport":
        return cls(
            result=result,
            agents=tuple(ReportAgent.from_agent(agent, pricing) for agent in agents),
            title=title,
            completion_strategy=completion_strategy,
        )
