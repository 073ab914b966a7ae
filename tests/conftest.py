"""Shared fixtures for workflow_metrics test suite."""

from __future__ import annotations

import pytest

from workflow_metrics.core.models import (
    Agent,
    HITLConfig,
    LLMConfig,
    TavilyConfig,
    WorkflowConfig,
    WorkflowMode,
)


def _agent(
    name: str,
    timeout_seconds: int = 60,
    *,
    depends_on: tuple[str, ...] = (),
    max_tokens: int = 2000,
    credits: int = 50,
    hitl_seconds: int | None = None,
) -> Agent:
    """Build an Agent with only the fields the metrics engine reads."""
    hitl = HITLConfig(enabled=True, timeout_seconds=hitl_seconds) if hitl_seconds is not None else None
    return Agent(
        name=name,
        llm_config=LLMConfig(model="gpt-4", max_tokens=max_tokens),
        tavily_config=TavilyConfig(max_credits_per_agent=credits),
        timeout_seconds=timeout_seconds,
        depends_on=depends_on,
        hitl_config=hitl,
    )


@pytest.fixture
def abc_agents() -> list[Agent]:
    """A, B, C with 60s / 120s / 180s timeouts."""
    return [_agent("A", 60), _agent("B", 120), _agent("C", 180)]


@pytest.fixture
def sequential_workflow() -> WorkflowConfig:
    return WorkflowConfig(mode=WorkflowMode.SEQUENTIAL, timeout_seconds=1800)
