"""Per-agent monetary cost model and the display rounding convention."""

from __future__ import annotations

import math
from collections.abc import Sequence

from workflow_metrics.core.models import Agent, Pricing

# Unit prices (dollars) and heuristic factors. The packaged pricing.yaml
# mirrors these values; adapters.config_loader can override them per run.
TOKEN_UNIT_PRICE = 0.00002  # per max_tokens unit, rough GPT-4 rate
CREDIT_UNIT_PRICE = 0.001  # per search-tool credit
GRAPH_EFFICIENCY = 0.8  # custom graphs assumed 20% faster than sequential
DEFAULT_HITL_TIMEOUT_SECONDS = 300

DEFAULT_PRICING = Pricing(
    token_unit_price=TOKEN_UNIT_PRICE,
    credit_unit_price=CREDIT_UNIT_PRICE,
    graph_efficiency=GRAPH_EFFICIENCY,
    default_hitl_timeout_seconds=DEFAULT_HITL_TIMEOUT_SECONDS,
)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for non-negative values (2.5 -> 3).

    Python's ``round`` uses banker's rounding; displayed metrics round
    halves up instead.
    """
    scale = 10**ndigits
    return math.floor(value * scale + 0.5) / scale


def estimate_agent_cost(agent: Agent, pricing: Pricing = DEFAULT_PRICING) -> float:
    """Unrounded dollar cost of a single agent (LLM tokens plus tool credits)."""
    token_cost = agent.llm_config.max_tokens * pricing.token_unit_price
    tool_cost = agent.tavily_config.max_credits_per_agent * pricing.credit_unit_price
    return token_cost + tool_cost


def estimate_cost(agents: Sequence[Agent], pricing: Pricing = DEFAULT_PRICING) -> float:
    """Total dollar cost across all agents, rounded to cents."""
    total = sum(estimate_agent_cost(agent, pricing) for agent in agents)
    return round_half_up(total, 2)
