"""Core metrics models and algorithms."""

from workflow_metrics.core.calculators import (
    build_dependency_graph,
    calculate_conditional,
    calculate_graph,
    calculate_parallel,
    calculate_sequential,
)
from workflow_metrics.core.cost import (
    DEFAULT_PRICING,
    estimate_agent_cost,
    estimate_cost,
    round_half_up,
)
from workflow_metrics.core.cycles import find_cycle, has_cycle
from workflow_metrics.core.engine import compute_metrics, resolve_mode
from workflow_metrics.core.hitl import apply_hitl_overhead, hitl_pause_seconds
from workflow_metrics.core.models import (
    Agent,
    AgentType,
    CompletionStrategy,
    GraphEdge,
    GraphStructure,
    HITLConfig,
    HitlAdjustment,
    LLMConfig,
    MetricsResult,
    ModeEstimate,
    Pricing,
    TavilyConfig,
    WorkflowConfig,
    WorkflowDocument,
    WorkflowMode,
)
from workflow_metrics.core.warning_collector import WarningCollector, check_concurrency

__all__ = [
    "Agent",
    "AgentType",
    "CompletionStrategy",
    "DEFAULT_PRICING",
    "GraphEdge",
    "GraphStructure",
    "HITLConfig",
    "HitlAdjustment",
    "LLMConfig",
    "MetricsResult",
    "ModeEstimate",
    "Pricing",
    "TavilyConfig",
    "WarningCollector",
    "WorkflowConfig",
    "WorkflowDocument",
    "WorkflowMode",
    "apply_hitl_overhead",
    "build_dependency_graph",
    "calculate_conditional",
    "calculate_graph",
    "calculate_parallel",
    "calculate_sequential",
    "check_concurrency",
    "compute_metrics",
    "estimate_agent_cost",
    "estimate_cost",
    "find_cycle",
    "has_cycle",
    "hitl_pause_seconds",
    "resolve_mode",
    "round_half_up",
]
