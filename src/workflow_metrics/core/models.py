"""Pydantic input models and frozen result dataclasses for workflow metrics."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
# Matched verbatim against ``depends_on`` entries, so never stripped.
AgentName = Annotated[str, StringConstraints(min_length=1)]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class AgentType(enum.Enum):
    """Role an agent plays inside a workflow."""

    RESEARCHER = "researcher"
    ANALYST = "analyst"
    WRITER = "writer"
    REVIEWER = "reviewer"
    COORDINATOR = "coordinator"
    CUSTOM = "custom"


class WorkflowMode(enum.Enum):
    """Execution mode of a workflow.

    SEQUENTIAL  — agents run one after another in list order
    PARALLEL    — groups run in order, agents inside a group run together
    CONDITIONAL — agents are gated by their ``depends_on`` predecessors
    GRAPH       — custom graph; ``"langgraph"`` is accepted as a legacy alias
    """

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"
    CONDITIONAL = "conditional"
    GRAPH = "graph"

    @classmethod
    def _missing_(cls, value: object) -> "WorkflowMode | None":
        """Accept legacy mode names."""
        _legacy: dict[str, "WorkflowMode"] = {
            "langgraph": cls.GRAPH,
            "custom": cls.GRAPH,
        }
        if isinstance(value, str):
            return _legacy.get(value.strip().lower())
        return None


class CompletionStrategy(enum.Enum):
    """When a parallel group counts as finished."""

    ALL = "all"
    MAJORITY = "majority"
    ANY = "any"
    THRESHOLD = "threshold"
    FIRST_SUCCESS = "first_success"


# ---------------------------------------------------------------------------
# Pydantic input models (immutable snapshots of the form state)
# ---------------------------------------------------------------------------

_SNAPSHOT = ConfigDict(frozen=True, extra="ignore")


class LLMConfig(BaseModel):
    """Model settings for one agent."""

    model_config = _SNAPSHOT

    model: NonEmptyStr = "gpt-4"
    temperature: float = 0.7
    max_tokens: Annotated[int, Field(ge=0)] = 2000


class TavilyConfig(BaseModel):
    """Search-tool switches and the per-agent credit cap."""

    model_config = _SNAPSHOT

    search_api: bool = True
    extract_api: bool = False
    crawl_api: bool = False
    map_api: bool = False
    max_credits_per_agent: Annotated[int, Field(ge=0)] = 50

    @property
    def enabled_apis(self) -> tuple[str, ...]:
        """Names of the tool APIs switched on for this agent."""
        flags = (
            ("search", self.search_api),
            ("extract", self.extract_api),
            ("crawl", self.crawl_api),
            ("map", self.map_api),
        )
        return tuple(name for name, enabled in flags if enabled)


class HITLConfig(BaseModel):
    """Human-in-the-loop pause settings."""

    model_config = _SNAPSHOT

    enabled: bool = False
    timeout_seconds: Annotated[int, Field(ge=0)] = 300


class Agent(BaseModel):
    """One agent in a workflow. ``name`` is the dependency-graph key."""

    model_config = _SNAPSHOT

    name: AgentName
    type: AgentType = AgentType.CUSTOM
    llm_config: LLMConfig = Field(default_factory=LLMConfig)
    tavily_config: TavilyConfig = Field(default_factory=TavilyConfig)
    timeout_seconds: Annotated[int, Field(ge=0)] = 300
    priority: int = 1
    depends_on: tuple[str, ...] = ()
    hitl_config: Optional[HITLConfig] = None

    @property
    def timeout_minutes(self) -> float:
        return self.timeout_seconds / 60

    @property
    def hitl_enabled(self) -> bool:
        return self.hitl_config is not None and self.hitl_config.enabled


class GraphEdge(BaseModel):
    """Edge of a custom workflow graph."""

    model_config = _SNAPSHOT

    from_node: NonEmptyStr
    to_node: NonEmptyStr
    condition_type: str = "always"


class GraphStructure(BaseModel):
    """Custom graph definition used by the graph mode."""

    model_config = _SNAPSHOT

    edges: tuple[GraphEdge, ...] = ()
    entry_point: Optional[str] = None
    exit_points: tuple[str, ...] = ()


class WorkflowConfig(BaseModel):
    """Workflow-level execution settings.

    ``mode`` keeps unrecognised strings as-is so the dispatcher can apply its
    sequential fallback instead of rejecting the snapshot.
    """

    model_config = _SNAPSHOT

    mode: Union[WorkflowMode, str] = WorkflowMode.SEQUENTIAL
    parallel_groups: Optional[tuple[tuple[str, ...], ...]] = None
    max_concurrent_agents: Optional[int] = None
    timeout_seconds: Annotated[int, Field(ge=0)] = 1800
    graph_structure: Optional[GraphStructure] = None
    completion_strategy: Optional[CompletionStrategy] = None

    @field_validator("mode", mode="before")
    @classmethod
    def _coerce_mode(cls, value: object) -> object:
        if isinstance(value, WorkflowMode):
            return value
        try:
            return WorkflowMode(value)
        except ValueError:
            return value

    @field_validator("parallel_groups", mode="before")
    @classmethod
    def _stringify_group_indices(cls, value: object) -> object:
        # YAML authors write indices as ints; groups are keyed by string index.
        if isinstance(value, (list, tuple)):
            return [
                [str(index) for index in group] if isinstance(group, (list, tuple)) else group
                for group in value
            ]
        return value


class Pricing(BaseModel):
    """Unit prices and heuristic factors used by the estimators."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    token_unit_price: Annotated[float, Field(ge=0)]
    credit_unit_price: Annotated[float, Field(ge=0)]
    graph_efficiency: Annotated[float, Field(gt=0, le=1)]
    default_hitl_timeout_seconds: Annotated[int, Field(ge=0)]


class WorkflowDocument(BaseModel):
    """Top-level shape of a workflow YAML file."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    agents: list[Agent] = Field(default_factory=list)
    workflow: WorkflowConfig = Field(default_factory=WorkflowConfig)


# ---------------------------------------------------------------------------
# Result dataclasses (frozen, output-only)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModeEstimate:
    """Raw output of one mode calculator (unrounded minutes)."""

    total_minutes: float
    critical_path: tuple[str, ...]
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class HitlAdjustment:
    """Duration after adding human-in-the-loop wait time."""

    total_minutes: float
    overhead_minutes: float
    agent_count: int
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class MetricsResult:
    """Final metrics for one workflow snapshot."""

    total_time_minutes: int
    total_cost_dollars: float
    max_concurrent: int
    critical_path: tuple[str, ...]
    warnings: tuple[str, ...]
    mode: WorkflowMode = WorkflowMode.SEQUENTIAL
    hitl_overhead_minutes: float = 0.0

    @classmethod
    def empty(cls, mode: WorkflowMode = WorkflowMode.SEQUENTIAL) -> "MetricsResult":
        """Zero result returned for a workflow with no agents."""
        return cls(
            total_time_minutes=0,
            total_cost_dollars=0.0,
            max_concurrent=0,
            critical_path=(),
            warnings=(),
            mode=mode,
        )
