"""Tests for input models, enum aliases, and the warning collector."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from workflow_metrics.core.models import (
    Agent,
    AgentType,
    CompletionStrategy,
    HITLConfig,
    MetricsResult,
    TavilyConfig,
    WorkflowConfig,
    WorkflowDocument,
    WorkflowMode,
)
from workflow_metrics.core.warning_collector import WarningCollector, check_concurrency


# ---------------------------------------------------------------------------
# WorkflowMode
# ---------------------------------------------------------------------------


class TestWorkflowMode:
    @pytest.mark.parametrize("value", ["langgraph", "LANGGRAPH", " custom "])
    def test_legacy_aliases_map_to_graph(self, value: str) -> None:
        assert WorkflowMode(value) is WorkflowMode.GRAPH

    def test_unknown_value_raises(self) -> None:
        with pytest.raises(ValueError):
            WorkflowMode("round_robin")


# ---------------------------------------------------------------------------
# Agent
# ---------------------------------------------------------------------------


class TestAgent:
    def test_defaults(self) -> None:
        agent = Agent(name="Researcher")

        assert agent.type is AgentType.CUSTOM
        assert agent.depends_on == ()
        assert agent.hitl_config is None
        assert agent.hitl_enabled is False

    def test_is_immutable(self) -> None:
        agent = Agent(name="A", timeout_seconds=60)
        with pytest.raises(ValidationError):
            agent.timeout_seconds = 120  # type: ignore[misc]

    def test_unknown_form_fields_are_ignored(self) -> None:
        agent = Agent.model_validate(
            {"name": "A", "system_prompt": "You are helpful.", "description": "x"}
        )
        assert agent.name == "A"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="name"):
            Agent(name="")

    def test_name_is_kept_verbatim(self) -> None:
        assert Agent(name=" Writer ").name == " Writer "

    def test_negative_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError, match="timeout_seconds"):
            Agent(name="A", timeout_seconds=-1)

    def test_timeout_minutes(self) -> None:
        assert Agent(name="A", timeout_seconds=90).timeout_minutes == pytest.approx(1.5)

    def test_hitl_enabled(self) -> None:
        agent = Agent(name="A", hitl_config=HITLConfig(enabled=True))
        assert agent.hitl_enabled is True
        assert agent.hitl_config is not None
        assert agent.hitl_config.timeout_seconds == 300


class TestTavilyConfig:
    def test_enabled_apis(self) -> None:
        config = TavilyConfig(search_api=True, extract_api=False, crawl_api=True, map_api=False)
        assert config.enabled_apis == ("search", "crawl")

    def test_no_apis(self) -> None:
        assert TavilyConfig(search_api=False).enabled_apis == ()


# ---------------------------------------------------------------------------
# WorkflowConfig
# ---------------------------------------------------------------------------


class TestWorkflowConfig:
    def test_mode_string_is_coerced(self) -> None:
        assert WorkflowConfig(mode="parallel").mode is WorkflowMode.PARALLEL

    def test_legacy_mode_string_is_coerced(self) -> None:
        assert WorkflowConfig(mode="langgraph").mode is WorkflowMode.GRAPH

    def test_unknown_mode_string_is_kept(self) -> None:
        assert WorkflowConfig(mode="round_robin").mode == "round_robin"

    def test_parallel_groups_become_string_tuples(self) -> None:
        config = WorkflowConfig(parallel_groups=[[0, 1], [], ["2"]])
        assert config.parallel_groups == (("0", "1"), (), ("2",))

    def test_completion_strategy(self) -> None:
        config = WorkflowConfig(completion_strategy="first_success")
        assert config.completion_strategy is CompletionStrategy.FIRST_SUCCESS

    def test_document_defaults(self) -> None:
        document = WorkflowDocument()
        assert document.agents == []
        assert document.workflow.mode is WorkflowMode.SEQUENTIAL


# ---------------------------------------------------------------------------
# Results and warnings
# ---------------------------------------------------------------------------


class TestMetricsResult:
    def test_empty(self) -> None:
        result = MetricsResult.empty(WorkflowMode.PARALLEL)

        assert result.total_time_minutes == 0
        assert result.max_concurrent == 0
        assert result.critical_path == ()
        assert result.mode is WorkflowMode.PARALLEL


class TestWarningCollector:
    def test_preserves_insertion_order(self) -> None:
        collector = WarningCollector()
        collector.add("first")
        collector.extend(["second", "third"])
        collector.extend(())

        assert collector.freeze() == ("first", "second", "third")
        assert len(collector) == 3

    def test_freeze_is_a_snapshot(self) -> None:
        collector = WarningCollector()
        collector.add("one")
        frozen = collector.freeze()
        collector.add("two")

        assert frozen == ("one",)


class TestCheckConcurrency:
    def test_over_subscribed(self) -> None:
        assert check_concurrency(4, 2) == ("Max concurrent agents (4) exceeds total agents (2)",)

    @pytest.mark.parametrize(("cap", "count"), [(2, 2), (1, 5)])
    def test_within_bounds(self, cap: int, count: int) -> None:
        assert check_concurrency(cap, count) == ()
