"""JSON report renderer."""

from __future__ import annotations

import json
from typing import Any

from workflow_metrics.render.report_models import MetricsReport, ReportAgent


def render_json_report(report: MetricsReport) -> str:
    """Render a workflow metrics report as canonical JSON."""
    payload = _build_payload(report)
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def _build_payload(report: MetricsReport) -> dict[str, Any]:
    result = report.result
    return {
        "title": report.title,
        "mode": result.mode.value,
        "metrics": {
            "total_time_minutes": result.total_time_minutes,
            "total_cost_dollars": result.total_cost_dollars,
            "max_concurrent": result.max_concurrent,
            "critical_path": list(result.critical_path),
            "warnings": list(result.warnings),
        },
        "completion_strategy": report.completion_strategy,
        "hitl_overhead_minutes": report.hitl_overhead_minutes,
        "agents": [_agent_payload(agent, set(result.critical_path)) for agent in report.agents],
    }


def _agent_payload(agent: ReportAgent, critical: set[str]) -> dict[str, Any]:
    return {
        "name": agent.name,
        "type": agent.agent_type,
        "model": agent.model,
        "timeout_minutes": agent.timeout_minutes,
        "estimated_cost": agent.estimated_cost,
        "tools": list(agent.tools),
        "depends_on": list(agent.depends_on),
        "hitl_minutes": agent.hitl_minutes,
        "is_critical_path": agent.name in critical,
    }
