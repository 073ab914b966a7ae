"""Markdown report renderer."""

from __future__ import annotations

from workflow_metrics.render.report_models import MetricsReport


def render_markdown_report(report: MetricsReport) -> str:
    """Render a workflow metrics report as GitHub-compatible Markdown."""
    lines: list[str] = [
        f"# {report.title}",
        "",
    ]
    lines.extend(_render_summary(report))
    lines.extend([""])
    lines.extend(_render_agent_table(report))
    lines.extend([""])
    lines.extend(_render_critical_path(report))
    lines.extend([""])
    lines.extend(_render_warnings(report))
    lines.append("")
    return "\n".join(lines)


def _render_summary(report: MetricsReport) -> list[str]:
    result = report.result
    lines = [
        "## Summary",
        "",
        "| Metric | Value |",
        "| --- | --- |",
        f"| Mode | {result.mode.value} |",
        f"| Total time | {result.total_time_minutes}m |",
        f"| Total cost | ${result.total_cost_dollars:.2f} |",
        f"| Max concurrent | {result.max_concurrent} |",
        f"| HITL overhead | {_format_minutes(report.hitl_overhead_minutes)} |",
    ]
    if report.completion_strategy:
        lines.append(f"| Completion strategy | {_escape_cell(report.completion_strategy)} |")
    return lines


def _render_agent_table(report: MetricsReport) -> list[str]:
    critical = set(report.result.critical_path)
    lines = [
        "## Agents",
        "",
        "| Agent | Type | Model | Timeout | Tools | Depends On | HITL | Estimated Cost |",
        "| --- | --- | --- | --- | --- | --- | --- | --- |",
    ]
    if not report.agents:
        lines.append("| N/A | | | | | | | |")
        return lines
    for agent in report.agents:
        name = _escape_cell(agent.name)
        if agent.name in critical:
            name = f"**{name}**"
        tools = ", ".join(agent.tools) or "none"
        depends_on = ", ".join(_escape_cell(dep) for dep in agent.depends_on) or "-"
        hitl = _format_minutes(agent.hitl_minutes) if agent.hitl_minutes is not None else "off"
        lines.append(
            f"| {name} | {agent.agent_type} | {_escape_cell(agent.model)} | "
            f"{_format_minutes(agent.timeout_minutes)} | {tools} | {depends_on} | "
            f"{hitl} | ${agent.estimated_cost:.2f} |"
        )
    return lines


def _render_critical_path(report: MetricsReport) -> list[str]:
    lines = ["## Critical Path", ""]
    if not report.result.critical_path:
        lines.append("No critical path.")
        return lines
    lines.append(" -> ".join(f"**{_escape_cell(name)}**" for name in report.result.critical_path))
    return lines


def _render_warnings(report: MetricsReport) -> list[str]:
    lines = ["## Warnings", ""]
    if not report.result.warnings:
        lines.append("No warnings.")
        return lines
    for warning in report.result.warnings:
        lines.append(f"- {_escape_cell(warning)}")
    return lines


def _format_minutes(value: float) -> str:
    rounded = round(value, 1)
    if abs(rounded - int(rounded)) < 1e-9:
        return f"{int(rounded)}m"
    return f"{rounded:.1f}m"


def _escape_cell(value: str) -> str:
    normalized = value.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "<br>")
    return normalized.replace("|", "\\|")
