"""Output rendering modules."""

from workflow_metrics.render.json_report import render_json_report
from workflow_metrics.render.markdown_report import render_markdown_report
from workflow_metrics.render.report_models import MetricsReport, ReportAgent

__all__ = [
    "MetricsReport",
    "ReportAgent",
    "render_json_report",
    "render_markdown_report",
]
