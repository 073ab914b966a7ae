"""Execution metrics for multi-agent workflow configurations."""

from workflow_metrics.version import __version__

__all__ = ["__version__"]
