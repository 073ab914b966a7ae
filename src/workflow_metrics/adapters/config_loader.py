"""YAML loaders for workflow definitions and pricing overrides."""

from __future__ import annotations

import logging
from importlib.resources import as_file, files
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from workflow_metrics.core.models import Pricing, WorkflowDocument

DEFAULT_PRICING_FILENAME = "pricing.yaml"
logger = logging.getLogger("workflow_metrics")


def load_workflow(path: str | Path) -> WorkflowDocument:
    """Load and validate a workflow file with ``agents`` and ``workflow`` keys."""
    raw_data = _read_yaml_mapping(Path(path), kind="workflow file")
    try:
        return WorkflowDocument.model_validate(raw_data)
    except ValidationError as exc:
        detail_text = _format_validation_errors(exc)
        raise ValueError(f"Invalid workflow file at {path}:\n{detail_text}") from exc


def load_default_pricing() -> Pricing:
    """Load the packaged default pricing."""
    resource = files("workflow_metrics").joinpath(DEFAULT_PRICING_FILENAME)
    with as_file(resource) as default_path:
        raw_data = _read_yaml_mapping(default_path, kind="pricing file")
    try:
        return Pricing.model_validate(raw_data)
    except ValidationError as exc:
        raise RuntimeError(f"Malformed {DEFAULT_PRICING_FILENAME}: {exc}") from exc


def load_pricing(path: str | Path | None = None) -> Pricing:
    """Load pricing, overlaying keys from ``path`` on the packaged defaults.

    Keys missing from the override file keep their default values.
    """
    defaults = load_default_pricing()
    if path is None:
        return defaults

    overrides = _read_yaml_mapping(Path(path), kind="pricing file")
    if not overrides:
        logger.warning("Pricing file %s is empty; using defaults", path)
        return defaults

    try:
        return Pricing.model_validate({**defaults.model_dump(), **overrides})
    except ValidationError as exc:
        detail_text = _format_validation_errors(exc)
        raise ValueError(f"Invalid pricing file at {path}:\n{detail_text}") from exc


def _read_yaml_mapping(path: Path, *, kind: str) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"{kind.capitalize()} not found: {path}")

    try:
        raw_data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse YAML {kind} at {path}: {exc}") from exc
    except OSError as exc:
        raise OSError(f"Failed to read {kind} {path}: {exc}") from exc

    if raw_data is None:
        return {}
    if not isinstance(raw_data, dict):
        raise ValueError(f"Invalid {kind} at {path}: root must be a YAML mapping")
    return raw_data


def _format_validation_errors(exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        details.append(f"{location}: {error['msg']}")
    return "\n".join(f"- {line}" for line in details)
