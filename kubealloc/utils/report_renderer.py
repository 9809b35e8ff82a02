"""Report renderer - serializes ClusterMetrics to JSON or YAML."""

from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from kubealloc.constants.defaults import JSON_INDENT_DEFAULT
from kubealloc.constants.enums import OutputFormat
from kubealloc.errors import SerializationError
from kubealloc.models.core.allocated_resources import (
    ClusterMetrics,
    NodeAllocatedResources,
)

logger = logging.getLogger(__name__)


def _entry_payload(
    entry: NodeAllocatedResources, *, keep_instance_type: bool
) -> dict[str, Any]:
    payload = entry.model_dump(by_alias=True)
    if not payload.get("nodeName"):
        payload.pop("nodeName", None)
    if not keep_instance_type:
        payload.pop("instanceType", None)
    return payload


def build_report_payload(metrics: ClusterMetrics) -> dict[str, Any]:
    """Build the plain-dict report with field presence rules applied.

    - ``totals`` is always present, without ``instanceType``
    - ``instanceTypes`` only when grouping was requested
    - ``nodes`` only when node details were requested
    - ``nodeName`` only when non-empty; ``labels`` never
    """
    payload: dict[str, Any] = {
        "totals": _entry_payload(metrics.totals, keep_instance_type=False),
    }
    if metrics.instance_types is not None:
        payload["instanceTypes"] = [
            _entry_payload(group, keep_instance_type=True)
            for group in metrics.instance_types
        ]
    if metrics.nodes is not None:
        payload["nodes"] = [
            _entry_payload(node, keep_instance_type=True) for node in metrics.nodes
        ]
    return payload


def render_report(
    metrics: ClusterMetrics,
    output_format: OutputFormat | str = OutputFormat.JSON,
) -> str:
    """Render the report as text.

    Args:
        metrics: Report to render.
        output_format: ``OutputFormat`` or its string value ("json", "yaml").

    Returns:
        The serialized report.

    Raises:
        SerializationError: For an unknown format or an encoder failure.
    """
    try:
        fmt = OutputFormat(output_format)
    except ValueError as exc:
        choices = ", ".join(f.value for f in OutputFormat)
        raise SerializationError(
            f"unsupported output format {output_format!r}; expected one of: {choices}"
        ) from exc

    payload = build_report_payload(metrics)
    try:
        if fmt == OutputFormat.YAML:
            return yaml.safe_dump(payload, default_flow_style=False, sort_keys=False)
        return json.dumps(payload, indent=JSON_INDENT_DEFAULT)
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        logger.debug("Failed to render %s report", fmt.value, exc_info=True)
        raise SerializationError(f"could not render {fmt.value} report: {exc}") from exc
