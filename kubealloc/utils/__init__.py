"""Utility functions for kubealloc."""

from kubealloc.utils.duration import parse_duration_seconds
from kubealloc.utils.label_selector import LabelSelector, parse_label_selector
from kubealloc.utils.report_renderer import build_report_payload, render_report
from kubealloc.utils.resource_parser import (
    cpu_to_millicores,
    memory_to_bytes,
    parse_quantity,
)

__all__ = [
    # Selectors
    "LabelSelector",
    "build_report_payload",
    # Quantities
    "cpu_to_millicores",
    "memory_to_bytes",
    # Durations
    "parse_duration_seconds",
    "parse_label_selector",
    "parse_quantity",
    # Rendering
    "render_report",
]
