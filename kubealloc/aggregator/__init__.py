"""Allocation aggregation."""

from kubealloc.aggregator.allocation import (
    compute_node_allocation,
    fold_by_instance_type,
    fold_totals,
    percentage,
    sum_container_resources,
)

__all__ = [
    "compute_node_allocation",
    "fold_by_instance_type",
    "fold_totals",
    "percentage",
    "sum_container_resources",
]
