"""Data models for kubealloc."""

from kubealloc.models.core import (
    ClusterMetrics,
    ContainerResources,
    NodeAllocatedResources,
    NodeCapacity,
    NodeInventoryInfo,
    PodInventoryInfo,
)
from kubealloc.models.state import AllocatedResourcesOptions

__all__ = [
    "AllocatedResourcesOptions",
    "ClusterMetrics",
    "ContainerResources",
    "NodeAllocatedResources",
    "NodeCapacity",
    "NodeInventoryInfo",
    "PodInventoryInfo",
]
