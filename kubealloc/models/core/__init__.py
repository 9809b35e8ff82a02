"""Core inventory and report models."""

from kubealloc.models.core.allocated_resources import (
    ClusterMetrics,
    NodeAllocatedResources,
)
from kubealloc.models.core.node_info import NodeCapacity, NodeInventoryInfo
from kubealloc.models.core.pod_info import ContainerResources, PodInventoryInfo

__all__ = [
    "ClusterMetrics",
    "ContainerResources",
    "NodeAllocatedResources",
    "NodeCapacity",
    "NodeInventoryInfo",
    "PodInventoryInfo",
]
