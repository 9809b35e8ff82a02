"""Allocation arithmetic: pods -> node totals -> cluster and instance-type totals."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal

from kubealloc.constants.enums import ResourceName
from kubealloc.constants.labels import INSTANCE_TYPE_LABEL
from kubealloc.models.core.allocated_resources import NodeAllocatedResources
from kubealloc.models.core.node_info import NodeInventoryInfo
from kubealloc.models.core.pod_info import PodInventoryInfo
from kubealloc.utils.resource_parser import (
    ZERO,
    add_quantities,
    to_milli_value,
    to_value,
)

logger = logging.getLogger(__name__)

_CPU = ResourceName.CPU.value
_MEMORY = ResourceName.MEMORY.value


def percentage(used: int | float, total: int | float) -> float:
    """Return ``used / total * 100``, or 0.0 when total is not positive.

    Not capped at 100: overcommitted limits are reported as-is.
    """
    if total <= 0:
        return 0.0
    return float(used) / float(total) * 100


def sum_container_resources(
    pod: PodInventoryInfo,
) -> tuple[dict[str, Decimal], dict[str, Decimal]]:
    """Sum requests and limits across the regular containers of a pod.

    Init containers are not included.

    Returns:
        Tuple of (requests, limits), each a resource name -> quantity mapping.
    """
    requests: dict[str, Decimal] = {}
    limits: dict[str, Decimal] = {}
    for container in pod.containers:
        add_quantities(requests, container.requests)
        add_quantities(limits, container.limits)
    return requests, limits


def compute_node_allocation(
    node: NodeInventoryInfo,
    pods: Sequence[PodInventoryInfo],
) -> NodeAllocatedResources:
    """Compute the allocated resources of one node from its non-terminal pods.

    Args:
        node: Node with capacity and labels.
        pods: Non-terminal pods scheduled on the node.

    Returns:
        NodeAllocatedResources with ``node_count == 1``.
    """
    requests: dict[str, Decimal] = {}
    limits: dict[str, Decimal] = {}
    for pod in pods:
        pod_requests, pod_limits = sum_container_resources(pod)
        add_quantities(requests, pod_requests)
        add_quantities(limits, pod_limits)

    cpu_requests = to_milli_value(requests.get(_CPU, ZERO))
    cpu_limits = to_milli_value(limits.get(_CPU, ZERO))
    memory_requests = to_value(requests.get(_MEMORY, ZERO))
    memory_limits = to_value(limits.get(_MEMORY, ZERO))

    capacity = node.capacity
    pods_allocated = len(pods)

    return NodeAllocatedResources(
        node_count=1,
        node_name=node.name,
        instance_type=node.labels.get(INSTANCE_TYPE_LABEL, ""),
        cpu_requests=cpu_requests,
        cpu_requests_percentage=percentage(cpu_requests, capacity.cpu_milli),
        cpu_limits=cpu_limits,
        cpu_limits_percentage=percentage(cpu_limits, capacity.cpu_milli),
        cpu_total=capacity.cpu_milli,
        memory_requests=memory_requests,
        memory_requests_percentage=percentage(memory_requests, capacity.memory_bytes),
        memory_limits=memory_limits,
        memory_limits_percentage=percentage(memory_limits, capacity.memory_bytes),
        memory_total=capacity.memory_bytes,
        pods_allocated=pods_allocated,
        pods_total=capacity.max_pods,
        pods_allocated_percentage=percentage(pods_allocated, capacity.max_pods),
        labels=dict(node.labels),
    )


def fold_totals(
    node_results: Iterable[NodeAllocatedResources],
) -> NodeAllocatedResources:
    """Sum per-node results into one aggregate and recompute its percentages.

    An empty input yields an all-zero aggregate.
    """
    node_count = 0
    cpu_requests = cpu_limits = cpu_total = 0
    memory_requests = memory_limits = memory_total = 0
    pods_allocated = pods_total = 0

    for node in node_results:
        node_count += 1
        cpu_requests += node.cpu_requests
        cpu_limits += node.cpu_limits
        cpu_total += node.cpu_total
        memory_requests += node.memory_requests
        memory_limits += node.memory_limits
        memory_total += node.memory_total
        pods_allocated += node.pods_allocated
        pods_total += node.pods_total

    return NodeAllocatedResources(
        node_count=node_count,
        cpu_requests=cpu_requests,
        cpu_requests_percentage=percentage(cpu_requests, cpu_total),
        cpu_limits=cpu_limits,
        cpu_limits_percentage=percentage(cpu_limits, cpu_total),
        cpu_total=cpu_total,
        memory_requests=memory_requests,
        memory_requests_percentage=percentage(memory_requests, memory_total),
        memory_limits=memory_limits,
        memory_limits_percentage=percentage(memory_limits, memory_total),
        memory_total=memory_total,
        pods_allocated=pods_allocated,
        pods_total=pods_total,
        pods_allocated_percentage=percentage(pods_allocated, pods_total),
    )


def fold_by_instance_type(
    node_results: Iterable[NodeAllocatedResources],
) -> list[NodeAllocatedResources]:
    """Fold per-node results into one aggregate per instance-type label value.

    Nodes without the label form their own group keyed by the empty string.
    Groups are sorted by key.
    """
    groups: dict[str, list[NodeAllocatedResources]] = {}
    for node in node_results:
        key = node.labels.get(INSTANCE_TYPE_LABEL, "")
        groups.setdefault(key, []).append(node)

    if "" in groups:
        logger.debug(
            "%d node(s) have no %s label and are grouped under ''",
            len(groups[""]),
            INSTANCE_TYPE_LABEL,
        )

    return [
        fold_totals(members).model_copy(update={"instance_type": instance_type})
        for instance_type, members in sorted(groups.items())
    ]
