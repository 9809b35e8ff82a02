"""Allocated resources report models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NodeAllocatedResources(BaseModel):
    """Allocated resources of one node, or of an aggregate of nodes.

    Aggregates leave ``node_name`` empty and carry ``node_count > 1``.
    Percentages may exceed 100 when limits overcommit capacity.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    node_count: int = 0
    node_name: str = ""
    instance_type: str = ""

    cpu_requests: int = 0  # millicores
    cpu_requests_percentage: float = 0.0
    cpu_limits: int = 0  # millicores
    cpu_limits_percentage: float = 0.0
    cpu_total: int = 0  # millicores

    memory_requests: int = 0  # bytes
    memory_requests_percentage: float = 0.0
    memory_limits: int = 0  # bytes
    memory_limits_percentage: float = 0.0
    memory_total: int = 0  # bytes

    pods_allocated: int = 0
    pods_total: int = 0
    pods_allocated_percentage: float = 0.0

    # Used for grouping only, never rendered.
    labels: dict[str, str] = Field(default_factory=dict, exclude=True)


class ClusterMetrics(BaseModel):
    """Top-level allocated resources report."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    totals: NodeAllocatedResources = Field(default_factory=NodeAllocatedResources)
    instance_types: list[NodeAllocatedResources] | None = None
    nodes: list[NodeAllocatedResources] | None = None
