"""Node inventory models."""

from pydantic import BaseModel, ConfigDict, Field


class NodeCapacity(BaseModel):
    """Node capacity as reported in ``status.capacity``."""

    model_config = ConfigDict(frozen=True)

    cpu_milli: int = 0  # millicores
    memory_bytes: int = 0  # bytes
    max_pods: int = 0


class NodeInventoryInfo(BaseModel):
    """A node as returned by the inventory provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    labels: dict[str, str] = Field(default_factory=dict)
    capacity: NodeCapacity = Field(default_factory=NodeCapacity)
