"""Pod inventory models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ContainerResources(BaseModel):
    """Requests and limits declared by one container."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    requests: dict[str, Decimal] = Field(default_factory=dict)
    limits: dict[str, Decimal] = Field(default_factory=dict)


class PodInventoryInfo(BaseModel):
    """A non-terminal pod scheduled on a node.

    Only regular containers are kept; init containers are not part of the
    allocation view.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = "default"
    node_name: str = ""
    phase: str = "Unknown"
    containers: list[ContainerResources] = Field(default_factory=list)
