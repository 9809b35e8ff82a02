"""Node parser for cluster controller - parses raw node data into inventory models."""

from __future__ import annotations

import logging
from typing import Any

from kubealloc.constants.enums import ResourceName
from kubealloc.errors import InventoryFetchError
from kubealloc.models.core.node_info import NodeCapacity, NodeInventoryInfo
from kubealloc.utils.resource_parser import (
    cpu_to_millicores,
    memory_to_bytes,
    parse_quantity,
    to_value,
)

logger = logging.getLogger(__name__)


class NodeParser:
    """Parses node data into structured formats."""

    def parse_capacity(self, status: dict[str, Any]) -> NodeCapacity:
        """Parse ``status.capacity`` into NodeCapacity.

        Missing entries are zero.
        """
        capacity = status.get("capacity") or {}
        return NodeCapacity(
            cpu_milli=cpu_to_millicores(capacity.get(ResourceName.CPU.value)),
            memory_bytes=memory_to_bytes(capacity.get(ResourceName.MEMORY.value)),
            max_pods=to_value(parse_quantity(capacity.get(ResourceName.PODS.value))),
        )

    def parse_node_info(self, node: dict[str, Any]) -> NodeInventoryInfo:
        """Parse a single node into NodeInventoryInfo.

        Args:
            node: Raw node dictionary from API

        Returns:
            NodeInventoryInfo object.

        Raises:
            InventoryFetchError: If a capacity quantity is malformed.
        """
        metadata = node.get("metadata") or {}
        status = node.get("status") or {}
        node_name = metadata.get("name", "")

        try:
            capacity = self.parse_capacity(status)
        except ValueError as exc:
            raise InventoryFetchError(
                f"node {node_name or '<unnamed>'} has malformed capacity: {exc}"
            ) from exc

        labels = {str(k): str(v) for k, v in (metadata.get("labels") or {}).items()}

        if capacity.cpu_milli <= 0 or capacity.memory_bytes <= 0:
            logger.debug("Node %s reports no CPU or memory capacity", node_name)

        return NodeInventoryInfo(name=node_name, labels=labels, capacity=capacity)

    def parse_node_list(self, items: list[dict[str, Any]]) -> list[NodeInventoryInfo]:
        """Parse every item of a node list."""
        return [self.parse_node_info(item) for item in items]
