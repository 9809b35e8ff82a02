"""Pod parser for cluster controller - parses raw pod data into inventory models."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from kubealloc.errors import InventoryFetchError
from kubealloc.models.core.pod_info import ContainerResources, PodInventoryInfo
from kubealloc.utils.resource_parser import parse_quantity


class PodParser:
    """Parses pod data into structured formats."""

    @staticmethod
    def _parse_quantities(values: dict[str, Any] | None) -> dict[str, Decimal]:
        """Parse a resource name -> quantity mapping."""
        return {str(name): parse_quantity(value) for name, value in (values or {}).items()}

    def parse_container(self, container: dict[str, Any]) -> ContainerResources:
        """Parse one container spec into ContainerResources."""
        resources = container.get("resources") or {}
        return ContainerResources(
            name=container.get("name", ""),
            requests=self._parse_quantities(resources.get("requests")),
            limits=self._parse_quantities(resources.get("limits")),
        )

    def parse_pod_info(self, pod: dict[str, Any]) -> PodInventoryInfo:
        """Parse a single pod into PodInventoryInfo.

        Args:
            pod: Raw pod dictionary from API

        Returns:
            PodInventoryInfo object.

        Raises:
            InventoryFetchError: If a container quantity is malformed.
        """
        metadata = pod.get("metadata") or {}
        spec = pod.get("spec") or {}
        status = pod.get("status") or {}
        pod_name = metadata.get("name", "")
        namespace = metadata.get("namespace", "default")

        try:
            containers = [self.parse_container(c) for c in spec.get("containers") or []]
        except ValueError as exc:
            raise InventoryFetchError(
                f"pod {namespace}/{pod_name} has malformed resources: {exc}"
            ) from exc

        return PodInventoryInfo(
            name=pod_name,
            namespace=namespace,
            node_name=spec.get("nodeName", ""),
            phase=status.get("phase", "Unknown"),
            containers=containers,
        )

    def parse_pod_list(self, items: list[dict[str, Any]]) -> list[PodInventoryInfo]:
        """Parse every item of a pod list."""
        return [self.parse_pod_info(item) for item in items]
