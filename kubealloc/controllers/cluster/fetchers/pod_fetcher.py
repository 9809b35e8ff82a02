"""Pod fetcher for cluster controller - fetches pod data from Kubernetes cluster."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from kubealloc.constants.enums import TERMINAL_POD_PHASES
from kubealloc.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubealloc.controllers.cluster.fetchers._decode import decode_list_items
from kubealloc.controllers.cluster.parsers.pod_parser import PodParser
from kubealloc.models.core.pod_info import PodInventoryInfo

logger = logging.getLogger(__name__)


class PodFetcher:
    """Fetches pod data from Kubernetes cluster."""

    def __init__(
        self,
        run_kubectl_func: Callable[[tuple[str, ...]], Awaitable[str]],
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
            request_timeout: kubectl --request-timeout value
        """
        self._run_kubectl = run_kubectl_func
        self._request_timeout = request_timeout
        self._parser = PodParser()

    @staticmethod
    def build_non_terminal_field_selector(node_name: str) -> str:
        """Field selector for pods on ``node_name`` not in a terminal phase."""
        terms = [f"spec.nodeName={node_name}"]
        terms.extend(f"status.phase!={phase.value}" for phase in TERMINAL_POD_PHASES)
        return ",".join(terms)

    def _build_pods_args(self, node_name: str) -> tuple[str, ...]:
        return (
            "get",
            "pods",
            "--all-namespaces",
            f"--field-selector={self.build_non_terminal_field_selector(node_name)}",
            "-o",
            "json",
            f"--request-timeout={self._request_timeout}",
        )

    async def fetch_non_terminal_pods_raw(self, node_name: str) -> list[dict[str, Any]]:
        """Fetch raw non-terminal pod items scheduled on a node."""
        output = await self._run_kubectl(self._build_pods_args(node_name))
        return decode_list_items(output, "pod")

    async def fetch_non_terminal_pods(self, node_name: str) -> list[PodInventoryInfo]:
        """Fetch and parse non-terminal pods scheduled on a node."""
        items = await self.fetch_non_terminal_pods_raw(node_name)
        pods = self._parser.parse_pod_list(items)
        logger.debug("Fetched %d non-terminal pod(s) on node %s", len(pods), node_name)

        terminal_phases = {phase.value for phase in TERMINAL_POD_PHASES}
        for pod in pods:
            off_node = bool(pod.node_name) and pod.node_name != node_name
            if pod.phase in terminal_phases or off_node:
                logger.debug(
                    "Pod %s/%s (node %s, phase %s) does not match the field selector "
                    "for node %s",
                    pod.namespace,
                    pod.name,
                    pod.node_name,
                    pod.phase,
                    node_name,
                )
        return pods
