"""Node fetcher for cluster controller - fetches node data from Kubernetes cluster."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from kubealloc.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubealloc.controllers.cluster.fetchers._decode import decode_list_items
from kubealloc.controllers.cluster.parsers.node_parser import NodeParser
from kubealloc.models.core.node_info import NodeInventoryInfo

logger = logging.getLogger(__name__)


class NodeFetcher:
    """Fetches node data from Kubernetes cluster."""

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
        self._parser = NodeParser()

    def _build_nodes_args(self, label_selector: str) -> tuple[str, ...]:
        """Build node list arguments, omitting -l for an empty selector."""
        args: list[str] = ["get", "nodes"]
        if label_selector:
            args.extend(["-l", label_selector])
        args.extend(["-o", "json", f"--request-timeout={self._request_timeout}"])
        return tuple(args)

    async def fetch_nodes_raw(self, label_selector: str = "") -> list[dict[str, Any]]:
        """Fetch raw node items matching the label selector."""
        output = await self._run_kubectl(self._build_nodes_args(label_selector))
        return decode_list_items(output, "node")

    async def fetch_nodes(self, label_selector: str = "") -> list[NodeInventoryInfo]:
        """Fetch and parse nodes matching the label selector."""
        items = await self.fetch_nodes_raw(label_selector)
        nodes = self._parser.parse_node_list(items)
        logger.debug("Fetched %d node(s) for selector %r", len(nodes), label_selector)
        return nodes
