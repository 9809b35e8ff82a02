"""Allocated resources controller.

This module orchestrates one report run: it validates the node selector,
fetches nodes and their non-terminal pods through kubectl, and folds the
per-node allocation into cluster and instance-type totals.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from kubealloc.aggregator.allocation import (
    compute_node_allocation,
    fold_by_instance_type,
    fold_totals,
)
from kubealloc.constants.enums import FetchState
from kubealloc.constants.timeouts import CLUSTER_CHECK_TIMEOUT
from kubealloc.controllers.base import BaseController
from kubealloc.controllers.cluster.fetchers import NodeFetcher, PodFetcher
from kubealloc.controllers.cluster.kubectl_runner import KubectlRunner
from kubealloc.errors import InventoryFetchError, KubeAllocError
from kubealloc.models.core.allocated_resources import (
    ClusterMetrics,
    NodeAllocatedResources,
)
from kubealloc.models.core.node_info import NodeInventoryInfo
from kubealloc.models.core.pod_info import PodInventoryInfo
from kubealloc.models.state.options import AllocatedResourcesOptions
from kubealloc.utils.label_selector import parse_label_selector

logger = logging.getLogger(__name__)


@dataclass
class FetchStatus:
    """Outcome of the latest kubectl round trip for one inventory source."""

    source: str
    state: FetchState = FetchState.PENDING
    error_message: str | None = None
    succeeded_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form used in debug logs."""
        return {
            "source": self.source,
            "state": self.state.value,
            "error": self.error_message,
            "succeeded_at": (
                self.succeeded_at.isoformat() if self.succeeded_at else None
            ),
        }


class AllocatedResourcesController(BaseController):
    """Builds the allocated resources report for one cluster.

    Delegates inventory access to:
    - NodeFetcher: nodes matching the label selector
    - PodFetcher: non-terminal pods per node
    """

    SOURCE_NODES = "nodes"
    SOURCE_PODS = "pods"
    SOURCE_CLUSTER_CONNECTION = "cluster_connection"

    def __init__(
        self,
        options: AllocatedResourcesOptions | None = None,
        run_kubectl: Callable[[tuple[str, ...]], Awaitable[str]] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            options: Report options. Defaults are used when omitted.
            run_kubectl: Optional async kubectl runner, mainly for tests.
                Defaults to a KubectlRunner honouring context/kubeconfig.
        """
        self.options = options or AllocatedResourcesOptions()
        if run_kubectl is None:
            runner = KubectlRunner(
                context=self.options.context,
                kubeconfig=self.options.kubeconfig,
            )
            run_kubectl = runner.run
        self._run_kubectl = run_kubectl

        self._node_fetcher = NodeFetcher(
            self._run_kubectl, request_timeout=self.options.request_timeout
        )
        self._pod_fetcher = PodFetcher(
            self._run_kubectl, request_timeout=self.options.request_timeout
        )

        self._fetch_states: dict[str, FetchStatus] = {}
        self._initialize_fetch_states()

    # =========================================================================
    # Fetch state tracking
    # =========================================================================

    def _initialize_fetch_states(self) -> None:
        self._fetch_states = {
            source: FetchStatus(source=source)
            for source in (
                self.SOURCE_CLUSTER_CONNECTION,
                self.SOURCE_NODES,
                self.SOURCE_PODS,
            )
        }

    def _update_fetch_state(
        self,
        source: str,
        state: FetchState,
        error_message: str | None = None,
    ) -> None:
        status = self._fetch_states.setdefault(source, FetchStatus(source=source))
        status.state = state
        status.error_message = error_message
        if state == FetchState.SUCCESS:
            status.succeeded_at = datetime.now(timezone.utc)

    def get_fetch_state(self, source: str) -> FetchStatus | None:
        """Return the status of one inventory source, if it is tracked."""
        return self._fetch_states.get(source)

    def get_error_sources(self) -> list[str]:
        """Sources whose latest fetch failed, in tracking order."""
        return [
            source
            for source, status in self._fetch_states.items()
            if status.state == FetchState.ERROR
        ]

    @staticmethod
    def _summarize_connection_error(error: BaseException) -> str:
        """Extract a concise, user-facing connection error from kubectl output."""
        lines = [line.strip() for line in str(error).splitlines() if line.strip()]
        if not lines:
            return "Cluster connection check failed"

        selected_line = lines[-1]
        for line in reversed(lines):
            if line.startswith("error:") or "unable to connect" in line.lower():
                selected_line = line
                break

        cleaned = selected_line.removeprefix("error:").strip()
        if len(cleaned) > 160:
            return f"{cleaned[:157].rstrip()}..."
        return cleaned or "Cluster connection check failed"

    # =========================================================================
    # Inventory
    # =========================================================================

    async def check_connection(self) -> bool:
        """Check that the API server answers within CLUSTER_CHECK_TIMEOUT."""
        self._update_fetch_state(self.SOURCE_CLUSTER_CONNECTION, FetchState.LOADING)
        args = (
            "version",
            "-o",
            "json",
            f"--request-timeout={self.options.request_timeout}",
        )
        try:
            await asyncio.wait_for(
                self._run_kubectl(args), timeout=CLUSTER_CHECK_TIMEOUT
            )
        except asyncio.TimeoutError:
            message = f"no answer from the API server within {CLUSTER_CHECK_TIMEOUT:g}s"
        except KubeAllocError as exc:
            message = self._summarize_connection_error(exc)
        else:
            self._update_fetch_state(self.SOURCE_CLUSTER_CONNECTION, FetchState.SUCCESS)
            return True

        logger.warning("Cluster connection check failed: %s", message)
        self._update_fetch_state(self.SOURCE_CLUSTER_CONNECTION, FetchState.ERROR, message)
        return False

    async def ensure_connection(self) -> None:
        """Raise InventoryFetchError naming the reason the cluster is unreachable."""
        if await self.check_connection():
            return
        status = self.get_fetch_state(self.SOURCE_CLUSTER_CONNECTION)
        reason = status.error_message if status and status.error_message else None
        raise InventoryFetchError(
            f"cannot reach the cluster: {reason or 'connection check failed'}"
        )

    async def fetch_nodes(self, label_selector: str) -> list[NodeInventoryInfo]:
        """Fetch nodes matching an already validated selector."""
        self._update_fetch_state(self.SOURCE_NODES, FetchState.LOADING)
        try:
            nodes = await self._node_fetcher.fetch_nodes(label_selector)
        except KubeAllocError as exc:
            logger.error("Error fetching nodes: %s", exc)
            self._update_fetch_state(self.SOURCE_NODES, FetchState.ERROR, str(exc))
            raise
        self._update_fetch_state(self.SOURCE_NODES, FetchState.SUCCESS)
        return nodes

    async def fetch_pods_by_node(
        self, nodes: list[NodeInventoryInfo]
    ) -> list[list[PodInventoryInfo]]:
        """Fetch non-terminal pods for every node, in node order.

        At most ``options.max_concurrent_fetches`` kubectl calls run at once.
        The first failure cancels the remaining fetches and is re-raised.
        """
        self._update_fetch_state(self.SOURCE_PODS, FetchState.LOADING)
        semaphore = asyncio.Semaphore(self.options.max_concurrent_fetches)

        async def _fetch_node(node: NodeInventoryInfo) -> list[PodInventoryInfo]:
            async with semaphore:
                return await self._pod_fetcher.fetch_non_terminal_pods(node.name)

        tasks = [asyncio.create_task(_fetch_node(node)) for node in nodes]
        try:
            pods_by_node = await asyncio.gather(*tasks)
        except KubeAllocError as exc:
            logger.error("Error fetching pods: %s", exc)
            self._update_fetch_state(self.SOURCE_PODS, FetchState.ERROR, str(exc))
            raise
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            if tasks:
                await asyncio.gather(*tasks, return_exceptions=True)

        self._update_fetch_state(self.SOURCE_PODS, FetchState.SUCCESS)
        return list(pods_by_node)

    # =========================================================================
    # Report
    # =========================================================================

    def build_cluster_metrics(
        self, node_results: list[NodeAllocatedResources]
    ) -> ClusterMetrics:
        """Assemble the report from per-node results according to the options."""
        return ClusterMetrics(
            totals=fold_totals(node_results),
            instance_types=(
                fold_by_instance_type(node_results)
                if self.options.group_by_instance_type
                else None
            ),
            nodes=list(node_results) if self.options.include_node_details else None,
        )

    async def get_allocated_resources(self) -> ClusterMetrics:
        """Build the allocated resources report.

        Raises:
            InvalidSelectorError: Before any kubectl call, if the selector is malformed.
            InventoryFetchError: If nodes or pods cannot be fetched.
        """
        selector = parse_label_selector(self.options.label_selector)

        nodes = await self.fetch_nodes(str(selector))
        pods_by_node = await self.fetch_pods_by_node(nodes)

        node_results = [
            compute_node_allocation(node, pods)
            for node, pods in zip(nodes, pods_by_node)
        ]
        metrics = self.build_cluster_metrics(node_results)
        logger.info(
            "Computed allocation for %d node(s) matching %r",
            metrics.totals.node_count,
            str(selector),
        )
        return metrics

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all report data.

        Returns:
            Dictionary with the ``cluster_metrics`` report.
        """
        return {"cluster_metrics": await self.get_allocated_resources()}

    async def build_report(self) -> ClusterMetrics:
        """Validate the selector, check the connection, then build the report.

        The selector is checked before the connection check so a malformed
        selector never reaches kubectl. On failure the state of every failed
        source is logged at debug level.
        """
        parse_label_selector(self.options.label_selector)
        try:
            await self.ensure_connection()
            data = await self.fetch_all()
        except KubeAllocError:
            for source in self.get_error_sources():
                status = self.get_fetch_state(source)
                if status is not None:
                    logger.debug("Fetch state: %s", status.to_dict())
            raise
        return data["cluster_metrics"]
