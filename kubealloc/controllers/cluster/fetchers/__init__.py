"""Fetchers for cluster inventory."""

from kubealloc.controllers.cluster.fetchers.node_fetcher import NodeFetcher
from kubealloc.controllers.cluster.fetchers.pod_fetcher import PodFetcher

__all__ = ["NodeFetcher", "PodFetcher"]
