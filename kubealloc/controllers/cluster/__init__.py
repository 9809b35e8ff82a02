"""Init file for cluster module."""

from kubealloc.controllers.cluster.fetchers import NodeFetcher, PodFetcher
from kubealloc.controllers.cluster.kubectl_runner import KubectlRunner
from kubealloc.controllers.cluster.parsers import NodeParser, PodParser

__all__ = ["KubectlRunner", "NodeFetcher", "NodeParser", "PodFetcher", "PodParser"]
