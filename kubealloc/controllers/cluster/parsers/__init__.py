"""Parsers for raw cluster data."""

from kubealloc.controllers.cluster.parsers.node_parser import NodeParser
from kubealloc.controllers.cluster.parsers.pod_parser import PodParser

__all__ = ["NodeParser", "PodParser"]
