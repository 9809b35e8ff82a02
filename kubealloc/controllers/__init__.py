"""Controllers module for kubealloc.

This module provides controllers for fetching Kubernetes inventory and
building the allocated resources report.
"""

from __future__ import annotations

# Base classes
from kubealloc.controllers.base import BaseController

# Cluster domain
from kubealloc.controllers.cluster.controller import (
    AllocatedResourcesController,
    FetchStatus,
)

__all__ = [
    "AllocatedResourcesController",
    # Base
    "BaseController",
    "FetchStatus",
]
