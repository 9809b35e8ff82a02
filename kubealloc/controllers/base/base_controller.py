"""Base controller for cluster data sources.

This module provides the foundation for async data loading, so per-node
kubectl calls can run concurrently without blocking each other.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class BaseController(ABC):
    """Base controller class with async fetch patterns.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all data from the source.

        Returns:
            Dictionary containing all fetched data
        """
        ...
