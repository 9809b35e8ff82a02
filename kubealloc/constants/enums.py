"""All enum definitions.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Kubernetes Enums
# =============================================================================

class PodPhase(Enum):
    """Pod phase values from Kubernetes API."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class ResourceName(Enum):
    """Resource names surfaced in the report."""

    CPU = "cpu"
    MEMORY = "memory"
    PODS = "pods"


# Phases excluded from the allocation view
TERMINAL_POD_PHASES = (PodPhase.SUCCEEDED, PodPhase.FAILED)


# =============================================================================
# Report Enums
# =============================================================================

class OutputFormat(Enum):
    """Report output formats."""

    JSON = "json"
    YAML = "yaml"


# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Data fetch state values."""

    PENDING = "pending"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
