"""Constants module for kubealloc.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- labels.py: Well-known Kubernetes label keys
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for options
"""

from kubealloc.constants.defaults import (
    MAX_CONCURRENT_FETCHES_DEFAULT,
    NODE_SELECTOR_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
)
from kubealloc.constants.enums import (
    TERMINAL_POD_PHASES,
    FetchState,
    OutputFormat,
    PodPhase,
    ResourceName,
)
from kubealloc.constants.labels import INSTANCE_TYPE_LABEL, WORKER_ROLE_LABEL
from kubealloc.constants.limits import (
    MAX_CONCURRENT_FETCHES_MAX,
    MAX_CONCURRENT_FETCHES_MIN,
)
from kubealloc.constants.timeouts import (
    CLUSTER_CHECK_TIMEOUT,
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)

__all__ = [
    "CLUSTER_CHECK_TIMEOUT",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    # Labels
    "INSTANCE_TYPE_LABEL",
    "KUBECTL_COMMAND_TIMEOUT",
    # Defaults
    "MAX_CONCURRENT_FETCHES_DEFAULT",
    # Limits
    "MAX_CONCURRENT_FETCHES_MAX",
    "MAX_CONCURRENT_FETCHES_MIN",
    "NODE_SELECTOR_DEFAULT",
    "OUTPUT_FORMAT_DEFAULT",
    "TERMINAL_POD_PHASES",
    "WORKER_ROLE_LABEL",
    # Enums
    "FetchState",
    "OutputFormat",
    "PodPhase",
    "ResourceName",
]
