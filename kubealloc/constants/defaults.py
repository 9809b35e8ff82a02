"""Default values for options.

All default values used by the AllocatedResourcesOptions model and the CLI.
"""

from typing import Final

from kubealloc.constants.labels import WORKER_ROLE_LABEL

# ============================================================================
# Selector defaults
# ============================================================================

NODE_SELECTOR_DEFAULT: Final = f"{WORKER_ROLE_LABEL}=true"

# ============================================================================
# Report defaults
# ============================================================================

OUTPUT_FORMAT_DEFAULT: Final = "json"
GROUP_BY_INSTANCE_TYPE_DEFAULT: Final = False
INCLUDE_NODE_DETAILS_DEFAULT: Final = False
JSON_INDENT_DEFAULT: Final = 2

# ============================================================================
# Fetch defaults
# ============================================================================

MAX_CONCURRENT_FETCHES_DEFAULT: Final = 4

__all__ = [
    "GROUP_BY_INSTANCE_TYPE_DEFAULT",
    "INCLUDE_NODE_DETAILS_DEFAULT",
    "JSON_INDENT_DEFAULT",
    "MAX_CONCURRENT_FETCHES_DEFAULT",
    "NODE_SELECTOR_DEFAULT",
    "OUTPUT_FORMAT_DEFAULT",
]
