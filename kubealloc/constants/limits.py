"""Limit constants.

Validation ranges for options.
"""

from typing import Final

# ============================================================================
# Fetch limits
# ============================================================================

MAX_CONCURRENT_FETCHES_MIN: Final = 1
MAX_CONCURRENT_FETCHES_MAX: Final = 32

# ============================================================================
# Label syntax limits
# ============================================================================

LABEL_NAME_MAX_LENGTH: Final = 63
LABEL_PREFIX_MAX_LENGTH: Final = 253

__all__ = [
    "LABEL_NAME_MAX_LENGTH",
    "LABEL_PREFIX_MAX_LENGTH",
    "MAX_CONCURRENT_FETCHES_MAX",
    "MAX_CONCURRENT_FETCHES_MIN",
]
