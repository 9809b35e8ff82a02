"""Exception hierarchy for kubealloc."""


class KubeAllocError(Exception):
    """Base exception for all kubealloc failures."""


class InvalidSelectorError(KubeAllocError):
    """Raised when a label selector expression cannot be parsed."""


class InventoryFetchError(KubeAllocError):
    """Raised when node or pod inventory cannot be fetched or decoded."""


class SerializationError(KubeAllocError):
    """Raised when a report cannot be rendered."""


class ConfigError(KubeAllocError):
    """Raised when options fail validation."""
