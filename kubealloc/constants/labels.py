"""Well-known Kubernetes label keys."""

from typing import Final

INSTANCE_TYPE_LABEL: Final = "node.kubernetes.io/instance-type"
WORKER_ROLE_LABEL: Final = "node-role.kubernetes.io/worker"

__all__ = [
    "INSTANCE_TYPE_LABEL",
    "WORKER_ROLE_LABEL",
]
