"""Run state models."""

from kubealloc.models.state.options import AllocatedResourcesOptions

__all__ = ["AllocatedResourcesOptions"]
