"""Base controller classes."""

from kubealloc.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
