"""API routers for the subuser permission service."""

from . import permissions

__all__ = ["permissions"]
