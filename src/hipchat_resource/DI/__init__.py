"""Dependency injection."""

from hipchat_resource.DI.container import Container

__all__ = ["Container"]
