"""Logging setup."""

from hipchat_resource.logging.config import configure_logging

__all__ = ["configure_logging"]
