"""Opinionated message composition."""

from hipchat_resource.messages.composer import (
    DEFAULT_FROM,
    GIT_METADATA_FILES,
    UNKNOWN_GIT_VALUE,
    MessageComposer,
)

__all__ = [
    "DEFAULT_FROM",
    "GIT_METADATA_FILES",
    "UNKNOWN_GIT_VALUE",
    "MessageComposer",
]
