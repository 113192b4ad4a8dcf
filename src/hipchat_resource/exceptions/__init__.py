"""Exceptions subpackage."""

from hipchat_resource.exceptions.exceptions import (
    HipChatAPIError,
    HipChatResourceError,
    InvalidRequestError,
    MissingRequiredConfigError,
)

__all__ = [
    "HipChatAPIError",
    "HipChatResourceError",
    "InvalidRequestError",
    "MissingRequiredConfigError",
]
