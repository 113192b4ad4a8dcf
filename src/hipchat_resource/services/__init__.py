"""Services: the out step orchestration."""

from hipchat_resource.services.out_resource import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    OutResource,
    OutResult,
    validate_request,
)

__all__ = [
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "OutResource",
    "OutResult",
    "validate_request",
]
