"""Custom exceptions for the HipChat notification resource."""

from __future__ import annotations


class HipChatResourceError(Exception):
    """Base exception for resource errors."""

    pass


class MissingRequiredConfigError(HipChatResourceError):
    """Raised when a required configuration value is missing."""

    pass


class InvalidRequestError(HipChatResourceError):
    """Raised when the resource request fails validation.

    Every problem found is kept in ``errors`` so they can be reported together.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors) or "Invalid request")
        self.errors = list(errors)


class HipChatAPIError(HipChatResourceError):
    """Raised when the HipChat API request fails or returns a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.body = body
        self.cause = cause
