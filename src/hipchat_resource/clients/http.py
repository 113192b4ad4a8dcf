# -*- coding: utf-8 -*-
"""Async HTTP client for the HipChat API (single attempt, no retries)."""

from __future__ import annotations

import asyncio
import uuid
import aiohttp
import structlog
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from hipchat_resource.config import Settings
from hipchat_resource.exceptions import HipChatAPIError


@dataclass(frozen=True)
class HttpResponse:
    """Status code and raw body of a completed request."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class AsyncHttpClient:
    """Async HTTP client with an optional injected aiohttp.ClientSession.

    If no session is provided, one is created and must be closed via
    aclose() or used as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (request timeout).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.http.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def post(
        self,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
        verify_ssl: bool = True,
    ) -> HttpResponse:
        """POST a JSON body and return the response status and body.

        Non-2xx responses are returned, not raised; callers decide what
        counts as failure.

        Args:
            url: Full URL to request.
            json: Optional JSON-serializable body.
            params: Optional query parameters (kept out of logs).
            verify_ssl: Set False to skip TLS certificate verification.

        Raises:
            HipChatAPIError: If the request could not be completed.
        """
        request_id = uuid.uuid4().hex[:12]
        with bound_contextvars(http_url=url, http_request_id=request_id):
            try:
                session = await self._get_session()
                async with session.post(
                    url,
                    json=json or {},
                    params=params,
                    ssl=verify_ssl,
                ) as response:
                    body = await response.text()
                    self._logger.debug(
                        "http_post_completed",
                        http_status_code=response.status,
                    )
                    return HttpResponse(status=response.status, body=body)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.error(
                    "http_post_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise HipChatAPIError(
                    f"POST failed: {url}",
                    url=url,
                    cause=e,
                ) from e
