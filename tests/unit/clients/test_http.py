# -*- coding: utf-8 -*-
"""Unit tests for AsyncHttpClient."""

from __future__ import annotations

import asyncio
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from hipchat_resource.clients.http import AsyncHttpClient, HttpResponse
from hipchat_resource.config import Settings
from hipchat_resource.exceptions import HipChatAPIError


def _session(status: int = 204, body: str = "") -> MagicMock:
    """aiohttp session double whose post() yields a response with status/body."""
    response = MagicMock(status=status)
    response.text = AsyncMock(return_value=body)
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    session = MagicMock(closed=False)
    session.post = MagicMock(return_value=context)
    session.close = AsyncMock()
    return session


def _client(session: Any, get_logger: Callable[[str], Any]) -> AsyncHttpClient:
    return AsyncHttpClient(Settings.from_env(), session=session, get_logger=get_logger)


@pytest.mark.parametrize(("status", "ok"), [(200, True), (204, True), (299, True), (300, False), (401, False)])
def test_http_response_ok_means_2xx(status: int, ok: bool) -> None:
    assert HttpResponse(status=status, body="").ok is ok


async def test_post_returns_status_and_body(get_logger: Callable[[str], Any]) -> None:
    session = _session(status=204, body="")
    client = _client(session, get_logger)

    response = await client.post(
        "https://hipchat.example.com/v2/room/1/notification",
        json={"message": "hi"},
        params={"auth_token": "t"},
    )

    assert response == HttpResponse(status=204, body="")
    session.post.assert_called_once_with(
        "https://hipchat.example.com/v2/room/1/notification",
        json={"message": "hi"},
        params={"auth_token": "t"},
        ssl=True,
    )


async def test_post_skips_ssl_verification_when_asked(get_logger: Callable[[str], Any]) -> None:
    session = _session()
    client = _client(session, get_logger)

    await client.post("https://h/x", json={}, verify_ssl=False)

    assert session.post.call_args.kwargs["ssl"] is False


async def test_post_returns_error_status_without_raising(get_logger: Callable[[str], Any]) -> None:
    session = _session(status=401, body='{"error": "Invalid OAuth session"}')
    client = _client(session, get_logger)

    response = await client.post("https://h/x", json={})

    assert response.ok is False
    assert response.body == '{"error": "Invalid OAuth session"}'


@pytest.mark.parametrize("error", [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()])
async def test_post_wraps_transport_errors(
    get_logger: Callable[[str], Any],
    logger: MagicMock,
    error: Exception,
) -> None:
    session = _session()
    session.post = MagicMock(side_effect=error)
    client = _client(session, get_logger)

    with pytest.raises(HipChatAPIError) as excinfo:
        await client.post("https://h/x", json={})

    assert excinfo.value.url == "https://h/x"
    assert excinfo.value.cause is error
    assert excinfo.value.status_code is None
    logger.error.assert_called_once()
    assert logger.error.call_args.args[0] == "http_post_failed"


async def test_aclose_leaves_injected_session_open(get_logger: Callable[[str], Any]) -> None:
    session = _session()

    async with _client(session, get_logger):
        pass

    session.close.assert_not_awaited()
