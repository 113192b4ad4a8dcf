# -*- coding: utf-8 -*-
"""HipChat v2 room notification client."""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

import structlog

from hipchat_resource.clients.http import AsyncHttpClient
from hipchat_resource.exceptions import HipChatAPIError
from hipchat_resource.models.resource import Source
from hipchat_resource.notifications.types import HipChatNotification
from hipchat_resource.utils import mask_secret


def notification_url(server_url: str, room_id: Union[int, str]) -> str:
    """Return ``<server>/v2/room/<room_id>/notification``."""
    return f"{server_url.rstrip('/')}/v2/room/{room_id}/notification"


class HipChatClient:
    """Send room notifications through the HipChat REST API."""

    def __init__(
        self,
        http_client: AsyncHttpClient,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._http = http_client
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def send(self, source: Source, notification: HipChatNotification) -> None:
        """Post ``notification`` to the room configured in ``source``.

        ``source`` must already be validated (server URL, token and room id set).

        Raises:
            HipChatAPIError: On transport errors or a non-2xx response.
        """
        url = notification_url(str(source.hipchat_server_url), notification.room_id)
        self._logger.info(
            "hipchat_notification_sending",
            url=url,
            room_id=notification.room_id,
            token=mask_secret(source.token),
            skip_ssl_verification=source.skip_ssl_verification,
        )
        response = await self._http.post(
            url,
            json=notification.to_payload(),
            params={"auth_token": str(source.token)},
            verify_ssl=not source.skip_ssl_verification,
        )
        if not response.ok:
            raise HipChatAPIError(
                f"HipChat returned HTTP {response.status}",
                url=url,
                status_code=response.status,
                body=response.body,
            )
        self._logger.info("hipchat_notification_sent", http_status_code=response.status)
