# -*- coding: utf-8 -*-
"""OutResource: the ``put`` step of the resource.

compose (opinionated defaults) -> validate -> resolve tokens -> send.
Returns the exit code and the version to report instead of exiting, so the
entry point owns process lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

import structlog

from hipchat_resource.exceptions import HipChatAPIError, InvalidRequestError
from hipchat_resource.models.message import message_text
from hipchat_resource.models.resource import OutRequest, Params, Source, split_room_url
from hipchat_resource.notifications.types import HipChatNotification
from hipchat_resource.utils import is_blank

if TYPE_CHECKING:
    from hipchat_resource.clients.hipchat_client import HipChatClient
    from hipchat_resource.messages.composer import MessageComposer
    from hipchat_resource.tokens.resolver import TokenResolver

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Concourse requires a version in the out response; notifications have none.
NO_VERSION: dict[str, str] = {"ref": "none"}

ROOM_ID_HINT = (
    "Room id must be included in hipchat_server_url when not specified in the source "
    "(https://api.hipchat.com/v2/room/12456)"
)


@dataclass(frozen=True)
class OutResult:
    """Outcome of one ``out`` invocation."""

    exit_code: int
    version: Optional[dict[str, str]] = None


class OutResource:
    """Compose, resolve and deliver one HipChat notification."""

    def __init__(
        self,
        composer: "MessageComposer",
        resolver: "TokenResolver",
        hipchat_client: "HipChatClient",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._composer = composer
        self._resolver = resolver
        self._hipchat = hipchat_client
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def run(
        self,
        request: OutRequest,
        root_dir: Optional[Union[str, Path]] = None,
    ) -> OutResult:
        """Run the step. Never raises for invalid input or delivery errors."""
        params = request.params
        composed = self._composer.compose(params, root_dir)
        if composed is not None:
            params = composed

        try:
            source = validate_request(request.source, params)
        except InvalidRequestError as exc:
            for error in exc.errors:
                self._logger.error("out_invalid_input", error_message=error)
            self._logger.error("out_invalid_input_abort", message="Please provide valid input and try again")
            return OutResult(exit_code=EXIT_FAILURE)

        resolved = await self._resolver.resolve(
            message_text(params.parsed_message),
            params.tokens,
            root_dir,
        )
        notification = HipChatNotification(
            room_id=source.room_id if source.room_id is not None else "",
            message=resolved,
            from_=params.from_,
            color=params.color,
            message_format=params.message_format,
            notify=params.notify,
        )

        try:
            await self._hipchat.send(source, notification)
        except HipChatAPIError as exc:
            self._logger.error(
                "out_send_failed",
                fail_on_error=source.fail_on_error,
                http_status_code=exc.status_code,
                response_body=exc.body,
                error_message=str(exc),
            )
            if source.fail_on_error:
                return OutResult(exit_code=EXIT_FAILURE)

        return OutResult(exit_code=EXIT_SUCCESS, version=dict(NO_VERSION))


def validate_request(source: Source, params: Params) -> Source:
    """Check required values and return the source with its room id resolved.

    When ``room_id`` is unset it is taken from a ``.../v2/room/<id>`` server
    URL, which is trimmed to its base.

    Raises:
        InvalidRequestError: With every problem found.
    """
    errors: list[str] = []
    for name in ("hipchat_server_url", "token"):
        if is_blank(getattr(source, name)):
            errors.append(f"Please provide a value for {name}")
    if message_text(params.parsed_message) is None:
        errors.append("Please provide a value for message")

    if is_blank(source.room_id):
        split = split_room_url(source.hipchat_server_url or "")
        if split is None:
            errors.append(ROOM_ID_HINT)
        else:
            server_url, room_id = split
            source = source.model_copy(
                update={"hipchat_server_url": server_url, "room_id": room_id}
            )

    if errors:
        raise InvalidRequestError(errors)
    return source
