# -*- coding: utf-8 -*-
"""Request models for the ``out`` step (``{"source": ..., "params": ...}`` on stdin)."""

from __future__ import annotations

import re
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from hipchat_resource.models.message import Message, as_message

_ROOM_URL = re.compile(r"((?:http|https)://.*)/v2/room/(\d+)")


class Source(BaseModel):
    """Resource ``source`` configuration."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    hipchat_server_url: Optional[str] = None
    token: Optional[str] = None
    room_id: Optional[Union[int, str]] = None
    skip_ssl_verification: bool = False
    fail_on_error: bool = True


class MessageTypeConfig(BaseModel):
    """Per-segment overrides for opinionated messages.

    Each value is ``"enabled"``/``"disabled"`` (any case) or verbatim markup.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    pipeline_info: Optional[str] = None
    fly_info: Optional[str] = None
    git_info: Optional[str] = None


class Params(BaseModel):
    """Step ``params`` for ``put``."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    # A string or {"template": ...}; other values are kept and rejected later
    # as a missing message.
    message: Any = None
    from_: Optional[str] = Field(default=None, alias="from")
    color: Optional[str] = None
    message_format: Optional[str] = None
    # None means "not set"; an explicit False is kept.
    notify: Optional[bool] = None
    message_type: Optional[str] = None
    message_type_config: Optional[MessageTypeConfig] = None
    tokens: dict[str, Any] = Field(default_factory=dict)

    @property
    def parsed_message(self) -> Optional[Message]:
        """The ``message`` param as a PlainText/Templated variant."""
        return as_message(self.message)


class OutRequest(BaseModel):
    """Payload Concourse writes to the ``out`` script's stdin."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    source: Source = Field(default_factory=Source)
    params: Params = Field(default_factory=Params)


def split_room_url(url: str) -> Optional[tuple[str, int]]:
    """Split ``https://host/v2/room/123`` into (``https://host``, 123).

    Returns None when the URL does not embed a room id.
    """
    match = _ROOM_URL.search(url)
    if match is None:
        return None
    return match.group(1), int(match.group(2))
