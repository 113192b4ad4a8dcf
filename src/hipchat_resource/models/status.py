# -*- coding: utf-8 -*-
"""Build status categories (``message_type``) and their opinionated defaults."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


PULL_REQUEST_PREFIX = "pr_"


class MessageStatus(str, Enum):
    """Supported values for the ``message_type`` param."""

    PENDING = "pending"
    STARTED = "started"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    ABORTED = "aborted"
    PR_PENDING = "pr_pending"
    PR_STARTED = "pr_started"
    PR_SUCCEEDED = "pr_succeeded"
    PR_FAILED = "pr_failed"
    PR_ABORTED = "pr_aborted"

    @classmethod
    def parse(cls, value: str) -> Optional[MessageStatus]:
        """Return the matching status, or None for an unsupported value."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def icon_name(self) -> str:
        """Icon shared with the base category (``pr_failed`` -> ``failed``)."""
        return self.value.removeprefix(PULL_REQUEST_PREFIX)


@dataclass(frozen=True)
class StatusDefaults:
    """Default styling applied for a status category."""

    color: str
    notify: bool
    status_text: str
    icon_name: str


_STYLE: dict[str, tuple[str, bool, str]] = {
    "pending": ("gray", False, "Build Pending"),
    "started": ("yellow", False, "Build Started"),
    "succeeded": ("green", False, "Build Successful"),
    "failed": ("red", True, "Build Failed!"),
    "aborted": ("purple", False, "Build Aborted"),
}


def defaults_for(status: MessageStatus) -> StatusDefaults:
    """Look up color, notify flag, status text and icon for ``status``."""
    base = status.icon_name
    color, notify, text = _STYLE[base]
    if status.value.startswith(PULL_REQUEST_PREFIX):
        text = f"Pull Request {text}"
    return StatusDefaults(color=color, notify=notify, status_text=text, icon_name=base)


STATUS_DEFAULTS: dict[MessageStatus, StatusDefaults] = {
    status: defaults_for(status) for status in MessageStatus
}
