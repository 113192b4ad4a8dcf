"""Notification message types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class HipChatNotification:
    """Room notification sent to HipChat."""

    room_id: Union[int, str]
    message: str
    from_: Optional[str] = None
    color: Optional[str] = None
    message_format: Optional[str] = None
    notify: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        """JSON body for ``POST /v2/room/{room_id}/notification``; unset fields are omitted."""
        payload: dict[str, Any] = {"room_id": self.room_id, "message": self.message}
        if self.from_:
            payload["from"] = self.from_
        if self.color:
            payload["color"] = self.color
        if self.message_format:
            payload["message_format"] = self.message_format
        if self.notify is not None:
            payload["notify"] = self.notify
        return payload
