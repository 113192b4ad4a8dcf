"""Domain models: messages, status categories and resource requests."""

from hipchat_resource.models.message import (
    Message,
    PlainText,
    Templated,
    as_message,
    message_text,
    to_templated,
)
from hipchat_resource.models.resource import (
    MessageTypeConfig,
    OutRequest,
    Params,
    Source,
    split_room_url,
)
from hipchat_resource.models.status import (
    STATUS_DEFAULTS,
    MessageStatus,
    StatusDefaults,
    defaults_for,
)

__all__ = [
    "Message",
    "MessageStatus",
    "MessageTypeConfig",
    "OutRequest",
    "Params",
    "PlainText",
    "STATUS_DEFAULTS",
    "Source",
    "StatusDefaults",
    "Templated",
    "as_message",
    "defaults_for",
    "message_text",
    "split_room_url",
    "to_templated",
]
