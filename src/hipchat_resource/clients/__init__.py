"""HTTP and API clients."""

from hipchat_resource.clients.hipchat_client import HipChatClient, notification_url
from hipchat_resource.clients.http import AsyncHttpClient, HttpResponse

__all__ = [
    "AsyncHttpClient",
    "HipChatClient",
    "HttpResponse",
    "notification_url",
]
