"""Notification subsystem."""

from hipchat_resource.notifications.types import HipChatNotification

__all__ = ["HipChatNotification"]
