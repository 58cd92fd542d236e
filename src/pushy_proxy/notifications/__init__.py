"""Notifications – push model, result type and server contract."""
from pushy_proxy.notifications.push import BADGE_UNSET, PushNotification, PushResponse, PushType
from pushy_proxy.notifications.server import InMemoryNotificationServer, NotificationServer

__all__ = [
    "BADGE_UNSET",
    "InMemoryNotificationServer",
    "NotificationServer",
    "PushNotification",
    "PushResponse",
    "PushType",
]
