"""Pushy gateway backend."""
from pushy_proxy.notifications.pushy.payload import (
    BaseData,
    LoadedContent,
    MessageContent,
    PushyPayload,
    PushyResponse,
    build_payload,
)
from pushy_proxy.notifications.pushy.server import (
    ENCODE_FAILURE,
    SEND_FAILURE,
    PushyNotificationServer,
)
from pushy_proxy.notifications.pushy.settings import DEFAULT_API_URL, PushySettings
from pushy_proxy.notifications.pushy.transport import build_http_client

__all__ = [
    "DEFAULT_API_URL",
    "ENCODE_FAILURE",
    "SEND_FAILURE",
    "BaseData",
    "LoadedContent",
    "MessageContent",
    "PushyNotificationServer",
    "PushyPayload",
    "PushyResponse",
    "PushySettings",
    "build_http_client",
    "build_payload",
]
