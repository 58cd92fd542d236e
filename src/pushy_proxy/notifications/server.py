"""Notifications – gateway-independent server contract."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from pushy_proxy.notifications.push import PushNotification, PushResponse

__all__ = ["InMemoryNotificationServer", "NotificationServer"]


@runtime_checkable
class NotificationServer(Protocol):
    """Port: one push gateway backend."""

    def initialize(self) -> bool: ...

    def send_notification(self, msg: PushNotification) -> PushResponse: ...


class InMemoryNotificationServer:
    """Fake NotificationServer that captures notifications and answers OK."""

    def __init__(self, ready: bool = True) -> None:
        self.ready = ready
        self.sent: list[PushNotification] = []

    def initialize(self) -> bool:
        return self.ready

    def send_notification(self, msg: PushNotification) -> PushResponse:
        self.sent.append(msg)
        return PushResponse.ok()

    def reset(self) -> None:
        self.sent.clear()

    @property
    def count(self) -> int:
        return len(self.sent)
