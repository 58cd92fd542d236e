"""Notifications – push notification model and dispatch result."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = [
    "BADGE_UNSET",
    "PushNotification",
    "PushResponse",
    "PushType",
]

BADGE_UNSET = -1


class PushType(str, Enum):
    CLEAR = "clear"
    MESSAGE = "message"
    UPDATE_BADGE = "update_badge"
    SESSION = "session"
    TEST = "test"


# Inbound key -> field name, where they differ.
_WIRE_ALIASES: dict[str, str] = {
    "cont_ava": "content_available",
    "id_loaded": "is_id_loaded",
}


@dataclass(frozen=True)
class PushNotification:
    """A notification as handed over by the chat server, for one device."""

    device_id: str
    type: str = PushType.MESSAGE.value
    ack_id: str = ""
    platform: str = ""
    server_id: str = ""
    post_id: str = ""
    category: str = ""
    sound: str = ""
    message: str = ""
    badge: int = BADGE_UNSET
    content_available: int = 0
    team_id: str = ""
    channel_id: str = ""
    root_id: str = ""
    channel_name: str = ""
    sender_id: str = ""
    sender_name: str = ""
    override_username: str = ""
    override_icon_url: str = ""
    from_webhook: str = ""
    version: str = ""
    is_crt_enabled: bool = False
    is_id_loaded: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.type, PushType):
            object.__setattr__(self, "type", self.type.value)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PushNotification":
        """Build from the inbound JSON object; unknown keys are ignored."""
        names = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _WIRE_ALIASES.get(key, key)
            if name in names and value is not None:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class PushResponse:
    """Uniform, terminal outcome of one dispatch: ``OK`` or ``FAIL`` with a reason."""

    STATUS_OK = "OK"
    STATUS_FAIL = "FAIL"

    status: str
    error: str | None = None

    @classmethod
    def ok(cls) -> "PushResponse":
        return cls(status=cls.STATUS_OK)

    @classmethod
    def failure(cls, reason: str) -> "PushResponse":
        return cls(status=cls.STATUS_FAIL, error=reason)

    @property
    def is_ok(self) -> bool:
        return self.status == self.STATUS_OK

    def to_dict(self) -> dict[str, str]:
        payload = {"status": self.status}
        if self.error is not None:
            payload["error"] = self.error
        return payload
