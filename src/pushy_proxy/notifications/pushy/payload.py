"""Pushy backend – wire payload and response.

The ``data`` object sent to Pushy depends on the notification shape:

* ``BaseData`` is always sent;
* ``LoadedContent`` when the content was already resolved upstream
  (``is_id_loaded``) and must be passed through verbatim;
* ``MessageContent`` for ``message`` / ``session`` notifications;
* nothing else for every other type (badge updates, clears, ...).
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from pushy_proxy.kernel.errors import SerializationError
from pushy_proxy.notifications.push import BADGE_UNSET, PushNotification, PushType
from pushy_proxy.text.emoji import Expander, expand_emoji

__all__ = [
    "GENERIC_SENDER_NAME",
    "BaseData",
    "Content",
    "LoadedContent",
    "MessageContent",
    "PushyPayload",
    "PushyResponse",
    "build_payload",
]

GENERIC_SENDER_NAME = "Someone"

_CONTENT_TYPES = (PushType.MESSAGE, PushType.SESSION)


@dataclass(frozen=True)
class BaseData:
    ack_id: str
    type: str
    version: str
    channel_id: str
    is_crt_enabled: bool
    server_id: str
    badge: int | None = None
    root_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "ack_id": self.ack_id,
            "type": self.type,
            "version": self.version,
            "channel_id": self.channel_id,
            "is_crt_enabled": self.is_crt_enabled,
            "server_id": self.server_id,
        }
        if self.badge is not None:
            data["badge"] = self.badge
        if self.root_id:
            data["root_id"] = self.root_id
        return data


@dataclass(frozen=True)
class LoadedContent:
    post_id: str
    message: str
    sender_id: str
    team_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "post_id": self.post_id,
            "message": self.message,
            "id_loaded": True,
            "sender_id": self.sender_id,
            "sender_name": GENERIC_SENDER_NAME,
            "team_id": self.team_id,
        }


@dataclass(frozen=True)
class MessageContent:
    team_id: str
    sender_id: str
    sender_name: str
    message: str
    channel_name: str
    post_id: str
    override_username: str
    override_icon_url: str
    from_webhook: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "team_id": self.team_id,
            "sender_id": self.sender_id,
            "sender_name": self.sender_name,
            "message": self.message,
            "channel_name": self.channel_name,
            "post_id": self.post_id,
            "override_username": self.override_username,
            "override_icon_url": self.override_icon_url,
            "from_webhook": self.from_webhook,
        }


Content = Union[LoadedContent, MessageContent, None]


@dataclass(frozen=True)
class PushyPayload:
    """``{"to": <device>, "data": {...}}`` request body for the Pushy API."""

    to: str
    base: BaseData
    content: Content = None

    def data(self) -> dict[str, Any]:
        data = self.base.to_dict()
        if self.content is not None:
            data.update(self.content.to_dict())
        return data

    def to_dict(self) -> dict[str, Any]:
        return {"to": self.to, "data": self.data()}

    def to_json(self) -> bytes:
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"failed to encode pushy payload: {exc}",
                payload_type=type(self).__name__,
                cause=exc,
            ) from exc


def build_payload(msg: PushNotification, expand: Expander = expand_emoji) -> PushyPayload:
    """Translate *msg* into the Pushy wire payload. Pure, no I/O."""
    base = BaseData(
        ack_id=msg.ack_id,
        type=msg.type,
        version=msg.version,
        channel_id=msg.channel_id,
        is_crt_enabled=msg.is_crt_enabled,
        server_id=msg.server_id,
        badge=None if msg.badge == BADGE_UNSET else msg.badge,
        root_id=msg.root_id,
    )

    content: Content = None
    if msg.is_id_loaded:
        content = LoadedContent(
            post_id=msg.post_id,
            message=msg.message,
            sender_id=msg.sender_id,
            team_id=msg.team_id,
        )
    elif msg.type in _CONTENT_TYPES:
        content = MessageContent(
            team_id=msg.team_id,
            sender_id=msg.sender_id,
            sender_name=msg.sender_name,
            message=expand(msg.message),
            channel_name=msg.channel_name,
            post_id=msg.post_id,
            override_username=msg.override_username,
            override_icon_url=msg.override_icon_url,
            from_webhook=msg.from_webhook,
        )

    return PushyPayload(to=msg.device_id, base=base, content=content)


@dataclass(frozen=True)
class PushyResponse:
    """Parsed Pushy reply. Anything unreadable counts as not successful."""

    success: bool = False
    id: str = ""
    devices: int = 0
    error: str | None = None

    @classmethod
    def parse(cls, body: bytes | str) -> "PushyResponse":
        try:
            doc = json.loads(body)
        except ValueError:
            return cls(error="unreadable response body")
        if not isinstance(doc, dict):
            return cls(error="unexpected response body")

        info = doc.get("info")
        devices = info.get("devices", 0) if isinstance(info, dict) else 0
        error = doc.get("error")
        return cls(
            success=doc.get("success") is True,
            id=str(doc.get("id") or ""),
            devices=devices if isinstance(devices, int) else 0,
            error=str(error) if error is not None else None,
        )
