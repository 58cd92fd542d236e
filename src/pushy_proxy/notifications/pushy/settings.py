"""Pushy backend – PushySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from pushy_proxy.config.settings import Settings
from pushy_proxy.config.validation import InvalidSettingValueError

DEFAULT_API_URL = "https://api.pushy.me/push"


@dataclasses.dataclass(frozen=True)
class PushySettings(Settings):
    """Pushy gateway settings, read from ``PUSHY_*`` variables or a JSON file.

    ``send_attempts`` is the real number of HTTP attempts per notification.
    The default of one matches what the gateway backend has always done.
    """

    _prefix: ClassVar[str] = "PUSHY"

    enable: bool = False
    secret_api_key: str = dataclasses.field(default="", repr=False)
    max_conns: int = 100
    idle_conn_timeout: int = 90
    replace_for_type: str = "android_rn"
    api_url: str = DEFAULT_API_URL
    send_attempts: int = 1
    retry_wait_seconds: float = 0.0

    def _validate(self) -> None:
        if self.max_conns < 1:
            raise InvalidSettingValueError("max_conns", self.max_conns, "must be >= 1")
        if self.idle_conn_timeout < 0:
            raise InvalidSettingValueError("idle_conn_timeout", self.idle_conn_timeout, "must be >= 0")
        if self.send_attempts < 1:
            raise InvalidSettingValueError("send_attempts", self.send_attempts, "must be >= 1")
        if self.retry_wait_seconds < 0:
            raise InvalidSettingValueError("retry_wait_seconds", self.retry_wait_seconds, "must be >= 0")


__all__ = ["DEFAULT_API_URL", "PushySettings"]
