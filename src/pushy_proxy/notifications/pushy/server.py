"""Pushy backend – PushyNotificationServer."""
from __future__ import annotations

import time
from typing import Any

import httpx

from pushy_proxy.kernel.errors import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureTimeoutError,
    RetryExhaustedError,
    SerializationError,
)
from pushy_proxy.notifications.push import PushNotification, PushResponse
from pushy_proxy.notifications.pushy.payload import PushyResponse, build_payload
from pushy_proxy.notifications.pushy.settings import PushySettings
from pushy_proxy.notifications.pushy.transport import build_http_client
from pushy_proxy.observability.logging import Logger, get_logger
from pushy_proxy.observability.metrics import Metrics, NoopMetrics
from pushy_proxy.resilience.retry import RetryPolicy
from pushy_proxy.text.emoji import Expander, expand_emoji

SERVICE_NAME = "pushy"

ENCODE_FAILURE = "failed to encode"
SEND_FAILURE = "failed to send"

SENT_COUNTER = "push_notifications_sent_total"
FAILED_COUNTER = "push_notifications_failed_total"
REQUEST_DURATION = "pushy_request_duration_ms"

_RETRYABLE = (ConnectionError, InfrastructureTimeoutError, ExternalServiceError)


class PushyNotificationServer:
    """NotificationServer that delivers through the Pushy gateway.

    The pooled ``httpx.Client`` is the only shared state; it is safe to call
    :meth:`send_notification` from many threads at once.
    """

    def __init__(
        self,
        settings: PushySettings,
        logger: Logger | None = None,
        metrics: Metrics | None = None,
        *,
        client: httpx.Client | None = None,
        expand: Expander = expand_emoji,
    ) -> None:
        self._settings = settings
        self._logger = logger or get_logger(__name__, platform=settings.replace_for_type)
        self._metrics = metrics or NoopMetrics()
        self._client = client or build_http_client(settings)
        self._expand = expand

    @property
    def settings(self) -> PushySettings:
        return self._settings

    def __enter__(self) -> "PushyNotificationServer":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def initialize(self) -> bool:
        """Readiness check; ``False`` means traffic must not be routed here."""
        self._logger.info("pushy.initializing", platform=self._settings.replace_for_type)

        if self._settings.enable and not self._settings.secret_api_key:
            self._logger.error(
                "pushy.not_configured",
                platform=self._settings.replace_for_type,
                reason="missing secret_api_key",
            )
            return False

        return True

    def send_notification(self, msg: PushNotification) -> PushResponse:
        if not self._settings.enable:
            return PushResponse.ok()

        context = {
            "platform": self._settings.replace_for_type,
            "type": msg.type,
            "ack_id": msg.ack_id,
        }

        try:
            body = build_payload(msg, expand=self._expand).to_json()
        except SerializationError as exc:
            self._logger.error("pushy.encode_failed", error=exc.message, **context)
            self._record_failure(msg, "encode")
            return PushResponse.failure(ENCODE_FAILURE)

        self._logger.info("pushy.sending", **context)

        try:
            self.send_with_retry(body, self._settings.send_attempts, context=context)
        except RetryExhaustedError as exc:
            self._logger.error(
                "pushy.send_failed",
                attempts=exc.attempts,
                error=repr(exc.cause),
                **context,
            )
            self._record_failure(msg, "send")
            return PushResponse.failure(SEND_FAILURE)

        self._metrics.counter(SENT_COUNTER, "Notifications accepted by the gateway").add(
            labels={"platform": context["platform"], "type": context["type"]}
        )
        return PushResponse.ok()

    def send_with_retry(
        self,
        body: bytes,
        attempts: int,
        *,
        context: dict[str, str] | None = None,
    ) -> PushyResponse:
        """POST *body* up to *attempts* times, stopping at the first success.

        Raises :class:`RetryExhaustedError` carrying the last attempt's error.
        """
        fields = context or {"platform": self._settings.replace_for_type}

        def _log_failure(attempt: int, exc: BaseException) -> None:
            self._logger.error("pushy.attempt_failed", attempt=attempt, error=repr(exc), **fields)

        policy = RetryPolicy(
            max_attempts=attempts,
            wait_seconds=self._settings.retry_wait_seconds,
            retryable_exceptions=_RETRYABLE,
            on_failure=_log_failure,
        )
        return policy.execute(lambda: self._post(body))

    def _post(self, body: bytes) -> PushyResponse:
        started = time.perf_counter()
        try:
            response = self._client.post(
                self._settings.api_url,
                params={"api_key": self._settings.secret_api_key},
                content=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as exc:
            raise InfrastructureTimeoutError(f"request to {SERVICE_NAME} timed out", cause=exc) from exc
        except httpx.TransportError as exc:
            raise ConnectionError(SERVICE_NAME, f"transport error: {exc}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(SERVICE_NAME, str(exc), cause=exc) from exc
        finally:
            self._metrics.histogram(REQUEST_DURATION, "Pushy API round trip").record(
                (time.perf_counter() - started) * 1000.0,
                labels={"platform": self._settings.replace_for_type},
            )

        result = PushyResponse.parse(response.content)
        if not result.success:
            raise ExternalServiceError(
                SERVICE_NAME,
                f"rejected by {SERVICE_NAME}: {result.error or 'success=false'}",
                status_code=response.status_code,
                detail={"error": result.error},
            )
        return result

    def _record_failure(self, msg: PushNotification, reason: str) -> None:
        self._metrics.counter(FAILED_COUNTER, "Notifications not delivered").add(
            labels={
                "platform": self._settings.replace_for_type,
                "type": msg.type,
                "reason": reason,
            }
        )


__all__ = [
    "ENCODE_FAILURE",
    "FAILED_COUNTER",
    "REQUEST_DURATION",
    "SEND_FAILURE",
    "SENT_COUNTER",
    "PushyNotificationServer",
]
