"""Application-layer errors."""

from __future__ import annotations

from pushy_proxy.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern (configuration, wiring)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
