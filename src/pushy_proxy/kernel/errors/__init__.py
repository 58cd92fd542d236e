"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (pushy_proxy.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        ├── TimeoutError
        ├── SerializationError
        ├── ExternalServiceError
        └── RetryExhaustedError
"""

from pushy_proxy.kernel.errors.application import ApplicationError
from pushy_proxy.kernel.errors.base import BaseError
from pushy_proxy.kernel.errors.infrastructure import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
    RetryExhaustedError,
    SerializationError,
)
from pushy_proxy.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "RetryExhaustedError",
    "SerializationError",
]
