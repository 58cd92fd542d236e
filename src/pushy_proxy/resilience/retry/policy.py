"""Resilience – RetryPolicy backed by ``tenacity``."""
from __future__ import annotations

from typing import Callable, TypeVar

import tenacity

from pushy_proxy.kernel.errors import RetryExhaustedError

T = TypeVar("T")

FailureHook = Callable[[int, BaseException], None]


class RetryPolicy:
    """Bounded, sequential retry.

    Parameters
    ----------
    max_attempts:
        Real number of calls made, the first one included. Must be >= 1.
    wait_seconds:
        Fixed pause between attempts; ``0`` retries immediately.
    retryable_exceptions:
        Errors that trigger another attempt. Anything else propagates
        unchanged from the attempt that raised it.
    on_failure:
        Called with ``(attempt_number, error)`` after every retryable failure,
        the last one included.

    When every attempt fails, :class:`RetryExhaustedError` is raised with the
    last attempt's error as its ``cause``.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        wait_seconds: float = 0.0,
        retryable_exceptions: tuple[type[BaseException], ...] = (Exception,),
        on_failure: FailureHook | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.max_attempts = max_attempts
        self.wait_seconds = wait_seconds
        self.retryable_exceptions = retryable_exceptions
        self._on_failure = on_failure

    def _after(self, state: tenacity.RetryCallState) -> None:
        if self._on_failure is None or state.outcome is None:
            return
        exc = state.outcome.exception()
        if exc is not None:
            self._on_failure(state.attempt_number, exc)

    def _build_retrying(self) -> tenacity.Retrying:
        wait = tenacity.wait_fixed(self.wait_seconds) if self.wait_seconds > 0 else tenacity.wait_none()
        return tenacity.Retrying(
            stop=tenacity.stop_after_attempt(self.max_attempts),
            wait=wait,
            retry=tenacity.retry_if_exception_type(self.retryable_exceptions),
            after=self._after,
            reraise=False,
        )

    def execute(self, func: Callable[[], T]) -> T:
        """Execute *func* synchronously with retry."""
        try:
            return self._build_retrying()(func)
        except tenacity.RetryError as exc:
            last = exc.last_attempt.exception()
            raise RetryExhaustedError(
                f"all {self.max_attempts} attempt(s) are used, error remains",
                attempts=self.max_attempts,
                cause=last,
            ) from last


__all__ = ["FailureHook", "RetryPolicy"]
