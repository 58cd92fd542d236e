"""Resilience – bounded sequential retry."""
from pushy_proxy.resilience.retry.policy import FailureHook, RetryPolicy

__all__ = ["FailureHook", "RetryPolicy"]
