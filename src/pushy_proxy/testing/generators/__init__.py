"""Testing generators – property-based strategies."""
from pushy_proxy.testing.generators.strategies import push_notification_strategy

__all__ = ["push_notification_strategy"]
