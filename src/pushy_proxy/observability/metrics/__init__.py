"""Observability – metrics ports."""
from pushy_proxy.observability.metrics.ports import Counter, Histogram, Metrics
from pushy_proxy.observability.metrics.noop import NoopMetrics

__all__ = ["Counter", "Histogram", "Metrics", "NoopMetrics"]
