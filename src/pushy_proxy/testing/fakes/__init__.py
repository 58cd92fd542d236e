"""Testing fakes – in-memory doubles for ports."""
from pushy_proxy.testing.fakes.logger import LogRecord, RecordingLogger
from pushy_proxy.testing.fakes.metrics import FakeMetricsRegistry

__all__ = ["FakeMetricsRegistry", "LogRecord", "RecordingLogger"]
