"""Unit tests for observability metrics."""

from __future__ import annotations

import pytest

from pushy_proxy.observability.metrics import Counter, Histogram, Metrics, NoopMetrics
from pushy_proxy.testing.fakes import FakeMetricsRegistry


class TestNoopMetrics:
    def test_instruments_implement_ports(self) -> None:
        m = NoopMetrics()
        assert isinstance(m, Metrics)
        assert isinstance(m.counter("c"), Counter)
        assert isinstance(m.histogram("h"), Histogram)

    def test_calls_are_silent(self) -> None:
        m = NoopMetrics()
        m.counter("c").add(1, labels={"type": "message"})
        m.histogram("h").record(12.5)

    def test_ports_are_abstract(self) -> None:
        with pytest.raises(TypeError):
            Metrics()  # type: ignore[abstract]


class TestFakeMetricsRegistry:
    def test_counter_is_memoised(self) -> None:
        m = FakeMetricsRegistry()
        assert m.counter("c") is m.counter("c")

    def test_counter_records_calls(self) -> None:
        m = FakeMetricsRegistry()
        m.counter("sent").add(labels={"type": "message"})
        m.counter("sent").add(2)
        assert m.counter("sent").total == 3
        assert m.counter("sent").calls[0] == (1.0, {"type": "message"})
        m.assert_counter_incremented("sent", 2)

    def test_histogram_values(self) -> None:
        m = FakeMetricsRegistry()
        m.histogram("latency").record(3.0)
        m.histogram("latency").record(5.0)
        assert m.histogram("latency").values == [3.0, 5.0]
        assert m.histogram("latency").call_count == 2

    def test_assert_counter_incremented_fails_on_unknown(self) -> None:
        with pytest.raises(AssertionError):
            FakeMetricsRegistry().assert_counter_incremented("missing")

    def test_assert_not_incremented(self) -> None:
        m = FakeMetricsRegistry()
        m.assert_not_incremented("never")
        m.counter("once").add()
        with pytest.raises(AssertionError):
            m.assert_not_incremented("once")

    def test_reset(self) -> None:
        m = FakeMetricsRegistry()
        m.counter("c").add()
        m.reset()
        m.assert_not_incremented("c")
