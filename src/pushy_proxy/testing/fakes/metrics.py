"""Testing fakes – FakeMetricsRegistry."""
from __future__ import annotations

from pushy_proxy.observability.metrics.ports import Counter, Histogram, Metrics


class _FakeCounter(Counter):
    """In-memory counter that records all add() calls."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls: list[tuple[float, dict[str, str] | None]] = []
        self.total: float = 0.0

    def add(self, value: float = 1.0, labels: dict[str, str] | None = None) -> None:
        self.calls.append((value, labels))
        self.total += value

    @property
    def call_count(self) -> int:
        return len(self.calls)


class _FakeHistogram(Histogram):
    """In-memory histogram that records all record() calls."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls: list[tuple[float, dict[str, str] | None]] = []

    def record(self, value: float, labels: dict[str, str] | None = None) -> None:
        self.calls.append((value, labels))

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def values(self) -> list[float]:
        return [v for v, _ in self.calls]


class FakeMetricsRegistry(Metrics):
    """In-memory :class:`Metrics` double that records all instrument calls.

    Usage::

        metrics = FakeMetricsRegistry()
        server = PushyNotificationServer(settings, metrics=metrics)
        server.send_notification(msg)
        metrics.assert_counter_incremented("push_notifications_sent_total", 1)
    """

    def __init__(self) -> None:
        self._counters: dict[str, _FakeCounter] = {}
        self._histograms: dict[str, _FakeHistogram] = {}

    def counter(self, name: str, description: str = "", unit: str = "") -> _FakeCounter:
        if name not in self._counters:
            self._counters[name] = _FakeCounter(name)
        return self._counters[name]

    def histogram(
        self,
        name: str,
        description: str = "",
        unit: str = "ms",
        boundaries: list[float] | None = None,
    ) -> _FakeHistogram:
        if name not in self._histograms:
            self._histograms[name] = _FakeHistogram(name)
        return self._histograms[name]

    # ------------------------------------------------------------------
    # Assertion helpers
    # ------------------------------------------------------------------

    def assert_counter_incremented(self, name: str, n: int = 1) -> None:
        """Assert that *name* counter was incremented exactly *n* times."""
        counter = self._counters.get(name)
        assert counter is not None, f"Counter '{name}' was never created"
        assert counter.call_count == n, (
            f"Counter '{name}' was incremented {counter.call_count} time(s), expected {n}"
        )

    def assert_not_incremented(self, name: str) -> None:
        counter = self._counters.get(name)
        assert counter is None or counter.call_count == 0, (
            f"Counter '{name}' was incremented {counter.call_count} time(s)"  # type: ignore[union-attr]
        )

    def reset(self) -> None:
        """Clear all recorded metrics (useful between test cases)."""
        self._counters.clear()
        self._histograms.clear()


__all__ = ["FakeMetricsRegistry"]
