from __future__ import annotations

import pytest
from orderflow_test_libs import async_utils


class FakeClock:
    """Deterministic stand-in for the monotonic clock and the delay primitive.

    ``sleep`` records the requested delay and advances the clock by it, so
    time-bounded loops can be driven without real waiting.
    """

    def __init__(self) -> None:
        self.now_ms = 0.0
        self.sleeps: list[float] = []

    def now(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms

    async def sleep(self, ms: float) -> None:
        self.sleeps.append(ms)
        self.now_ms += ms


@pytest.fixture
def fake_clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    """Patch async_utils to run on a FakeClock."""
    clock = FakeClock()
    monkeypatch.setattr(async_utils, "_now_ms", clock.now)
    monkeypatch.setattr(async_utils, "sleep", clock.sleep)
    return clock
