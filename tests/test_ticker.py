"""Tests for the Ticker tick source."""

import pytest

from hiit.core.ticker import Ticker


class FakeClock:
    """Manual monotonic clock; ``sleep`` advances it."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def _ticker(callback, clock: FakeClock, interval: float = 1.0) -> Ticker:
    return Ticker(callback, interval=interval, clock=clock, sleep=clock.sleep)


# ---------------------------------------------------------------------------
# run()
# ---------------------------------------------------------------------------


class TestTickerRun:
    """run() delivers one tick per interval until told to stop."""

    def test_ticks_until_condition(self) -> None:
        clock = FakeClock()
        ticks = []
        ticker = _ticker(lambda: ticks.append(clock.now), clock)
        delivered = ticker.run(until=lambda: len(ticks) >= 3)
        assert delivered == 3
        assert ticks == [1.0, 2.0, 3.0]

    def test_condition_already_true_delivers_nothing(self) -> None:
        clock = FakeClock()
        ticks = []
        ticker = _ticker(lambda: ticks.append(1), clock)
        assert ticker.run(until=lambda: True) == 0
        assert ticks == []
        assert clock.sleeps == []

    def test_slow_callback_does_not_drift(self) -> None:
        clock = FakeClock()
        count = []

        def callback() -> None:
            count.append(1)
            clock.now += 0.3

        ticker = _ticker(callback, clock)
        ticker.run(until=lambda: len(count) >= 3)
        assert clock.sleeps == pytest.approx([1.0, 0.7, 0.7])

    def test_late_tick_is_not_followed_by_sleep(self) -> None:
        clock = FakeClock()
        count = []

        def callback() -> None:
            count.append(1)
            if len(count) == 1:
                clock.now += 1.5

        ticker = _ticker(callback, clock)
        ticker.run(until=lambda: len(count) >= 3)
        assert clock.sleeps == pytest.approx([1.0, 0.5])

    def test_not_running_after_return(self) -> None:
        clock = FakeClock()
        ticker = _ticker(lambda: None, clock)
        ticker.run(until=lambda: clock.now >= 2.0)
        assert not ticker.running

    def test_non_positive_interval_raises(self) -> None:
        with pytest.raises(ValueError):
            Ticker(lambda: None, interval=0)


# ---------------------------------------------------------------------------
# stop() / resume
# ---------------------------------------------------------------------------


class TestTickerStop:
    """stop() pauses delivery; run() can be called again to resume."""

    def test_stop_from_callback(self) -> None:
        clock = FakeClock()
        ticks = []
        ticker = None

        def callback() -> None:
            ticks.append(1)
            if len(ticks) == 2:
                ticker.stop()

        ticker = _ticker(callback, clock)
        assert ticker.run(until=lambda: False) == 2

    def test_stop_during_sleep_skips_pending_tick(self) -> None:
        clock = FakeClock()
        ticks = []
        ticker = None

        def sleep(seconds: float) -> None:
            clock.sleep(seconds)
            ticker.stop()

        ticker = Ticker(lambda: ticks.append(1), clock=clock, sleep=sleep)
        assert ticker.run(until=lambda: False) == 0
        assert ticks == []

    def test_resume_after_stop(self) -> None:
        clock = FakeClock()
        ticks = []
        ticker = None

        def callback() -> None:
            ticks.append(1)
            if len(ticks) == 1:
                ticker.stop()

        ticker = _ticker(callback, clock)
        ticker.run(until=lambda: False)
        ticker.run(until=lambda: len(ticks) >= 4)
        assert len(ticks) == 4
