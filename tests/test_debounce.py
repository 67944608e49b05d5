"""Unit tests for ui.debounce — last-call-wins coalescing."""

import pytest

from ui.debounce import Debouncer


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def calls() -> list[str]:
    return []


@pytest.fixture()
def debounced(clock: FakeClock, calls: list[str]) -> Debouncer:
    return Debouncer(calls.append, 0.3, clock)


class TestDebouncer:
    def test_not_fired_before_delay(self, debounced, clock, calls) -> None:
        debounced("a")
        clock.now += 0.29
        assert debounced.fire_due() is False
        assert calls == []
        assert debounced.pending

    def test_fires_after_delay(self, debounced, clock, calls) -> None:
        debounced("a")
        clock.now += 0.3
        assert debounced.fire_due() is True
        assert calls == ["a"]
        assert not debounced.pending

    def test_only_last_call_runs(self, debounced, clock, calls) -> None:
        for term in ("m", "me", "mee", "meet"):
            debounced(term)
            clock.now += 0.1
        clock.now += 0.3
        debounced.fire_due()
        assert calls == ["meet"]

    def test_new_call_restarts_window(self, debounced, clock, calls) -> None:
        debounced("a")
        clock.now += 0.2
        debounced("b")
        clock.now += 0.2
        assert debounced.fire_due() is False
        clock.now += 0.2
        assert debounced.fire_due() is True
        assert calls == ["b"]

    def test_fires_once(self, debounced, clock, calls) -> None:
        debounced("a")
        clock.now += 1
        debounced.fire_due()
        assert debounced.fire_due() is False
        assert calls == ["a"]

    def test_cancel(self, debounced, clock, calls) -> None:
        debounced("a")
        debounced.cancel()
        clock.now += 1
        assert debounced.fire_due() is False
        assert calls == []

    def test_remaining(self, debounced, clock) -> None:
        assert debounced.remaining == 0.0
        debounced("a")
        clock.now += 0.1
        assert debounced.remaining == pytest.approx(0.2)
        clock.now += 1
        assert debounced.remaining == 0.0
