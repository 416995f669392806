import pytest

from gridsnake.ticker import Ticker


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_idle_ticker_never_fires():
    counter = Counter()
    ticker = Ticker(150, counter)
    assert ticker.advance(1000) == 0
    assert counter.calls == 0
    assert not ticker.running


def test_fires_once_per_whole_interval():
    counter = Counter()
    ticker = Ticker(150, counter)
    ticker.start()
    assert ticker.advance(100) == 0
    assert ticker.advance(60) == 1
    assert ticker.advance(140) == 1     # 10 + 140 carried over
    assert ticker.advance(450) == 1     # backlog dropped, no burst
    assert ticker.advance(100) == 0
    assert ticker.advance(50) == 1
    assert counter.calls == 4


def test_long_frame_fires_a_single_tick():
    counter = Counter()
    ticker = Ticker(150, counter)
    ticker.start()
    assert ticker.advance(2000) == 1
    assert counter.calls == 1
    # 2000 - 150 leaves 1850 ms; only the 50 ms into the current interval is kept.
    assert ticker.advance(99) == 0
    assert ticker.advance(1) == 1


def test_stop_inside_callback_discards_backlog():
    ticker = None
    calls = []

    def on_tick():
        calls.append(1)
        ticker.stop()

    ticker = Ticker(100, on_tick)
    ticker.start()
    assert ticker.advance(1000) == 1
    assert calls == [1]
    assert not ticker.running

    ticker.start()
    assert ticker.advance(50) == 0


def test_restart_clears_accumulated_time():
    counter = Counter()
    ticker = Ticker(100, counter)
    ticker.start()
    ticker.advance(90)
    ticker.stop()
    ticker.start()
    assert ticker.advance(20) == 0


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        Ticker(0, Counter())
