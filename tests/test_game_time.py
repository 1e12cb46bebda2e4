import pytest

from pengin.game_time import GameTime


class FakeClock:
    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now


def test_fixed_time_step_is_twenty_ms():
    assert GameTime(FakeClock()).fixed_time_step() == pytest.approx(0.02)


def test_initial_state():
    gt = GameTime(FakeClock())
    assert gt.elapsed_sec() == 0.0
    assert not gt.is_lag()


def test_update_measures_elapsed():
    clock = FakeClock()
    gt = GameTime(clock)
    clock.now = 0.05
    gt.update()
    assert gt.elapsed_sec() == pytest.approx(0.05)


def test_lag_consumed_in_fixed_steps():
    clock = FakeClock()
    gt = GameTime(clock)
    clock.now = 0.05
    gt.update()
    assert gt.is_lag() is True
    gt.process_lag()
    assert gt.is_lag() is True
    gt.process_lag()
    assert gt.is_lag() is False


def test_lag_accumulates_across_updates():
    clock = FakeClock()
    gt = GameTime(clock)
    clock.now = 0.015
    gt.update()
    assert not gt.is_lag()
    clock.now = 0.03
    gt.update()
    assert gt.is_lag()
    gt.process_lag()
    assert not gt.is_lag()


def test_sleep_time_uses_whole_milliseconds_per_frame():
    clock = FakeClock()
    gt = GameTime(clock)
    clock.now = 1.0
    gt.update()
    assert gt.sleep_time() == pytest.approx(0.016)
    clock.now = 1.016
    assert gt.sleep_time() == pytest.approx(0.0)


def test_sleep_time_negative_when_late():
    clock = FakeClock()
    gt = GameTime(clock)
    clock.now = 1.0
    assert gt.sleep_time() < 0