import pytest

from gamecore.timer import Timer


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_delta_time_between_frames():
    clock = FakeClock(1000)
    timer = Timer(clock)
    timer.start()
    clock.now = 1250
    timer.update_frame_ticks()
    assert timer.delta_time() == pytest.approx(0.25)


def test_delta_time_zero_right_after_start():
    timer = Timer(FakeClock(500))
    timer.start()
    assert timer.delta_time() == 0.0


def test_current_tick_in_seconds():
    timer = Timer(FakeClock(1500))
    timer.start()
    assert timer.current_tick() == pytest.approx(1.5)


def test_sleep_time_zero_for_very_high_fps():
    timer = Timer(FakeClock(0))
    assert timer.sleep_time(2000) == 0


def test_sleep_time_capped_by_frame_length():
    timer = Timer(FakeClock(100000))
    for fps in (30, 60, 120):
        assert timer.sleep_time(fps) == 1000 // fps


def test_sleep_time_early_in_frame():
    timer = Timer(FakeClock(10))
    assert timer.sleep_time(50) == 10


def test_sleep_time_rejects_zero_fps():
    timer = Timer(FakeClock(0))
    with pytest.raises(ValueError):
        timer.sleep_time(0)


def test_default_clock_moves_forward():
    timer = Timer()
    timer.start()
    timer.update_frame_ticks()
    assert timer.delta_time() >= 0.0
    assert timer.current_ticks >= timer.prev_ticks