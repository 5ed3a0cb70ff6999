import time
from datetime import timedelta

from kdutils.elapsedtimer import ElapsedTimer

MS = 1_000_000


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += ms * MS


def test_auto_starts():
    clock = FakeClock(1_000)
    t = ElapsedTimer(clock)
    clock.advance_ms(500)
    assert t.elapsed() == timedelta(milliseconds=500)


def test_start():
    clock = FakeClock()
    t = ElapsedTimer(clock)
    clock.advance_ms(500)
    t.start()

    clock.advance_ms(500)
    assert t.elapsed() == timedelta(milliseconds=500)

    clock.advance_ms(500)
    assert t.elapsed() == timedelta(milliseconds=1000)


def test_restart():
    clock = FakeClock()
    t = ElapsedTimer(clock)
    t.start()

    clock.advance_ms(500)
    assert t.restart() == timedelta(milliseconds=500)

    clock.advance_ms(250)
    assert t.elapsed() == timedelta(milliseconds=250)


def test_nsec_elapsed():
    clock = FakeClock()
    t = ElapsedTimer(clock)
    clock.now += 500_000_123
    assert t.nsec_elapsed() == 500_000_123


def test_msec_elapsed_truncates():
    clock = FakeClock()
    t = ElapsedTimer(clock)
    clock.now += 500 * MS + 999_999
    assert t.msec_elapsed() == 500


def test_real_clock_measures_sleep():
    t = ElapsedTimer()
    time.sleep(0.05)
    elapsed = t.elapsed()
    assert timedelta(milliseconds=50) <= elapsed <= timedelta(seconds=2)
    assert t.msec_elapsed() >= 50
    assert t.nsec_elapsed() >= 50 * MS