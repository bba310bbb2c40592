"""Tests for the countdown formatter and ticker."""

import re
from datetime import datetime, timedelta, timezone

from weddings.render.countdown import Countdown, format_countdown

COUNTDOWN_RE = re.compile(r"^\d+d \d{2}h \d{2}m \d{2}s$")
TARGET = datetime(2026, 12, 27, 13, 0, tzinfo=timezone.utc)


class ManualTimer:
    """Timer whose intervals only fire when the test says so."""

    def __init__(self):
        self.active = {}
        self._next = 0

    def set_interval(self, callback, seconds):
        self._next += 1
        self.active[self._next] = callback
        return self._next

    def clear_interval(self, handle):
        self.active.pop(handle, None)

    def fire(self):
        for callback in list(self.active.values()):
            callback()


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


def test_past_target_is_happening_now():
    """Test countdown output once the event has started."""
    now = TARGET + timedelta(hours=2)
    assert format_countdown(TARGET, now, "Wedding Ceremony") == "Wedding Ceremony: happening now"


def test_exact_target_is_happening_now():
    assert format_countdown(TARGET, TARGET, "Ceremony") == "Ceremony: happening now"


def test_future_target_format():
    now = TARGET - timedelta(days=3, hours=4, minutes=5, seconds=6)
    text = format_countdown(TARGET, now, "Ceremony")
    assert text == "3d 04h 05m 06s"
    assert COUNTDOWN_RE.match(text)


def test_sub_second_remainder_is_floored():
    now = TARGET - timedelta(seconds=59, milliseconds=900)
    assert format_countdown(TARGET, now, "Ceremony") == "0d 00h 00m 59s"


def test_many_days_are_not_wrapped():
    now = TARGET - timedelta(days=400)
    assert format_countdown(TARGET, now, "Ceremony") == "400d 00h 00m 00s"


def test_countdown_decreases_under_simulated_clock():
    """Each tick shows less time remaining than the one before."""
    clock = FakeClock(TARGET - timedelta(minutes=1, seconds=5))
    timer = ManualTimer()
    seen = []
    countdown = Countdown(timer, clock=clock, on_update=seen.append)

    countdown.mount(TARGET, "Ceremony")
    for _ in range(5):
        clock.advance(1)
        timer.fire()

    assert all(COUNTDOWN_RE.match(text) for text in seen)
    seconds = [int(t.split()[2][:-1]) * 60 + int(t.split()[3][:-1]) for t in seen]
    assert seconds == sorted(seconds, reverse=True)
    assert len(set(seconds)) == len(seconds)


def test_countdown_stops_when_target_reached():
    clock = FakeClock(TARGET - timedelta(seconds=2))
    timer = ManualTimer()
    countdown = Countdown(timer, clock=clock)

    assert countdown.mount(TARGET, "Ceremony") == "0d 00h 00m 02s"
    assert countdown.running

    clock.advance(2)
    timer.fire()
    assert countdown.text == "Ceremony: happening now"
    assert not countdown.running
    assert timer.active == {}

    clock.advance(60)
    timer.fire()
    assert countdown.text == "Ceremony: happening now"


def test_mount_past_target_never_schedules():
    timer = ManualTimer()
    countdown = Countdown(timer, clock=FakeClock(TARGET + timedelta(days=1)))
    assert countdown.mount(TARGET, "Ceremony") == "Ceremony: happening now"
    assert timer.active == {}


def test_remount_clears_previous_ticker():
    """Mounting again never leaves two tickers running."""
    clock = FakeClock(TARGET - timedelta(days=1))
    timer = ManualTimer()
    countdown = Countdown(timer, clock=clock)

    countdown.mount(TARGET, "Ceremony")
    countdown.mount(TARGET + timedelta(days=1), "Reception")

    assert len(timer.active) == 1
    assert countdown.text == "2d 00h 00m 00s"

    countdown.unmount()
    assert timer.active == {}
