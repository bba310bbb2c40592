"""Countdown to the primary event, ticking once per second."""

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Protocol

logger = logging.getLogger(__name__)

HAPPENING_NOW = "happening now"
TICK_SECONDS = 1.0


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_countdown(target: datetime, now: datetime, label: str) -> str:
    """Time left as "{d}d {hh}h {mm}m {ss}s", or "{label}: happening now".

    Args:
        target: Aware datetime the countdown runs to
        now: Aware current time
        label: Event title used in the "happening now" message

    Returns:
        Countdown text
    """
    remaining = (target - now).total_seconds()
    if remaining <= 0:
        return f"{label}: {HAPPENING_NOW}"

    total = int(remaining)
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{days}d {hours:02d}h {minutes:02d}m {seconds:02d}s"


class Timer(Protocol):
    """Schedules a repeating callback."""

    def set_interval(self, callback: Callable[[], None], seconds: float) -> Any:
        """Start calling ``callback`` every ``seconds``; return a handle."""
        ...

    def clear_interval(self, handle: Any) -> None:
        """Stop the interval identified by ``handle``."""
        ...


class _Interval:
    def __init__(self, callback: Callable[[], None], seconds: float):
        self.callback = callback
        self.seconds = seconds
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        self._stopped.set()

    def _run(self) -> None:
        while not self._stopped.wait(self.seconds):
            self.callback()


class ThreadTimer:
    """Timer backed by one daemon thread per interval."""

    def set_interval(self, callback: Callable[[], None], seconds: float) -> _Interval:
        interval = _Interval(callback, seconds)
        interval.start()
        return interval

    def clear_interval(self, handle: _Interval) -> None:
        handle.cancel()


class Countdown:
    """Owns the single ticker for a mounted countdown.

    Mounting again cancels the previous ticker first, so there is never
    more than one running. Once the target is reached the text is final
    and the ticker stops.
    """

    def __init__(
        self,
        timer: Timer,
        clock: Callable[[], datetime] = utc_now,
        on_update: Callable[[str], None] | None = None,
    ):
        self.timer = timer
        self.clock = clock
        self.on_update = on_update
        self.text = ""
        self.target: datetime | None = None
        self.label = ""
        self._handle: Any = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def finished(self) -> bool:
        return self.target is not None and self.target <= self.clock()

    def mount(self, target: datetime, label: str) -> str:
        """Start counting down to ``target`` (an aware datetime)."""
        self.unmount()
        self.target = target
        self.label = label
        self.tick()
        if not self.finished:
            self._handle = self.timer.set_interval(self.tick, TICK_SECONDS)
        return self.text

    def tick(self) -> None:
        if self.target is None:
            return
        self.text = format_countdown(self.target, self.clock(), self.label)
        if self.on_update is not None:
            self.on_update(self.text)
        if self.finished and self.running:
            logger.debug("Countdown reached its target; stopping ticker")
            self.unmount()

    def unmount(self) -> None:
        if self._handle is not None:
            self.timer.clear_interval(self._handle)
            self._handle = None
