"""Timed reveal of a draw: teaser frames, then the committed result.

The reveal is a small state machine (IDLE -> ANIMATING -> SETTLED) advanced
one frame per ``tick``. Wall-clock pacing lives in a ``Ticker`` so tests can
run a full reveal without sleeping.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import Protocol

from drawbox.services.override_resolver import DrawResult

DEFAULT_FRAMES = 15
DEFAULT_INTERVAL_SECONDS = 0.05


class RevealState(str, Enum):
    IDLE = "idle"
    ANIMATING = "animating"
    SETTLED = "settled"


class RevealEventKind(str, Enum):
    FRAME = "frame"
    SETTLED = "settled"


@dataclass(frozen=True)
class RevealEvent:
    kind: RevealEventKind
    frame: int
    values: tuple[int, ...]
    result: DrawResult | None = None


class Ticker(Protocol):
    def wait(self, seconds: float) -> None: ...


class SleepTicker:
    """Real time pacing."""

    def wait(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


class NullTicker:
    """No pacing at all."""

    def wait(self, seconds: float) -> None:
        return None


class RevealScheduler:
    """Drives one reveal at a time.

    ``trigger`` while a reveal is animating is refused. Frames ``0..N-2``
    call ``teaser``; frame ``N-1`` calls ``settle`` exactly once and the
    scheduler becomes SETTLED. ``cancel`` before that point drops the reveal
    and ``settle`` is never called.
    """

    def __init__(self, frames: int = DEFAULT_FRAMES) -> None:
        if frames < 1:
            raise ValueError("frames must be >= 1")
        self._frames = int(frames)
        self._lock = Lock()
        self._state = RevealState.IDLE
        self._frame = 0
        self._teaser: Callable[[], Sequence[int]] | None = None
        self._settle: Callable[[], DrawResult] | None = None

    @property
    def state(self) -> RevealState:
        return self._state

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def frames(self) -> int:
        return self._frames

    def trigger(
        self,
        teaser: Callable[[], Sequence[int]],
        settle: Callable[[], DrawResult],
    ) -> bool:
        with self._lock:
            if self._state is RevealState.ANIMATING:
                return False
            self._state = RevealState.ANIMATING
            self._frame = 0
            self._teaser = teaser
            self._settle = settle
            return True

    def tick(self) -> RevealEvent | None:
        """Advance one frame; ``None`` when nothing is animating."""

        with self._lock:
            if self._state is not RevealState.ANIMATING:
                return None

            frame = self._frame
            if frame < self._frames - 1:
                assert self._teaser is not None
                self._frame += 1
                return RevealEvent(RevealEventKind.FRAME, frame, tuple(self._teaser()))

            assert self._settle is not None
            try:
                result = self._settle()
            except Exception:
                self._reset(RevealState.IDLE)
                raise
            self._reset(RevealState.SETTLED)
            return RevealEvent(RevealEventKind.SETTLED, frame, result.values, result)

    def cancel(self) -> bool:
        with self._lock:
            if self._state is not RevealState.ANIMATING:
                return False
            self._reset(RevealState.IDLE)
            return True

    def _reset(self, state: RevealState) -> None:
        self._state = state
        self._frame = 0
        self._teaser = None
        self._settle = None


class RevealRun:
    """Iterates the events of one triggered reveal, paced by a ticker.

    Closing the run (or abandoning iteration) before the final frame cancels
    the reveal.
    """

    def __init__(
        self,
        scheduler: RevealScheduler,
        ticker: Ticker,
        interval: float = DEFAULT_INTERVAL_SECONDS,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._ticker = ticker
        self._interval = interval
        self._on_close = on_close
        self._closed = False

    def __iter__(self) -> Iterator[RevealEvent]:
        try:
            while not self._closed:
                self._ticker.wait(self._interval)
                event = self._scheduler.tick()
                if event is None:
                    return
                yield event
                if event.kind is RevealEventKind.SETTLED:
                    return
        finally:
            self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._scheduler.cancel()
        if self._on_close is not None:
            self._on_close()

    def __enter__(self) -> RevealRun:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
