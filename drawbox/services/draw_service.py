"""Business logic for drawing numbers with a timed reveal and admin overrides."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from threading import Lock
from typing import Protocol

from drawbox.errors import AppError, OverrideUnavailable, PersistenceUnavailable, ValidationError
from drawbox.services.history_ledger import (
    DEFAULT_CAPACITY,
    Actor,
    HistoryEntry,
    HistoryLedger,
    render_values,
)
from drawbox.services.override_resolver import DrawResult, OverrideResolver, OverrideSlot, utc_now
from drawbox.services.range_spec import DEFAULT_MAX_COUNT, RangeSpec, validate
from drawbox.services.reveal_scheduler import (
    DEFAULT_FRAMES,
    DEFAULT_INTERVAL_SECONDS,
    NullTicker,
    RevealEventKind,
    RevealRun,
    RevealScheduler,
    RevealState,
    Ticker,
)
from drawbox.services.sequence_generator import generate

logger = logging.getLogger(__name__)

DEFAULT_CLIENT = "default"


class HistoryStore(Protocol):
    def append(self, entry: HistoryEntry) -> None: ...

    def list_recent(self, limit: int) -> list[HistoryEntry]: ...


@dataclass(frozen=True)
class DrawOutcome:
    frames: list[tuple[int, ...]]
    result: DrawResult


class DrawService:
    """Draw numbers for a client.

    Each client gets its own reveal scheduler, so a second draw from the same
    client while the first is still animating is refused. Storage failures
    never fail a draw: a missing override source means no override, a
    missing history store means the local ledger only.
    """

    def __init__(
        self,
        overrides: OverrideSlot,
        history_store: HistoryStore | None = None,
        *,
        capacity: int = DEFAULT_CAPACITY,
        max_count: int = DEFAULT_MAX_COUNT,
        frames: int = DEFAULT_FRAMES,
        interval: float = DEFAULT_INTERVAL_SECONDS,
        ticker: Ticker | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._overrides = overrides
        self._resolver = OverrideResolver(overrides, clock)
        self._store = history_store
        self._ledger = HistoryLedger(capacity)
        self._max_count = max_count
        self._frames = frames
        self._interval = interval
        self._ticker = ticker or NullTicker()
        self._rng = rng or random.Random()
        self._schedulers: dict[str, RevealScheduler] = {}
        self._lock = Lock()

    @property
    def ledger(self) -> HistoryLedger:
        return self._ledger

    def hydrate(self) -> None:
        """Seed the local ledger from the persistent log, if there is one."""

        if self._store is None:
            return
        try:
            self._ledger.hydrate(self._store.list_recent(self._ledger.capacity))
        except PersistenceUnavailable:
            logger.warning("History store unavailable; starting with empty history", exc_info=True)

    def stream(
        self,
        min_value: int,
        max_value: int,
        count: int = 1,
        unique: bool = False,
        *,
        is_admin: bool = False,
        client_id: str = DEFAULT_CLIENT,
    ) -> RevealRun | None:
        """Start a reveal and return its events, or ``None`` if one is running.

        Raises:
            ValidationError / RangeExhaustedError: before anything is drawn.
        """

        spec = validate(min_value, max_value, count, unique, self._max_count)

        def teaser() -> list[int]:
            return generate(spec.lower, spec.upper, spec.count, False, self._rng)

        with self._lock:
            current = self._schedulers.get(client_id)
            if current is not None and current.state is RevealState.ANIMATING:
                logger.info("Draw ignored; reveal already running for client %s", client_id)
                return None
            # a finished run may still hold the old scheduler; never retrigger it
            scheduler = RevealScheduler(self._frames)
            scheduler.trigger(teaser, self._settle(spec, is_admin))
            self._schedulers[client_id] = scheduler

        return RevealRun(
            scheduler,
            self._ticker,
            self._interval,
            on_close=lambda: self._release(client_id, scheduler),
        )

    def draw(
        self,
        min_value: int,
        max_value: int,
        count: int = 1,
        unique: bool = False,
        *,
        is_admin: bool = False,
        client_id: str = DEFAULT_CLIENT,
    ) -> DrawOutcome | None:
        """Run a whole reveal and return its teaser frames and result."""

        run = self.stream(
            min_value, max_value, count, unique, is_admin=is_admin, client_id=client_id
        )
        if run is None:
            return None

        frames: list[tuple[int, ...]] = []
        result: DrawResult | None = None
        with run:
            for event in run:
                if event.kind is RevealEventKind.FRAME:
                    frames.append(event.values)
                else:
                    result = event.result

        if result is None:
            raise AppError(code="draw_failed", message="Draw ended without a result", status_code=500)
        return DrawOutcome(frames=frames, result=result)

    def history(self) -> list[HistoryEntry]:
        """Most recent entries, newest first; local ledger if the store is down."""

        if self._store is not None:
            try:
                return self._store.list_recent(self._ledger.capacity)
            except PersistenceUnavailable:
                logger.warning("History store unavailable; serving local history", exc_info=True)
        return self._ledger.list()

    def set_override(self, values: Sequence[int]) -> list[int]:
        """Replace the pending queue. Values are not range-checked."""

        queued = [int(v) for v in values]
        if not queued:
            raise ValidationError(message="Invalid values", details={"values": ["At least one value required"]})
        try:
            self._overrides.replace(queued)
        except OverrideUnavailable as exc:
            logger.warning("Could not store override", exc_info=True)
            raise AppError(
                code="override_unavailable",
                message="Override storage unavailable",
                status_code=503,
            ) from exc
        logger.info("Pending override replaced (%d value(s))", len(queued))
        return queued

    def clear_override(self) -> None:
        try:
            self._overrides.clear()
        except OverrideUnavailable as exc:
            logger.warning("Could not clear override", exc_info=True)
            raise AppError(
                code="override_unavailable",
                message="Override storage unavailable",
                status_code=503,
            ) from exc
        logger.info("Pending override cleared")

    def pending_overrides(self) -> list[int]:
        try:
            return self._overrides.peek()
        except OverrideUnavailable:
            logger.warning("Override source unavailable", exc_info=True)
            return []

    def active_value(self) -> int | None:
        pending = self.pending_overrides()
        return pending[0] if pending else None

    def _settle(self, spec: RangeSpec, is_admin: bool) -> Callable[[], DrawResult]:
        actor = Actor.ADMIN if is_admin else Actor.USER

        def settle() -> DrawResult:
            fresh = generate(spec.lower, spec.upper, spec.count, spec.unique, self._rng)
            result = self._resolver.resolve(fresh)
            self._record(
                HistoryEntry(
                    value=render_values(result.values),
                    actor=actor,
                    timestamp=result.timestamp.isoformat(),
                )
            )
            return result

        return settle

    def _record(self, entry: HistoryEntry) -> None:
        self._ledger.record(entry)
        if self._store is None:
            return
        try:
            self._store.append(entry)
        except PersistenceUnavailable:
            logger.warning("History write failed; kept in local history only", exc_info=True)

    def _release(self, client_id: str, scheduler: RevealScheduler) -> None:
        with self._lock:
            if self._schedulers.get(client_id) is scheduler:
                del self._schedulers[client_id]
