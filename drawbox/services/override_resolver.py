"""Reconcile a freshly generated sequence with a pending admin override."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Protocol

from drawbox.errors import OverrideUnavailable

logger = logging.getLogger(__name__)


class DrawSource(str, Enum):
    GENERATED = "generated"
    OVERRIDDEN = "overridden"


@dataclass(frozen=True)
class DrawResult:
    values: tuple[int, ...]
    source: DrawSource
    timestamp: datetime


class OverrideSlot(Protocol):
    """Pending override storage; ``take`` must read and clear atomically."""

    def take(self) -> int | None: ...

    def peek(self) -> list[int]: ...

    def replace(self, values: Sequence[int]) -> None: ...

    def clear(self) -> None: ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve(
    pending: int | Sequence[int] | None, fresh: Sequence[int]
) -> tuple[list[int], DrawSource]:
    """Pick the final values for a draw.

    A pending override always wins and is not checked against the draw's
    range or uniqueness.
    """

    if pending is None:
        return list(fresh), DrawSource.GENERATED
    if isinstance(pending, int):
        return [pending], DrawSource.OVERRIDDEN
    return [int(v) for v in pending], DrawSource.OVERRIDDEN


class OverrideResolver:
    """Consumes at most one pending value per draw."""

    def __init__(self, slot: OverrideSlot, clock: Callable[[], datetime] = utc_now) -> None:
        self._slot = slot
        self._clock = clock

    def resolve(self, fresh: Sequence[int]) -> DrawResult:
        try:
            pending = self._slot.take()
        except OverrideUnavailable:
            logger.warning("Override source unavailable; using generated values", exc_info=True)
            pending = None

        values, source = resolve(pending, fresh)
        if source is DrawSource.OVERRIDDEN:
            logger.info("Draw resolved from pending override")
        return DrawResult(values=tuple(values), source=source, timestamp=self._clock())
