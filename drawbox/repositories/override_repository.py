"""Repository layer for the pending override queue."""

from __future__ import annotations

from collections.abc import Sequence
from threading import Lock

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from drawbox.errors import OverrideUnavailable
from drawbox.models.pending_override import PendingOverrideRow


class OverrideRepository:
    """FIFO queue of admin override values.

    ``take`` pops the head with a guarded delete: the row only counts as
    consumed when this transaction deleted it, so concurrent workers cannot
    hand out the same value twice. SQL failures surface as
    ``OverrideUnavailable``.
    """

    def __init__(self, session_factory: sessionmaker[Session], max_attempts: int = 5) -> None:
        self._session_factory = session_factory
        self._max_attempts = max_attempts
        self._lock = Lock()

    def take(self) -> int | None:
        try:
            with self._lock:
                for _ in range(self._max_attempts):
                    with self._session_factory.begin() as session:
                        head = session.scalars(
                            select(PendingOverrideRow).order_by(PendingOverrideRow.id.asc()).limit(1)
                        ).first()
                        if head is None:
                            return None

                        result = session.execute(
                            delete(PendingOverrideRow)
                            .where(PendingOverrideRow.id == head.id)
                            .execution_options(synchronize_session=False)
                        )
                        if result.rowcount == 1:
                            return int(head.value)
        except SQLAlchemyError as exc:
            raise OverrideUnavailable(str(exc)) from exc
        return None

    def peek(self) -> list[int]:
        try:
            with self._session_factory() as session:
                stmt = select(PendingOverrideRow.value).order_by(PendingOverrideRow.id.asc())
                return [int(v) for v in session.scalars(stmt).all()]
        except SQLAlchemyError as exc:
            raise OverrideUnavailable(str(exc)) from exc

    def replace(self, values: Sequence[int]) -> None:
        try:
            with self._lock, self._session_factory.begin() as session:
                session.execute(delete(PendingOverrideRow).execution_options(synchronize_session=False))
                session.add_all([PendingOverrideRow(value=int(v)) for v in values])
        except SQLAlchemyError as exc:
            raise OverrideUnavailable(str(exc)) from exc

    def clear(self) -> None:
        self.replace([])
