"""Repository layer for the persistent draw history."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from drawbox.errors import PersistenceUnavailable
from drawbox.models.history_entry import HistoryEntryRow
from drawbox.services.history_ledger import Actor, HistoryEntry


class HistoryRepository:
    """Append-only history log. SQL failures surface as ``PersistenceUnavailable``."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def append(self, entry: HistoryEntry) -> None:
        try:
            with self._session_factory.begin() as session:
                session.add(
                    HistoryEntryRow(
                        value=entry.value,
                        actor=entry.actor.value,
                        timestamp=entry.timestamp,
                    )
                )
        except SQLAlchemyError as exc:
            raise PersistenceUnavailable(str(exc)) from exc

    def list_recent(self, limit: int) -> list[HistoryEntry]:
        """Most recent ``limit`` entries, newest first."""

        try:
            with self._session_factory() as session:
                stmt = select(HistoryEntryRow).order_by(HistoryEntryRow.id.desc()).limit(int(limit))
                rows = list(session.scalars(stmt).all())
        except SQLAlchemyError as exc:
            raise PersistenceUnavailable(str(exc)) from exc

        return [
            HistoryEntry(value=row.value, actor=Actor(row.actor), timestamp=row.timestamp)
            for row in rows
        ]
