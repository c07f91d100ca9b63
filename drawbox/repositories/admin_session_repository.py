"""Repository layer for admin bearer sessions."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from drawbox.errors import CollaboratorUnavailable
from drawbox.models.admin_session import AdminSession


@dataclass(frozen=True)
class AdminSessionRecord:
    token: str
    username: str
    expires_at: float


class AdminSessionRepository:
    """CRUD operations for AdminSession."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(self, token: str, username: str, expires_at: float) -> AdminSessionRecord:
        try:
            with self._session_factory.begin() as session:
                session.add(AdminSession(token=token, username=username, expires_at=float(expires_at)))
        except SQLAlchemyError as exc:
            raise CollaboratorUnavailable(str(exc)) from exc
        return AdminSessionRecord(token=token, username=username, expires_at=float(expires_at))

    def get(self, token: str) -> AdminSessionRecord | None:
        try:
            with self._session_factory() as session:
                row = session.get(AdminSession, token)
                if row is None:
                    return None
                return AdminSessionRecord(token=row.token, username=row.username, expires_at=row.expires_at)
        except SQLAlchemyError as exc:
            raise CollaboratorUnavailable(str(exc)) from exc

    def delete(self, token: str) -> None:
        try:
            with self._session_factory.begin() as session:
                session.execute(
                    delete(AdminSession)
                    .where(AdminSession.token == token)
                    .execution_options(synchronize_session=False)
                )
        except SQLAlchemyError as exc:
            raise CollaboratorUnavailable(str(exc)) from exc

    def purge_expired(self, now: float) -> int:
        try:
            with self._session_factory.begin() as session:
                result = session.execute(
                    delete(AdminSession)
                    .where(AdminSession.expires_at <= float(now))
                    .execution_options(synchronize_session=False)
                )
                return int(result.rowcount or 0)
        except SQLAlchemyError as exc:
            raise CollaboratorUnavailable(str(exc)) from exc
