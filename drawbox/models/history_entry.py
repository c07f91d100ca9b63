"""Persistent draw history log."""

from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from drawbox.models.base import Base


class HistoryEntryRow(Base):
    """One completed draw. Rows are only ever appended."""

    __tablename__ = "history_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    actor: Mapped[str] = mapped_column(String(16), nullable=False)
    timestamp: Mapped[str] = mapped_column(String(40), nullable=False)  # ISO-8601
