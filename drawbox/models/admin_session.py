"""Issued admin bearer tokens."""

from __future__ import annotations

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from drawbox.models.base import Base


class AdminSession(Base):
    __tablename__ = "admin_sessions"

    token: Mapped[str] = mapped_column(String(128), primary_key=True)
    username: Mapped[str] = mapped_column(String(200), nullable=False)
    expires_at: Mapped[float] = mapped_column(Float, nullable=False)  # unix seconds
