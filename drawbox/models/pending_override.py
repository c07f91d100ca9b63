"""Queued admin override values.

Queue order is primary key order: the lowest id is consumed next.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from drawbox.models.base import Base


class PendingOverrideRow(Base):
    __tablename__ = "pending_overrides"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    value: Mapped[int] = mapped_column(BigInteger, nullable=False)
