"""SQLAlchemy engine + session factory.

Repositories open their own short transactions from the factory so a draw
can commit its override consumption independently of its history write.
"""

from __future__ import annotations

from flask import Flask
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from drawbox import models  # noqa: F401  (registers tables)
from drawbox.models.base import Base


def create_app_engine(database_url: str) -> Engine:
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        connect_args = {"check_same_thread": False}
        if not url.database or url.database == ":memory:":
            # One connection shared by every thread, or each would see an empty DB.
            return create_engine(
                database_url,
                connect_args=connect_args,
                poolclass=StaticPool,
                future=True,
            )
        return create_engine(database_url, connect_args=connect_args, future=True)

    return create_engine(database_url, pool_pre_ping=True, future=True)


def init_db(app: Flask) -> sessionmaker[Session]:
    """Initialize the engine, create tables and return the session factory."""

    engine = create_app_engine(str(app.config["DATABASE_URL"]))
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    # Create tables (production would use migrations).
    Base.metadata.create_all(bind=engine)

    app.extensions["engine"] = engine
    app.extensions["session_factory"] = session_factory
    return session_factory

