"""Per-app service wiring.

Services (and the state they own: pending overrides, history, reveal
schedulers) hang off ``app.extensions`` so every app instance starts clean.
"""

from __future__ import annotations

import random

from flask import Flask, current_app
from sqlalchemy.orm import Session, sessionmaker

from drawbox.repositories.admin_session_repository import AdminSessionRepository
from drawbox.repositories.history_repository import HistoryRepository
from drawbox.repositories.override_repository import OverrideRepository
from drawbox.services.admin_service import AdminService
from drawbox.services.draw_service import DrawService
from drawbox.services.reveal_scheduler import NullTicker, SleepTicker


def init_services(app: Flask, session_factory: sessionmaker[Session]) -> None:
    interval_ms = int(app.config.get("REVEAL_INTERVAL_MS", 50))
    seed = app.config.get("RANDOM_SEED")

    draw_service = DrawService(
        OverrideRepository(session_factory),
        HistoryRepository(session_factory),
        capacity=int(app.config.get("HISTORY_CAPACITY", 10)),
        max_count=int(app.config.get("MAX_COUNT", 50)),
        frames=int(app.config.get("REVEAL_FRAMES", 15)),
        interval=interval_ms / 1000.0,
        ticker=SleepTicker() if interval_ms > 0 else NullTicker(),
        rng=random.Random(seed) if seed is not None else None,
    )
    draw_service.hydrate()

    admin_service = AdminService(
        AdminSessionRepository(session_factory),
        username=str(app.config.get("ADMIN_USERNAME", "admin")),
        password=str(app.config.get("ADMIN_PASSWORD", "")),
        ttl_seconds=int(app.config.get("ADMIN_SESSION_TTL", 24 * 60 * 60)),
    )

    app.extensions["draw_service"] = draw_service
    app.extensions["admin_service"] = admin_service


def get_draw_service() -> DrawService:
    return current_app.extensions["draw_service"]


def get_admin_service() -> AdminService:
    return current_app.extensions["admin_service"]
