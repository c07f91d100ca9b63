"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: config keys applied on top of the APP_ENV config.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from drawbox.config import get_config
    from drawbox.db import init_db
    from drawbox.error_handlers import register_error_handlers
    from drawbox.extensions import init_services
    from drawbox.logging_config import configure_logging
    from drawbox.routes.admin import admin_bp
    from drawbox.routes.draw import draw_bp
    from drawbox.routes.health import health_bp
    from drawbox.routes.history import history_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    session_factory = init_db(app)
    init_services(app, session_factory)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(draw_bp)
    app.register_blueprint(history_bp)
    app.register_blueprint(admin_bp)

    return app
