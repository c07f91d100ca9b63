"""History routes."""

from __future__ import annotations

from flask import Blueprint

from drawbox.extensions import get_draw_service
from drawbox.schemas.draw import HistoryEntrySchema
from drawbox.utils.responses import ok

history_bp = Blueprint("history", __name__, url_prefix="/api")

_schema = HistoryEntrySchema(many=True)


@history_bp.get("/history")
def list_history():
    """Most recent draws, newest first."""

    return ok(_schema.dump(get_draw_service().history()))
