"""Admin routes: login/logout and pending override management."""

from __future__ import annotations

from flask import Blueprint, request

from drawbox.extensions import get_admin_service, get_draw_service
from drawbox.schemas.admin import LoginSchema, OverrideRequestSchema
from drawbox.utils.auth import bearer_token
from drawbox.utils.responses import ok

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")

_login_schema = LoginSchema()
_override_schema = OverrideRequestSchema()


@admin_bp.post("/login")
def login():
    payload = request.get_json(silent=True) or {}
    data = _login_schema.load(payload)
    token = get_admin_service().login(data["username"], data["password"])
    return ok({"token": token, "authenticated": True})


@admin_bp.post("/logout")
def logout():
    get_admin_service().logout(bearer_token())
    return ok({"authenticated": False})


@admin_bp.get("/check")
def check():
    return ok({"authenticated": get_admin_service().is_admin(bearer_token())})


@admin_bp.get("/active")
def get_active():
    get_admin_service().require_admin(bearer_token())
    return ok({"values": get_draw_service().pending_overrides()})


@admin_bp.post("/active")
def set_active():
    # Check the credential before touching the payload or the queue.
    get_admin_service().require_admin(bearer_token())

    payload = request.get_json(silent=True) or {}
    data = _override_schema.load(payload)
    values = data["values"] if data.get("values") is not None else [data["value"]]

    queued = get_draw_service().set_override(values)
    return ok({"value": queued[0], "values": queued})


@admin_bp.delete("/active")
def clear_active():
    get_admin_service().require_admin(bearer_token())
    get_draw_service().clear_override()
    return ok({"value": None, "values": []})
