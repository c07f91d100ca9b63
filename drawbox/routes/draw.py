"""Draw routes (controllers). No business logic here."""

from __future__ import annotations

import uuid

from flask import Blueprint, request, session

from drawbox.errors import ConflictError
from drawbox.extensions import get_admin_service, get_draw_service
from drawbox.schemas.draw import (
    DrawQuerySchema,
    DrawRequestSchema,
    DrawResponseSchema,
    RevealEventSchema,
)
from drawbox.services.reveal_scheduler import RevealEventKind
from drawbox.utils.auth import bearer_token
from drawbox.utils.responses import event_stream, ok
from drawbox.utils.sse import sse_format

draw_bp = Blueprint("draw", __name__, url_prefix="/api")

_request_schema = DrawRequestSchema()
_query_schema = DrawQuerySchema()
_response_schema = DrawResponseSchema()
_event_schema = RevealEventSchema()


def _client_id() -> str:
    client_id = session.get("client_id")
    if not client_id:
        client_id = uuid.uuid4().hex
        session["client_id"] = client_id
    return str(client_id)


def _in_progress() -> ConflictError:
    return ConflictError(message="A draw is already in progress", code="draw_in_progress")


@draw_bp.get("/active")
def active_value():
    """Head of the pending override queue, or null."""

    return ok({"value": get_draw_service().active_value()})


@draw_bp.post("/generate")
def generate_numbers():
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)
    is_admin = get_admin_service().is_admin(bearer_token())

    outcome = get_draw_service().draw(
        data["min_value"],
        data["max_value"],
        data["count"],
        data["unique"],
        is_admin=is_admin,
        client_id=_client_id(),
    )
    if outcome is None:
        raise _in_progress()

    body = {
        "values": list(outcome.result.values),
        "timestamp": outcome.result.timestamp,
        "frames": [list(f) for f in outcome.frames],
    }
    if is_admin:
        body["source"] = outcome.result.source
    return ok(_response_schema.dump(body))


@draw_bp.get("/generate/stream")
def stream_numbers():
    """Reveal a draw as server-sent events: ``frame`` events, then ``settled``."""

    data = _query_schema.load(request.args)
    is_admin = get_admin_service().is_admin(bearer_token())

    run = get_draw_service().stream(
        data["min_value"],
        data["max_value"],
        data["count"],
        data["unique"],
        is_admin=is_admin,
        client_id=_client_id(),
    )
    if run is None:
        raise _in_progress()

    def events():
        try:
            for event in run:
                payload = _event_schema.dump(event)
                if event.kind is RevealEventKind.SETTLED and event.result is not None:
                    payload["timestamp"] = event.result.timestamp.isoformat()
                    if is_admin:
                        payload["source"] = event.result.source.value
                yield sse_format(event.kind.value, payload)
        finally:
            run.close()

    return event_stream(events(), on_close=run.close)
