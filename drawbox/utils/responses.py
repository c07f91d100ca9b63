"""Helpers for consistent JSON and event-stream responses."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from flask import Response, jsonify, stream_with_context


def ok(data: Any, status_code: int = 200) -> Response:
    """Success response."""

    return jsonify({"success": True, "data": data, "error": None}), status_code


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> Response:
    """Error response."""

    return (
        jsonify(
            {
                "success": False,
                "data": None,
                "error": {"code": code, "message": message, "details": details},
            }
        ),
        status_code,
    )


def event_stream(chunks: Iterable[str], on_close: Callable[[], None] | None = None) -> Response:
    """Server-sent events response.

    ``on_close`` runs when the server is done with the response, including
    when the client disconnects before the first chunk is produced.
    """

    response = Response(stream_with_context(chunks), mimetype="text/event-stream")
    response.headers["Cache-Control"] = "no-cache"
    response.headers["X-Accel-Buffering"] = "no"
    if on_close is not None:
        response.call_on_close(on_close)
    return response
