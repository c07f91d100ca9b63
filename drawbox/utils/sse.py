"""Server-sent event framing."""

from __future__ import annotations

import json
from typing import Any


def sse_format(event: str, data: dict[str, Any]) -> str:
    return f"event: {event}\n" f"data: {json.dumps(data, ensure_ascii=False)}\n\n"
