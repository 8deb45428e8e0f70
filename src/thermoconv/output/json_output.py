"""JSON envelopes for non-interactive output.

Every payload is wrapped as::

    {"ok": true,  "command": "convert", "data": {...},  "timestamp": "..."}
    {"ok": false, "command": "convert", "error": {...}, "timestamp": "..."}
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel


def _serialize(obj: Any) -> Any:
    """Convert *obj* to a JSON-friendly structure.

    Pydantic models are dumped in JSON mode so units and timestamps come out
    as strings. Containers are walked recursively; anything else is left for
    ``json.dumps(default=str)``.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", exclude_none=True)
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {key: _serialize(value) for key, value in obj.items()}
    return obj


def _envelope(*, ok: bool, command: str, **body: Any) -> str:
    payload: dict[str, Any] = {
        "ok": ok,
        "command": command,
        **body,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return json.dumps(payload, indent=2, default=str, ensure_ascii=False)


def format_json_response(*, data: Any, command: str) -> str:
    """Return the success envelope for *data*."""
    return _envelope(ok=True, command=command, data=_serialize(data))


def format_json_error(
    *,
    code: str,
    message: str,
    command: str,
    **extra: Any,
) -> str:
    """Return the error envelope; *extra* keys are merged into ``error``."""
    return _envelope(
        ok=False,
        command=command,
        error={"code": code, "message": message, **extra},
    )
