from __future__ import annotations

import base64
from typing import Any, Dict, Mapping, Optional

from flask import request


def json_payload() -> Dict[str, Any]:
    """Request body as a dict; anything that is not a JSON object reads as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def text(payload: Mapping[str, Any], key: str) -> str:
    return str(payload.get(key)).strip()


def optional_text(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def optional_image(payload: Mapping[str, Any], key: str) -> Optional[bytes]:
    """Decode an optional base64 field (already validated) into raw bytes."""
    value = payload.get(key)
    if not value:
        return None
    return base64.b64decode(value)
