from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any

from flask.json.provider import DefaultJSONProvider

from ..database.mysql_base import normalize_mysql_time


def _api_default(o: Any) -> Any:
    # datetime must be checked before date (subclass).
    if isinstance(o, datetime):
        return o.isoformat()
    if isinstance(o, date):
        return o.isoformat()
    if isinstance(o, time):
        return o.strftime("%H:%M:%S")
    if isinstance(o, timedelta):
        return normalize_mysql_time(o).strftime("%H:%M:%S")
    if isinstance(o, Decimal):
        return float(o)
    if isinstance(o, (bytes, bytearray, memoryview)):
        # Stored binary is returned as raw byte values; clients re-encode for display.
        return list(bytes(o))
    return DefaultJSONProvider.default(o)


class ApiJSONProvider(DefaultJSONProvider):
    """JSON provider that renders MySQL column types the way API clients expect."""

    sort_keys = False
    default = staticmethod(_api_default)
