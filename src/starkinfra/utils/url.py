from __future__ import annotations

from datetime import date, datetime
from typing import Any
from urllib.parse import urlencode as _urlencode

from starkinfra.utils.case import snake_to_camel


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_render(item) for item in value)
    return str(value)


def urlencode(query: dict[str, Any] | None) -> str:
    """Render query params as ``?a=1&b=2``; ``None`` values are omitted."""
    if not query:
        return ""
    params = {
        snake_to_camel(str(key)): _render(value)
        for key, value in query.items()
        if value is not None
    }
    if not params:
        return ""
    return "?" + _urlencode(params)
