"""Direct access to any API route, for endpoints without a dedicated resource.

These calls are still signed, but the response is returned as-is: non-200
statuses do not raise, so check ``Response.status`` before using ``json()``.
"""

from __future__ import annotations

from typing import Any

from starkinfra.utils import rest
from starkinfra.utils.request import Response


def get(path: str, query: dict[str, Any] | None = None, user: Any = None) -> Response:
    return rest.get_raw(path=path, query=query, user=user, raise_exception=False)


def post(
    path: str,
    body: Any,
    query: dict[str, Any] | None = None,
    user: Any = None,
) -> Response:
    return rest.post_raw(path=path, payload=body, query=query, user=user, raise_exception=False)


def patch(
    path: str,
    body: Any,
    query: dict[str, Any] | None = None,
    user: Any = None,
) -> Response:
    return rest.patch_raw(path=path, payload=body, query=query, user=user, raise_exception=False)


def put(
    path: str,
    body: Any,
    query: dict[str, Any] | None = None,
    user: Any = None,
) -> Response:
    return rest.put_raw(path=path, payload=body, query=query, user=user, raise_exception=False)


def delete(path: str, query: dict[str, Any] | None = None, user: Any = None) -> Response:
    return rest.delete_raw(path=path, query=query, user=user, raise_exception=False)
