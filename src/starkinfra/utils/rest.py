"""Generic REST verbs shared by every resource.

Each verb is parameterized only by a ``ResourceSpec`` (name and JSON maker)
and the caller's query; no resource-specific logic lives here.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from starkinfra.utils import pagination
from starkinfra.utils.api import (
    api_json,
    cast_json_to_api_format,
    endpoint,
    from_api_json,
    last_name,
    last_name_plural,
)
from starkinfra.utils.http import join_path
from starkinfra.utils.request import Response, fetch
from starkinfra.utils.resource import ResourceSpec

T = TypeVar("T")
S = TypeVar("S")


def list_page(
    resource: ResourceSpec[T],
    cursor: str | None = None,
    limit: int | None = None,
    user: Any = None,
    **query: Any,
) -> tuple[list[T], str | None]:
    """Fetch exactly one page; an empty cursor means the first page."""
    params = dict(query)
    params["cursor"] = cursor or None
    params["limit"] = pagination.cap_page_limit(limit)
    json = fetch(
        method="GET",
        path=endpoint(resource.name),
        query=params,
        user=user,
    ).json()
    entities = [from_api_json(resource, item) for item in json[last_name_plural(resource)]]
    return entities, json.get("cursor") or None


def list_stream(
    resource: ResourceSpec[T],
    limit: int | None = None,
    user: Any = None,
    **query: Any,
) -> Iterator[T]:
    """Lazily iterate over every matching entity, at most ``limit`` pages worth."""

    def fetch_page(cursor: str | None, size: int) -> tuple[list[T], str | None]:
        return list_page(resource, cursor=cursor, limit=size, user=user, **query)

    return pagination.stream(fetch_page, limit)


def fetch_one(resource: ResourceSpec[T], id: str, user: Any = None, **query: Any) -> T:
    json = fetch(
        method="GET",
        path=join_path(endpoint(resource.name), id),
        query=query,
        user=user,
    ).json()
    return from_api_json(resource, json[last_name(resource)])


def get_content(
    resource: ResourceSpec[Any],
    id: str,
    sub_resource_name: str,
    user: Any = None,
    **query: Any,
) -> bytes:
    """Raw bytes of ``{endpoint}/{id}/{sub_resource_name}`` (PDFs, QR codes)."""
    return fetch(
        method="GET",
        path=join_path(endpoint(resource.name), id, sub_resource_name),
        query=query,
        user=user,
    ).content


def get_sub_resource(
    resource: ResourceSpec[Any],
    id: str,
    sub_resource: ResourceSpec[S],
    user: Any = None,
    **query: Any,
) -> S:
    json = fetch(
        method="GET",
        path=join_path(endpoint(resource.name), id, endpoint(sub_resource.name)),
        query=query,
        user=user,
    ).json()
    return from_api_json(sub_resource, json[last_name(sub_resource)])


def create_many(
    resource: ResourceSpec[T],
    entities: Iterable[Any],
    user: Any = None,
    **query: Any,
) -> list[T]:
    """Create entities in one call; the result follows the server's order."""
    plural = last_name_plural(resource)
    payload = {plural: [api_json(entity) for entity in entities]}
    json = fetch(
        method="POST",
        path=endpoint(resource.name),
        payload=payload,
        query=query,
        user=user,
    ).json()
    return [from_api_json(resource, item) for item in json[plural]]


def create_one(resource: ResourceSpec[T], entity: Any, user: Any = None, **query: Any) -> T:
    json = fetch(
        method="POST",
        path=endpoint(resource.name),
        payload=api_json(entity),
        query=query,
        user=user,
    ).json()
    return from_api_json(resource, json[last_name(resource)])


def update(resource: ResourceSpec[T], id: str, user: Any = None, **fields: Any) -> T:
    """PATCH only the fields that are not ``None``."""
    json = fetch(
        method="PATCH",
        path=join_path(endpoint(resource.name), id),
        payload=cast_json_to_api_format(fields),
        user=user,
    ).json()
    return from_api_json(resource, json[last_name(resource)])


def delete(resource: ResourceSpec[T], id: str, user: Any = None, **query: Any) -> T:
    """Delete or cancel an entity and return its final server state."""
    json = fetch(
        method="DELETE",
        path=join_path(endpoint(resource.name), id),
        query=query,
        user=user,
    ).json()
    return from_api_json(resource, json[last_name(resource)])


def get_raw(
    path: str,
    query: dict[str, Any] | None = None,
    user: Any = None,
    raise_exception: bool = True,
) -> Response:
    return fetch(method="GET", path=path, query=query, user=user, raise_exception=raise_exception)


def post_raw(
    path: str,
    payload: Any,
    query: dict[str, Any] | None = None,
    user: Any = None,
    raise_exception: bool = True,
) -> Response:
    return fetch(
        method="POST",
        path=path,
        payload=payload,
        query=query,
        user=user,
        raise_exception=raise_exception,
    )


def patch_raw(
    path: str,
    payload: Any,
    query: dict[str, Any] | None = None,
    user: Any = None,
    raise_exception: bool = True,
) -> Response:
    return fetch(
        method="PATCH",
        path=path,
        payload=payload,
        query=query,
        user=user,
        raise_exception=raise_exception,
    )


def put_raw(
    path: str,
    payload: Any,
    query: dict[str, Any] | None = None,
    user: Any = None,
    raise_exception: bool = True,
) -> Response:
    return fetch(
        method="PUT",
        path=path,
        payload=payload,
        query=query,
        user=user,
        raise_exception=raise_exception,
    )


def delete_raw(
    path: str,
    query: dict[str, Any] | None = None,
    user: Any = None,
    raise_exception: bool = True,
) -> Response:
    return fetch(
        method="DELETE", path=path, query=query, user=user, raise_exception=raise_exception
    )
