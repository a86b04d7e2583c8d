"""Webhook subscriptions: where the API delivers notification Events."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from starkinfra.utils import rest
from starkinfra.utils.resource import Resource, ResourceSpec


class Webhook(Resource):
    """``subscriptions`` lists services such as ``pix-request.in`` or ``pix-key``."""

    def __init__(self, url: str, subscriptions: list[str], id: str | None = None) -> None:
        super().__init__(id)
        self.url = url
        self.subscriptions = subscriptions


def _make(json: dict[str, Any]) -> Webhook:
    return Webhook(
        id=json.get("id"),
        url=json.get("url"),
        subscriptions=json.get("subscriptions"),
    )


_resource = ResourceSpec(name="Webhook", maker=_make)


def create(url: str, subscriptions: list[str], user: Any = None) -> Webhook:
    return rest.create_one(
        _resource,
        entity=Webhook(url=url, subscriptions=subscriptions),
        user=user,
    )


def get(id: str, user: Any = None) -> Webhook:
    return rest.fetch_one(_resource, id=id, user=user)


def query(limit: int | None = None, user: Any = None) -> Iterator[Webhook]:
    return rest.list_stream(_resource, limit=limit, user=user)


def page(
    cursor: str | None = None,
    limit: int | None = None,
    user: Any = None,
) -> tuple[list[Webhook], str | None]:
    return rest.list_page(_resource, cursor=cursor, limit=limit, user=user)


def delete(id: str, user: Any = None) -> Webhook:
    return rest.delete(_resource, id=id, user=user)
