"""Event.Attempt: one failed delivery of an Event to a Webhook endpoint."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from starkinfra.utils import rest
from starkinfra.utils.checks import normalize_date, normalize_datetime
from starkinfra.utils.resource import Resource, ResourceSpec


class Attempt(Resource):
    def __init__(
        self,
        id: str,
        code: str,
        message: str,
        event_id: str,
        webhook_id: str,
        created: Any,
    ) -> None:
        super().__init__(id)
        self.code = code
        self.message = message
        self.event_id = event_id
        self.webhook_id = webhook_id
        self.created = normalize_datetime(created)


def _make(json: dict[str, Any]) -> Attempt:
    return Attempt(
        id=json.get("id"),
        code=json.get("code"),
        message=json.get("message"),
        event_id=json.get("event_id"),
        webhook_id=json.get("webhook_id"),
        created=json.get("created"),
    )


_resource = ResourceSpec(name="EventAttempt", maker=_make)


def get(id: str, user: Any = None) -> Attempt:
    return rest.fetch_one(_resource, id=id, user=user)


def query(
    limit: int | None = None,
    after: Any = None,
    before: Any = None,
    event_ids: list[str] | None = None,
    webhook_ids: list[str] | None = None,
    user: Any = None,
) -> Iterator[Attempt]:
    return rest.list_stream(
        _resource,
        limit=limit,
        after=normalize_date(after),
        before=normalize_date(before),
        event_ids=event_ids,
        webhook_ids=webhook_ids,
        user=user,
    )


def page(
    cursor: str | None = None,
    limit: int | None = None,
    after: Any = None,
    before: Any = None,
    event_ids: list[str] | None = None,
    webhook_ids: list[str] | None = None,
    user: Any = None,
) -> tuple[list[Attempt], str | None]:
    return rest.list_page(
        _resource,
        cursor=cursor,
        limit=limit,
        after=normalize_date(after),
        before=normalize_date(before),
        event_ids=event_ids,
        webhook_ids=webhook_ids,
        user=user,
    )
