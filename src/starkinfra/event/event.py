"""Webhook Events: notifications about changes on subscribed entities."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from starkinfra.pixrequest.log import _resource as _pix_request_log
from starkinfra.utils import rest
from starkinfra.utils.api import from_api_json
from starkinfra.utils.checks import normalize_date, normalize_datetime
from starkinfra.utils.parse import parse_and_verify
from starkinfra.utils.resource import Resource, ResourceSpec

# subscription -> resource of the Log carried by the event
LOG_RESOURCES: dict[str, ResourceSpec[Any]] = {
    "pix-request.in": _pix_request_log,
    "pix-request.out": _pix_request_log,
}


def parse_log(subscription: str | None, log: Any) -> Any:
    """Build the typed Log for known subscriptions; other logs stay plain dicts."""
    resource = LOG_RESOURCES.get(subscription or "")
    if resource is None or log is None:
        return log
    return from_api_json(resource, log)


class Event(Resource):
    """A notification generated by the API; events are never created by the client.

    ``log`` is a typed Log (ex: ``starkinfra.pixrequest.Log``) for the
    subscriptions in ``LOG_RESOURCES`` and the raw JSON dict otherwise.
    """

    def __init__(
        self,
        id: str,
        log: Any,
        created: Any,
        is_delivered: bool,
        subscription: str,
        workspace_id: str | None = None,
    ) -> None:
        super().__init__(id)
        self.log = parse_log(subscription, log)
        self.created = normalize_datetime(created)
        self.is_delivered = is_delivered
        self.subscription = subscription
        self.workspace_id = workspace_id


def _make(json: dict[str, Any]) -> Event:
    return Event(
        id=json.get("id"),
        log=json.get("log"),
        created=json.get("created"),
        is_delivered=json.get("is_delivered"),
        subscription=json.get("subscription"),
        workspace_id=json.get("workspace_id"),
    )


_resource = ResourceSpec(name="Event", maker=_make)


def get(id: str, user: Any = None) -> Event:
    return rest.fetch_one(_resource, id=id, user=user)


def query(
    limit: int | None = None,
    after: Any = None,
    before: Any = None,
    is_delivered: bool | None = None,
    user: Any = None,
) -> Iterator[Event]:
    return rest.list_stream(
        _resource,
        limit=limit,
        after=normalize_date(after),
        before=normalize_date(before),
        is_delivered=is_delivered,
        user=user,
    )


def page(
    cursor: str | None = None,
    limit: int | None = None,
    after: Any = None,
    before: Any = None,
    is_delivered: bool | None = None,
    user: Any = None,
) -> tuple[list[Event], str | None]:
    return rest.list_page(
        _resource,
        cursor=cursor,
        limit=limit,
        after=normalize_date(after),
        before=normalize_date(before),
        is_delivered=is_delivered,
        user=user,
    )


def update(id: str, is_delivered: bool, user: Any = None) -> Event:
    """Mark an event as delivered so ``is_delivered=False`` queries skip it."""
    return rest.update(_resource, id=id, is_delivered=is_delivered, user=user)


def delete(id: str, user: Any = None) -> Event:
    return rest.delete(_resource, id=id, user=user)


def parse(content: str | bytes, signature: str, user: Any = None) -> Event:
    """Verify and parse an Event delivered to a webhook endpoint.

    ``signature`` is the ``Digital-Signature`` header of the delivery.
    """
    return parse_and_verify(
        content=content,
        signature=signature,
        resource=_resource,
        user=user,
        key="event",
    )
