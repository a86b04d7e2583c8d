"""PixRequest.Log: every status change of a PixRequest is recorded as a Log."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from starkinfra.pixrequest.pixrequest import PixRequest
from starkinfra.pixrequest.pixrequest import _resource as _request_resource
from starkinfra.utils import rest
from starkinfra.utils.api import from_api_json
from starkinfra.utils.checks import normalize_date, normalize_datetime
from starkinfra.utils.resource import Resource, ResourceSpec


class Log(Resource):
    """Read-only audit record; ``type`` names the event, ex: ``created`` or ``success``."""

    def __init__(
        self,
        id: str,
        created: Any,
        type: str,
        errors: list[str],
        request: PixRequest,
    ) -> None:
        super().__init__(id)
        self.created = normalize_datetime(created)
        self.type = type
        self.errors = errors
        self.request = request


def _make(json: dict[str, Any]) -> Log:
    return Log(
        id=json.get("id"),
        created=json.get("created"),
        type=json.get("type"),
        errors=json.get("errors"),
        request=from_api_json(_request_resource, json["request"]),
    )


_resource = ResourceSpec(name="PixRequestLog", maker=_make)


def get(id: str, user: Any = None) -> Log:
    return rest.fetch_one(_resource, id=id, user=user)


def query(
    limit: int | None = None,
    after: Any = None,
    before: Any = None,
    types: list[str] | None = None,
    request_ids: list[str] | None = None,
    reconciliation_id: str | None = None,
    user: Any = None,
) -> Iterator[Log]:
    return rest.list_stream(
        _resource,
        limit=limit,
        after=normalize_date(after),
        before=normalize_date(before),
        types=types,
        request_ids=request_ids,
        reconciliation_id=reconciliation_id,
        user=user,
    )


def page(
    cursor: str | None = None,
    limit: int | None = None,
    after: Any = None,
    before: Any = None,
    types: list[str] | None = None,
    request_ids: list[str] | None = None,
    reconciliation_id: str | None = None,
    user: Any = None,
) -> tuple[list[Log], str | None]:
    return rest.list_page(
        _resource,
        cursor=cursor,
        limit=limit,
        after=normalize_date(after),
        before=normalize_date(before),
        types=types,
        request_ids=request_ids,
        reconciliation_id=reconciliation_id,
        user=user,
    )
