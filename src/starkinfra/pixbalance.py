"""PixBalance: current balance of the Workspace, never created by the user."""

from __future__ import annotations

from typing import Any

from starkinfra.utils import rest
from starkinfra.utils.checks import normalize_datetime
from starkinfra.utils.resource import Resource, ResourceSpec


class PixBalance(Resource):
    def __init__(
        self,
        id: str | None = None,
        amount: int | None = None,
        currency: str | None = None,
        updated: Any = None,
    ) -> None:
        super().__init__(id)
        self.amount = amount
        self.currency = currency
        self.updated = normalize_datetime(updated)


def _make(json: dict[str, Any]) -> PixBalance:
    return PixBalance(
        id=json.get("id"),
        amount=json.get("amount"),
        currency=json.get("currency"),
        updated=json.get("updated"),
    )


_resource = ResourceSpec(name="PixBalance", maker=_make)


def get(user: Any = None) -> PixBalance:
    return next(rest.list_stream(_resource, user=user))
