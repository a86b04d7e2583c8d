"""PixRequest: instant payments to or from accounts hosted in any Pix participant."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import Any

from starkinfra.utils import rest
from starkinfra.utils.checks import normalize_date, normalize_datetime
from starkinfra.utils.parse import parse_and_verify
from starkinfra.utils.resource import Resource, ResourceSpec


class PixRequest(Resource):
    """A Pix payment order.

    Constructing a PixRequest does not send it; ``create`` does and returns
    the server copies with ``id``, ``fee``, ``status``, ``flow``,
    ``sender_bank_code``, ``created`` and ``updated`` filled in.

    Amounts are integers in cents. ``end_to_end_id`` is the central bank's
    transaction id (see ``starkinfra.utils.bacen_id.end_to_end_id``).
    """

    def __init__(
        self,
        amount: int,
        external_id: str,
        sender_name: str,
        sender_tax_id: str,
        sender_branch_code: str,
        sender_account_number: str,
        sender_account_type: str,
        receiver_name: str,
        receiver_tax_id: str,
        receiver_bank_code: str,
        receiver_account_number: str,
        receiver_branch_code: str,
        receiver_account_type: str,
        end_to_end_id: str,
        cashier_type: str | None = None,
        cashier_bank_code: str | None = None,
        cash_amount: int | None = None,
        receiver_key_id: str | None = None,
        description: str | None = None,
        reconciliation_id: str | None = None,
        initiator_tax_id: str | None = None,
        tags: list[str] | None = None,
        method: str | None = None,
        id: str | None = None,
        fee: int | None = None,
        status: str | None = None,
        flow: str | None = None,
        sender_bank_code: str | None = None,
        created: Any = None,
        updated: Any = None,
    ) -> None:
        super().__init__(id)
        self.amount = amount
        self.external_id = external_id
        self.sender_name = sender_name
        self.sender_tax_id = sender_tax_id
        self.sender_branch_code = sender_branch_code
        self.sender_account_number = sender_account_number
        self.sender_account_type = sender_account_type
        self.receiver_name = receiver_name
        self.receiver_tax_id = receiver_tax_id
        self.receiver_bank_code = receiver_bank_code
        self.receiver_account_number = receiver_account_number
        self.receiver_branch_code = receiver_branch_code
        self.receiver_account_type = receiver_account_type
        self.end_to_end_id = end_to_end_id
        self.cashier_type = cashier_type
        self.cashier_bank_code = cashier_bank_code
        self.cash_amount = cash_amount
        self.receiver_key_id = receiver_key_id
        self.description = description
        self.reconciliation_id = reconciliation_id
        self.initiator_tax_id = initiator_tax_id
        self.tags = tags
        self.method = method
        self.fee = fee
        self.status = status
        self.flow = flow
        self.sender_bank_code = sender_bank_code
        self.created = normalize_datetime(created)
        self.updated = normalize_datetime(updated)


_FIELDS = (
    "amount",
    "external_id",
    "sender_name",
    "sender_tax_id",
    "sender_branch_code",
    "sender_account_number",
    "sender_account_type",
    "receiver_name",
    "receiver_tax_id",
    "receiver_bank_code",
    "receiver_account_number",
    "receiver_branch_code",
    "receiver_account_type",
    "end_to_end_id",
    "cashier_type",
    "cashier_bank_code",
    "cash_amount",
    "receiver_key_id",
    "description",
    "reconciliation_id",
    "initiator_tax_id",
    "tags",
    "method",
    "id",
    "fee",
    "status",
    "flow",
    "sender_bank_code",
    "created",
    "updated",
)


def _make(json: dict[str, Any]) -> PixRequest:
    return PixRequest(**{name: json.get(name) for name in _FIELDS})


_resource = ResourceSpec(name="PixRequest", maker=_make)


def create(requests: Iterable[PixRequest], user: Any = None) -> list[PixRequest]:
    return rest.create_many(_resource, entities=requests, user=user)


def get(id: str, user: Any = None) -> PixRequest:
    return rest.fetch_one(_resource, id=id, user=user)


def query(
    limit: int | None = None,
    after: Any = None,
    before: Any = None,
    status: str | list[str] | None = None,
    tags: list[str] | None = None,
    ids: list[str] | None = None,
    end_to_end_ids: list[str] | None = None,
    external_ids: list[str] | None = None,
    user: Any = None,
) -> Iterator[PixRequest]:
    """Lazily iterate over PixRequests; ``limit=None`` means every match."""
    return rest.list_stream(
        _resource,
        limit=limit,
        after=normalize_date(after),
        before=normalize_date(before),
        status=status,
        tags=tags,
        ids=ids,
        end_to_end_ids=end_to_end_ids,
        external_ids=external_ids,
        user=user,
    )


def page(
    cursor: str | None = None,
    limit: int | None = None,
    after: Any = None,
    before: Any = None,
    status: str | list[str] | None = None,
    tags: list[str] | None = None,
    ids: list[str] | None = None,
    end_to_end_ids: list[str] | None = None,
    external_ids: list[str] | None = None,
    user: Any = None,
) -> tuple[list[PixRequest], str | None]:
    """Return up to 100 PixRequests and the cursor of the next page."""
    return rest.list_page(
        _resource,
        cursor=cursor,
        limit=limit,
        after=normalize_date(after),
        before=normalize_date(before),
        status=status,
        tags=tags,
        ids=ids,
        end_to_end_ids=end_to_end_ids,
        external_ids=external_ids,
        user=user,
    )


def parse(content: str | bytes, signature: str, user: Any = None) -> PixRequest:
    """Verify and parse an inbound PixRequest authorization request.

    Raises ``InvalidSignatureError`` when ``signature`` (the
    ``Digital-Signature`` header) does not match the API public key.
    """
    request = parse_and_verify(content=content, signature=signature, resource=_resource, user=user)

    if request.fee is None:
        request.fee = 0
    if request.tags is None:
        request.tags = []
    if request.external_id is None:
        request.external_id = ""
    if request.description is None:
        request.description = ""

    return request


def response(status: str, reason: str | None = None) -> str:
    """Body to answer an authorization request with: ``approved`` or ``denied``."""
    authorization: dict[str, str] = {"status": status}
    if reason is not None:
        authorization["reason"] = reason
    return json.dumps({"authorization": authorization})
