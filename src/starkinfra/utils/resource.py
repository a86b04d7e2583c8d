"""Base types shared by every API resource."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from starkinfra.utils.serialization import json_default

T = TypeVar("T")


class SubResource:
    """Plain value object with a readable ``repr`` and JSON ``str``."""

    def _public_attributes(self) -> dict[str, Any]:
        return {key: value for key, value in vars(self).items() if not key.startswith("_")}

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self._public_attributes().items())
        return f"{type(self).__name__}({fields})"

    def __str__(self) -> str:
        body = json.dumps(
            self._public_attributes(),
            default=json_default,
            indent=4,
            ensure_ascii=False,
        )
        return f"{type(self).__name__}({body})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._public_attributes() == other._public_attributes()

    __hash__ = None  # type: ignore[assignment]


class Resource(SubResource):
    """An API entity; ``id`` stays ``None`` until the API has created it."""

    def __init__(self, id: str | None = None) -> None:
        self.id = id


@dataclass(frozen=True)
class ResourceSpec(Generic[T]):
    """Everything the generic REST layer needs to know about a resource.

    ``maker`` receives the snake_cased JSON object and returns the resource.
    ``key``/``plural_key`` override the envelope keys derived from ``name``.
    """

    name: str
    maker: Callable[[dict[str, Any]], T]
    key: str | None = None
    plural_key: str | None = None
