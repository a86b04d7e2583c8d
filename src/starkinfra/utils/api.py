"""Translation between resource objects and the API's camelCase JSON."""

from __future__ import annotations

import enum
import re
from datetime import date, datetime
from typing import Any, TypeVar

from starkinfra.utils.case import camel_to_kebab, camel_to_snake, kebab_to_camel, snake_to_camel
from starkinfra.utils.resource import ResourceSpec, SubResource

T = TypeVar("T")

_NESTED_SUFFIX = re.compile(r"-(log|attempt)$")


def endpoint(resource_name: str) -> str:
    """``PixRequest`` -> ``pix-request``; ``PixRequestLog`` -> ``pix-request/log``."""
    return _NESTED_SUFFIX.sub(r"/\1", camel_to_kebab(resource_name))


def _pluralize(word: str) -> str:
    if word.endswith("s"):
        return word
    if word.endswith("ey"):
        return word + "s"
    if word.endswith("y"):
        return word[:-1] + "ies"
    return word + "s"


def last_name(resource: ResourceSpec[Any] | str) -> str:
    if isinstance(resource, ResourceSpec):
        if resource.key:
            return resource.key
        resource = resource.name
    return kebab_to_camel(camel_to_kebab(resource).split("-")[-1])


def last_name_plural(resource: ResourceSpec[Any] | str) -> str:
    if isinstance(resource, ResourceSpec) and resource.plural_key:
        return resource.plural_key
    return _pluralize(last_name(resource))


def _cast_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, SubResource):
        return api_json(value)
    if isinstance(value, dict):
        return cast_json_to_api_format(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_cast_value(item) for item in value]
    return value


def cast_json_to_api_format(json: dict[str, Any]) -> dict[str, Any]:
    """camelCase the keys, drop ``None`` values and render nested values."""
    return {
        snake_to_camel(str(key)): _cast_value(value)
        for key, value in json.items()
        if value is not None
    }


def api_json(entity: Any) -> dict[str, Any]:
    if isinstance(entity, dict):
        return cast_json_to_api_format(entity)
    attributes = {
        key: value for key, value in vars(entity).items() if not key.startswith("_")
    }
    return cast_json_to_api_format(attributes)


def from_api_json(resource: ResourceSpec[T], json: dict[str, Any]) -> T:
    """Snake-case the top-level keys of ``json`` and build the resource."""
    snakes = {camel_to_snake(key): value for key, value in json.items()}
    return resource.maker(snakes)
