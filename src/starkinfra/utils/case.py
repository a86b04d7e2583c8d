from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_to_camel(value: str) -> str:
    head, *tail = value.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)


def camel_to_snake(value: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", value).lower()


def camel_to_kebab(value: str) -> str:
    return _CAMEL_BOUNDARY.sub("-", value).lower()


def kebab_to_camel(value: str) -> str:
    return snake_to_camel(value.replace("-", "_"))
