from starkinfra.event import attempt
from starkinfra.event.attempt import Attempt
from starkinfra.event.event import Event, delete, get, page, parse, query, update

__all__ = [
    "Attempt",
    "Event",
    "attempt",
    "delete",
    "get",
    "page",
    "parse",
    "query",
    "update",
]
