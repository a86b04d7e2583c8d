from starkinfra.pixrequest import log
from starkinfra.pixrequest.log import Log
from starkinfra.pixrequest.pixrequest import (
    PixRequest,
    create,
    get,
    page,
    parse,
    query,
    response,
)

__all__ = [
    "Log",
    "PixRequest",
    "create",
    "get",
    "log",
    "page",
    "parse",
    "query",
    "response",
]
