"""Python SDK for the Stark Infra API.

Set a default credential once at startup::

    import starkinfra

    starkinfra.set_user(starkinfra.Project(environment="sandbox", id="...", private_key=pem))
    for request in starkinfra.pixrequest.query(limit=10):
        print(request.id)
"""

from starkinfra import error, event, key, pixbalance, pixrequest, request, webhook
from starkinfra.config import SDK_VERSION
from starkinfra.defaults import get_language, get_user, set_language, set_user
from starkinfra.environment import Environment
from starkinfra.logging_utils import configure_logging, get_logger
from starkinfra.user import Organization, Project, User
from starkinfra.utils.bacen_id import end_to_end_id, return_id

__version__ = SDK_VERSION

__all__ = [
    "Environment",
    "Organization",
    "Project",
    "User",
    "configure_logging",
    "end_to_end_id",
    "error",
    "event",
    "get_language",
    "get_logger",
    "get_user",
    "key",
    "pixbalance",
    "pixrequest",
    "request",
    "return_id",
    "set_language",
    "set_user",
    "webhook",
]
