"""Single signed HTTP exchange with the Stark Infra API."""

from __future__ import annotations

import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any

import httpx

from starkinfra.config import Settings, load_settings
from starkinfra.error import (
    InputErrors,
    InternalServerError,
    UnknownError,
    ValidationError,
)
from starkinfra.utils.checks import resolve_user, validate_language
from starkinfra.utils.http import join_path
from starkinfra.utils.url import urlencode

logger = logging.getLogger(__name__)

METHODS = frozenset({"GET", "POST", "PATCH", "PUT", "DELETE"})
_BODYLESS_METHODS = frozenset({"GET", "DELETE"})

_HTTP_CLIENT: httpx.Client | None = None
_HTTP_CLIENT_LOCK = threading.Lock()


@dataclass(frozen=True)
class Response:
    """Status code and raw body of one API call.

    ``json()`` parses on demand; check ``status`` before trusting it.
    """

    status: int
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def json(self) -> Any:
        return json.loads(self.content)


def _get_client() -> httpx.Client:
    global _HTTP_CLIENT
    if _HTTP_CLIENT is not None:
        return _HTTP_CLIENT

    with _HTTP_CLIENT_LOCK:
        if _HTTP_CLIENT is None:
            settings = load_settings()
            _HTTP_CLIENT = httpx.Client(timeout=settings.http.timeout_seconds)
            logger.debug(
                "HTTP client initialized (timeout=%ss)", settings.http.timeout_seconds
            )
        return _HTTP_CLIENT


def base_url(environment: str, settings: Settings | None = None) -> str:
    settings = settings or load_settings()
    return settings.host_for(environment) + settings.api.version


def _raise_for_status(response: Response) -> None:
    if response.status == 200:
        return
    logger.warning("Stark Infra API answered with status %d", response.status)
    if response.status == 500:
        raise InternalServerError()
    raw = response.content.decode("utf-8", errors="replace")
    if response.status == 400:
        try:
            errors = response.json()["errors"]
        except (ValueError, KeyError, TypeError) as exc:
            raise UnknownError(raw, response.status) from exc
        # anything but a list of {code, message} objects is not an input error
        if not isinstance(errors, list) or not all(isinstance(item, dict) for item in errors):
            raise UnknownError(raw, response.status)
        raise InputErrors(errors)
    raise UnknownError(raw, response.status)


def fetch(
    method: str,
    path: str,
    payload: Any = None,
    query: dict[str, Any] | None = None,
    user: Any = None,
    language: str | None = None,
    raise_exception: bool = True,
) -> Response:
    """Sign and send one request.

    The signed message is ``"{access_id}:{access_time}:{body}"`` where body is
    the exact JSON text sent (empty for GET and DELETE).
    """
    user = resolve_user(user)
    language = validate_language(language)
    method = str(method).upper()
    if method not in METHODS:
        raise ValidationError(f"unknown HTTP method {method}")

    settings = load_settings()
    url = f"{base_url(user.environment, settings)}/{join_path(path)}{urlencode(query)}"

    body = ""
    if payload is not None and method not in _BODYLESS_METHODS:
        body = json.dumps(payload)

    access_time = str(int(time.time()))
    message = f"{user.access_id}:{access_time}:{body}"

    headers = {
        "Access-Id": user.access_id,
        "Access-Time": access_time,
        "Access-Signature": user.sign(message),
        "Content-Type": "application/json",
        "User-Agent": settings.http.user_agent,
        "Accept-Language": language,
    }

    http_response = _get_client().request(
        method,
        url,
        content=body.encode("utf-8") if body else None,
        headers=headers,
    )
    response = Response(status=http_response.status_code, content=http_response.content)
    logger.debug("%s %s -> %d", method, url, response.status)

    if raise_exception:
        _raise_for_status(response)
    return response
