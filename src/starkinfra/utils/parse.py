"""Authentication and parsing of content pushed by the API to user endpoints."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from cryptography.hazmat.primitives.asymmetric import ec

from starkinfra.error import InvalidSignatureError, ParsingError
from starkinfra.utils import signature as ecdsa
from starkinfra.utils.api import from_api_json
from starkinfra.utils.cache import public_keys
from starkinfra.utils.checks import resolve_user
from starkinfra.utils.request import fetch
from starkinfra.utils.resource import ResourceSpec

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _fetch_public_key(user: Any) -> ec.EllipticCurvePublicKey:
    json_ = fetch(method="GET", path="public-key", query={"limit": 1}, user=user).json()
    pem = json_["publicKeys"][0]["content"]
    return ecdsa.load_public_key(pem)


def _public_key(user: Any, refresh: bool = False) -> ec.EllipticCurvePublicKey:
    key = None if refresh else public_keys.get(user.environment)
    if key is None:
        key = _fetch_public_key(user)
        public_keys.set(user.environment, key)
        logger.info("Stark Infra public key cached for %s", user.environment)
    return key


def verify(content: str | bytes, signature: str, user: Any = None) -> str | bytes:
    """Return ``content`` unchanged if ``signature`` matches the API public key.

    A mismatch against the cached key is retried once with a freshly fetched
    key, which covers server-side key rotation.
    """
    user = resolve_user(user)
    der = ecdsa.decode_signature(signature)

    if ecdsa.verify(content, der, _public_key(user)):
        return content

    logger.info("Signature mismatch with cached public key, refreshing it once")
    if ecdsa.verify(content, der, _public_key(user, refresh=True)):
        return content

    raise InvalidSignatureError(
        "The provided signature and content do not match the Stark Infra public key"
    )


def parse_and_verify(
    content: str | bytes,
    signature: str,
    resource: ResourceSpec[T],
    user: Any = None,
    key: str | None = None,
) -> T:
    """Verify ``content``, then build ``resource`` from it (unwrapping ``key`` if given)."""
    content = verify(content=content, signature=signature, user=user)

    try:
        document = json.loads(content)
    except ValueError as exc:
        raise ParsingError(f"content is not valid JSON: {exc}") from exc

    if key is not None:
        if not isinstance(document, dict) or key not in document:
            raise ParsingError(f"content has no {key!r} key")
        document = document[key]

    if not isinstance(document, dict):
        raise ParsingError(f"expected a JSON object for {resource.name}")

    try:
        return from_api_json(resource, document)
    except (KeyError, TypeError, AttributeError, ValueError) as exc:
        raise ParsingError(f"content is not a valid {resource.name}: {exc!r}") from exc
