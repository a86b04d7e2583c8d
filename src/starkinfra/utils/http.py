"""Shared HTTP utilities."""

from __future__ import annotations

from urllib.parse import urlparse

_HOST_ALLOWED_SCHEMES = frozenset({"http", "https"})


def normalize_host(value: str) -> str:
    """Normalize and validate an API host URL.

    The result always ends with a single ``/`` so that the API version can be
    appended directly.

    Raises ``ValueError`` on validation failure.
    """
    candidate = value.strip()
    if not candidate:
        raise ValueError("host must not be empty")

    parsed = urlparse(candidate)
    if parsed.scheme.lower() not in _HOST_ALLOWED_SCHEMES:
        raise ValueError("host must use http or https")
    if not parsed.netloc:
        raise ValueError("host must include a network location")
    if parsed.query or parsed.fragment:
        raise ValueError("host must not include query or fragment")
    if parsed.username or parsed.password:
        raise ValueError("host must not include userinfo")

    normalized_path = parsed.path.rstrip("/")
    return f"{parsed.scheme.lower()}://{parsed.netloc}{normalized_path}/"


def join_path(*parts: str) -> str:
    """Join URL path segments with single slashes, dropping empty segments."""
    segments = [str(part).strip("/") for part in parts]
    return "/".join(segment for segment in segments if segment)
