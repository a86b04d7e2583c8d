"""Exception hierarchy raised by the SDK."""

from __future__ import annotations

import json
from typing import Any


class StarkInfraError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(StarkInfraError, ValueError):
    """Client-side input rejected before any request is sent."""


class Error(StarkInfraError):
    """A single field-level error reported by the API."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r})"


class InputErrors(StarkInfraError):
    """HTTP 400: the API rejected one or more fields of the request."""

    def __init__(self, content: list[dict[str, Any]]) -> None:
        self.raw = list(content)
        self.errors = [
            Error(code=str(item.get("code", "")), message=str(item.get("message", "")))
            for item in self.raw
        ]
        super().__init__(json.dumps(self.raw, ensure_ascii=False))


class InternalServerError(StarkInfraError):
    """HTTP 500 from the API."""

    def __init__(self, content: str = "Houston, we have a problem.") -> None:
        super().__init__(content)
        self.content = content


class UnknownError(StarkInfraError):
    """Any non-200 response that is neither a 400 nor a 500."""

    def __init__(self, content: str, status: int | None = None) -> None:
        message = f"Unknown exception encountered: {content}"
        if status is not None:
            message = f"Unknown exception encountered (status {status}): {content}"
        super().__init__(message)
        self.content = content
        self.status = status


class InvalidSignatureError(StarkInfraError):
    """Inbound content could not be authenticated with the API public key."""


class ParsingError(StarkInfraError):
    """Verified content is not the JSON document it was expected to be."""
