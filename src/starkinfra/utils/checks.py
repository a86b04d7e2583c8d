"""Normalization and validation of caller input before a request is built."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any

from starkinfra import defaults
from starkinfra.defaults import ACCEPTED_LANGUAGES
from starkinfra.environment import Environment
from starkinfra.error import ValidationError
from starkinfra.utils import signature

if TYPE_CHECKING:
    from starkinfra.user.user import User

_USER_REQUIRED_MESSAGE = (
    "A user is required to access our API. "
    "Pass one explicitly or call starkinfra.set_user() once at startup."
)

_DATETIME_FORMATS = (
    ("%Y-%m-%dT%H:%M:%S.%f+00:00", "datetime"),
    ("%Y-%m-%dT%H:%M:%S+00:00", "datetime"),
    ("%Y-%m-%d", "date"),
)


def resolve_user(user: Any = None) -> User:
    """Return ``user`` or the process default user, failing if neither is set."""
    from starkinfra.user.user import User

    if user is None:
        user = defaults.get_user()
    if user is None:
        raise ValidationError(_USER_REQUIRED_MESSAGE)
    if not isinstance(user, User):
        raise ValidationError(
            f"user must be a Project or Organization, got {type(user).__name__}"
        )
    return user


def validate_language(language: str | None = None) -> str:
    if language is None:
        language = defaults.get_language()
    if language not in ACCEPTED_LANGUAGES:
        raise ValidationError(f"Select a valid language: {', '.join(ACCEPTED_LANGUAGES)}")
    return language


def validate_environment(environment: Any) -> str:
    if isinstance(environment, Environment):
        return environment.value
    if environment not in Environment.values():
        raise ValidationError(
            f"Select a valid environment: {', '.join(Environment.values())}"
        )
    return str(environment)


def validate_private_key(pem: Any) -> str:
    try:
        signature.load_private_key(pem)
    except ValueError as exc:
        raise ValidationError(
            "Private-key must be a valid secp256k1 ECDSA string in pem format"
        ) from exc
    return pem


def _parse_datetime_string(data: str) -> tuple[datetime, str]:
    for pattern, kind in _DATETIME_FORMATS:
        try:
            parsed = datetime.strptime(data, pattern)
        except ValueError:
            continue
        return parsed.replace(tzinfo=timezone.utc), kind
    raise ValidationError(f"invalid datetime string {data}")


def normalize_date(data: Any) -> date | None:
    """Coerce a date, datetime or ISO string into a ``date``."""
    if data is None:
        return None
    if isinstance(data, datetime):
        return data.date()
    if isinstance(data, date):
        return data
    if not isinstance(data, str):
        raise ValidationError(f"invalid date {data!r}")
    parsed, _ = _parse_datetime_string(data)
    return parsed.date()


def normalize_datetime(data: Any) -> datetime | None:
    """Coerce a date, datetime or ISO string into a ``datetime``.

    Strings are interpreted as UTC; a bare date becomes midnight UTC.
    """
    if data is None:
        return None
    if isinstance(data, datetime):
        return data
    if isinstance(data, date):
        return datetime(data.year, data.month, data.day, tzinfo=timezone.utc)
    if not isinstance(data, str):
        raise ValidationError(f"invalid datetime {data!r}")
    parsed, _ = _parse_datetime_string(data)
    return parsed


def normalize_date_or_datetime(data: Any) -> date | datetime | None:
    """Keep the precision of the input: date strings stay dates."""
    if data is None:
        return None
    if isinstance(data, (date, datetime)):
        return data
    if not isinstance(data, str):
        raise ValidationError(f"invalid date or datetime {data!r}")
    parsed, kind = _parse_datetime_string(data)
    return parsed.date() if kind == "date" else parsed
