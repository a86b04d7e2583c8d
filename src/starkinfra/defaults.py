"""Process-wide default user and language.

Both slots are meant to be set once at startup; reads and writes go through
a lock so that concurrent callers always observe a complete value.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from starkinfra.config import load_settings
from starkinfra.error import ValidationError

if TYPE_CHECKING:
    from starkinfra.user.user import User

ACCEPTED_LANGUAGES = ("en-US", "pt-BR")

_lock = threading.Lock()
_user: User | None = None
_language: str | None = None


def set_user(user: User | None) -> None:
    global _user
    with _lock:
        _user = user


def get_user() -> User | None:
    with _lock:
        return _user


def set_language(language: str) -> None:
    global _language
    if language not in ACCEPTED_LANGUAGES:
        raise ValidationError(f"Select a valid language: {', '.join(ACCEPTED_LANGUAGES)}")
    with _lock:
        _language = language


def get_language() -> str:
    with _lock:
        language = _language
    if language is None:
        return load_settings().defaults.language
    return language


def reset() -> None:
    """Clear both slots (the language falls back to configuration)."""
    global _user, _language
    with _lock:
        _user = None
        _language = None
