"""Central bank transaction identifiers (end-to-end and return ids)."""

from __future__ import annotations

import secrets
import string
from datetime import datetime, timezone

_ALPHABET = string.ascii_letters + string.digits
_RANDOM_LENGTH = 11


def _create(bank_code: str, now: datetime | None = None) -> str:
    now = now or datetime.now(tz=timezone.utc)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_RANDOM_LENGTH))
    return f"{bank_code}{now.strftime('%Y%m%d%H%M')}{suffix}"


def end_to_end_id(bank_code: str, now: datetime | None = None) -> str:
    """``E`` + ISPB bank code + ``YYYYmmddHHMM`` + 11 random alphanumerics."""
    return "E" + _create(bank_code, now)


def return_id(bank_code: str, now: datetime | None = None) -> str:
    """Same layout as ``end_to_end_id`` with a ``D`` prefix, used for reversals."""
    return "D" + _create(bank_code, now)
