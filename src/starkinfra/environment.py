from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    production = "production"
    sandbox = "sandbox"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)
