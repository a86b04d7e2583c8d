from __future__ import annotations

from dataclasses import dataclass, field

from starkinfra.user.user import User


@dataclass(frozen=True, kw_only=True, repr=False)
class Project(User):
    """Credential permanently linked to a single Workspace."""

    name: str = ""
    allowed_ips: tuple[str, ...] = field(default=(), compare=False)

    @property
    def access_id(self) -> str:
        return f"project/{self.id}"
