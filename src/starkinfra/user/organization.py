from __future__ import annotations

from dataclasses import dataclass

from starkinfra.user.user import User


@dataclass(frozen=True, kw_only=True, repr=False)
class Organization(User):
    """Credential for a whole Organization, optionally scoped to one Workspace.

    Leave ``workspace_id`` unset to list or create Workspaces; use
    ``Organization.replace`` to obtain a copy scoped to a given Workspace.
    """

    workspace_id: str | None = None

    @property
    def access_id(self) -> str:
        if self.workspace_id:
            return f"organization/{self.id}/workspace/{self.workspace_id}"
        return f"organization/{self.id}"

    @staticmethod
    def replace(organization: Organization, workspace_id: str | None) -> Organization:
        """Return a new Organization with ``workspace_id``; the original is untouched."""
        return Organization(
            environment=organization.environment,
            id=organization.id,
            private_key=organization.private_key,
            workspace_id=workspace_id,
        )
