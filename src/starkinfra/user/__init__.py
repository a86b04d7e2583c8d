"""Credentials used to authenticate requests."""

from starkinfra.user.organization import Organization
from starkinfra.user.project import Project
from starkinfra.user.user import User

__all__ = ["Organization", "Project", "User"]
