"""Base credential shared by Project and Organization."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from cryptography.hazmat.primitives.asymmetric import ec

from starkinfra.utils import signature
from starkinfra.utils.checks import validate_environment, validate_private_key


@dataclass(frozen=True, kw_only=True)
class User(ABC):
    """Immutable caller identity: environment, id and secp256k1 private key.

    ``private_key`` is the PEM string; the loaded key object is exposed as
    ``signing_key``.
    """

    environment: str
    id: str
    private_key: str = field(repr=False)
    _signing_key: ec.EllipticCurvePrivateKey = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "environment", validate_environment(self.environment))
        object.__setattr__(self, "private_key", validate_private_key(self.private_key))
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(
            self, "_signing_key", signature.load_private_key(self.private_key)
        )

    @property
    def pem(self) -> str:
        return self.private_key

    @property
    def signing_key(self) -> ec.EllipticCurvePrivateKey:
        return self._signing_key

    @property
    @abstractmethod
    def access_id(self) -> str:
        """``project/{id}`` or ``organization/{id}[/workspace/{workspace_id}]``."""

    def sign(self, message: str) -> str:
        return signature.sign(message, self._signing_key)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(access_id={self.access_id!r}, "
            f"environment={self.environment!r}, private_key=***)"
        )
