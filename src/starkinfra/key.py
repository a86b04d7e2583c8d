"""secp256k1 key pair generation for new Projects and Organizations."""

from __future__ import annotations

import logging
from pathlib import Path

from starkinfra.utils import signature

logger = logging.getLogger(__name__)

PRIVATE_KEY_FILENAME = "privateKey.pem"
PUBLIC_KEY_FILENAME = "publicKey.pem"


def create(path: str | Path | None = None) -> tuple[str, str]:
    """Generate a key pair and return ``(private_pem, public_pem)``.

    When ``path`` is given both PEMs are also written into that directory.
    Register the public key on the Stark Infra website before using the
    private key in a Project or Organization.
    """
    private_key = signature.generate_private_key()
    private_pem = signature.private_key_to_pem(private_key)
    public_pem = signature.public_key_to_pem(private_key.public_key())

    if path is not None:
        directory = Path(path)
        directory.mkdir(parents=True, exist_ok=True)
        (directory / PRIVATE_KEY_FILENAME).write_text(private_pem, encoding="utf-8")
        (directory / PUBLIC_KEY_FILENAME).write_text(public_pem, encoding="utf-8")
        logger.info("Key pair written to %s", directory)

    return private_pem, public_pem
