"""ECDSA (secp256k1 / SHA-256) primitives used to sign requests and verify webhooks."""

from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec

from starkinfra.error import InvalidSignatureError

CURVE = ec.SECP256K1


def load_private_key(pem: str) -> ec.EllipticCurvePrivateKey:
    """Load a PEM private key, rejecting anything that is not a secp256k1 EC key.

    Raises ``ValueError`` on any parsing or curve mismatch.
    """
    if not isinstance(pem, (str, bytes)):
        raise ValueError("private key must be a PEM string")
    data = pem.encode("utf-8") if isinstance(pem, str) else pem
    try:
        key = serialization.load_pem_private_key(data, password=None)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid private key: {exc}") from exc
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise ValueError("private key is not an elliptic-curve key")
    if not isinstance(key.curve, CURVE):
        raise ValueError(f"private key curve must be secp256k1, got {key.curve.name}")
    return key


def load_public_key(pem: str) -> ec.EllipticCurvePublicKey:
    data = pem.encode("utf-8") if isinstance(pem, str) else pem
    try:
        key = serialization.load_pem_public_key(data)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid public key: {exc}") from exc
    if not isinstance(key, ec.EllipticCurvePublicKey):
        raise ValueError("public key is not an elliptic-curve key")
    return key


def generate_private_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(CURVE())


def private_key_to_pem(key: ec.EllipticCurvePrivateKey) -> str:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")


def public_key_to_pem(key: ec.EllipticCurvePublicKey) -> str:
    return key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")


def sign(message: str, private_key: ec.EllipticCurvePrivateKey) -> str:
    """Return the base64 DER signature of ``message`` (UTF-8, SHA-256)."""
    der = private_key.sign(message.encode("utf-8"), ec.ECDSA(hashes.SHA256()))
    return base64.b64encode(der).decode("ascii")


def decode_signature(signature: str) -> bytes:
    """Strictly decode a base64 signature header value."""
    if not isinstance(signature, (str, bytes)):
        raise InvalidSignatureError("The provided signature is not valid")
    try:
        decoded = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidSignatureError("The provided signature is not valid") from exc
    if not decoded:
        raise InvalidSignatureError("The provided signature is not valid")
    return decoded


def verify(
    message: str | bytes,
    signature: bytes,
    public_key: ec.EllipticCurvePublicKey,
) -> bool:
    """Check a DER signature over ``message``; a mismatch returns ``False``."""
    data = message.encode("utf-8") if isinstance(message, str) else message
    try:
        public_key.verify(signature, data, ec.ECDSA(hashes.SHA256()))
    except InvalidSignature:
        return False
    return True
