"""Tests for the ECDSA primitives."""

from __future__ import annotations

import base64

import pytest

from starkinfra.error import InvalidSignatureError
from starkinfra.utils import signature


def _flip_last_bit(encoded: str) -> bytes:
    raw = bytearray(base64.b64decode(encoded))
    raw[-1] ^= 0x01
    return bytes(raw)


@pytest.mark.parametrize(
    "message",
    [
        "project/1:1600000000:",
        'project/1:1600000000:{"requests": [{"amount": 100}]}',
        "organization/2/workspace/3:1:çãõ unicode",
    ],
)
def test_sign_then_verify_round_trip(key_pair: tuple[str, str], message: str) -> None:
    private_key = signature.load_private_key(key_pair[0])
    public_key = signature.load_public_key(key_pair[1])

    encoded = signature.sign(message, private_key)

    assert signature.verify(message, signature.decode_signature(encoded), public_key)


def test_flipped_bit_does_not_verify(key_pair: tuple[str, str]) -> None:
    private_key = signature.load_private_key(key_pair[0])
    public_key = signature.load_public_key(key_pair[1])
    encoded = signature.sign("content", private_key)

    assert signature.verify("content", _flip_last_bit(encoded), public_key) is False


def test_other_message_does_not_verify(key_pair: tuple[str, str]) -> None:
    private_key = signature.load_private_key(key_pair[0])
    public_key = signature.load_public_key(key_pair[1])
    encoded = signature.sign("content", private_key)

    assert signature.verify("content!", signature.decode_signature(encoded), public_key) is False


@pytest.mark.parametrize("value", ["something is definitely wrong", "", "@@@@", None])
def test_malformed_signature_raises_invalid_signature(value: object) -> None:
    with pytest.raises(InvalidSignatureError):
        signature.decode_signature(value)  # type: ignore[arg-type]


def test_public_key_loader_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="invalid public key"):
        signature.load_public_key("nope")
