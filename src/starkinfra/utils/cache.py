"""Process-wide cache of the API public key, one entry per environment."""

from __future__ import annotations

import threading

from cryptography.hazmat.primitives.asymmetric import ec


class PublicKeyCache:
    """Thread-safe map of environment -> API public key."""

    def __init__(self) -> None:
        self._keys: dict[str, ec.EllipticCurvePublicKey] = {}
        self._lock = threading.Lock()

    def get(self, environment: str) -> ec.EllipticCurvePublicKey | None:
        with self._lock:
            return self._keys.get(environment)

    def set(self, environment: str, key: ec.EllipticCurvePublicKey) -> None:
        with self._lock:
            self._keys[environment] = key

    def clear(self) -> None:
        with self._lock:
            self._keys.clear()


public_keys = PublicKeyCache()
