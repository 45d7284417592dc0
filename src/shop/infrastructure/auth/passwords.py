"""Salted PBKDF2 password hashes.

Stored as ``pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>`` so the
iteration count can be raised later without invalidating old hashes.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets

SCHEME = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 600_000
SALT_BYTES = 16


class Pbkdf2PasswordHasher:

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(SALT_BYTES)
        digest = self._derive(password, salt, self._iterations)
        return f"{SCHEME}${self._iterations}${salt.hex()}${digest.hex()}"

    def verify(self, password: str, stored: str) -> bool:
        try:
            scheme, iterations, salt_hex, digest_hex = stored.split("$")
            salt = bytes.fromhex(salt_hex)
            rounds = int(iterations)
        except ValueError:
            return False
        if scheme != SCHEME or not isinstance(password, str):
            return False
        return hmac.compare_digest(self._derive(password, salt, rounds).hex(), digest_hex)

    @staticmethod
    def _derive(password: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
