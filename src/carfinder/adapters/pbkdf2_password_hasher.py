from __future__ import annotations

import hashlib
import hmac
import os

from carfinder.ports.password_hasher import PasswordHasher

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 390000


class Pbkdf2PasswordHasher(PasswordHasher):
    """
    PBKDF2-HMAC-SHA256 with a random 16-byte salt.

    Stored format: ``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>``.
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        self._iterations = iterations

    def hash(self, password: str) -> str:
        return self._derive(password, os.urandom(16), self._iterations)

    def verify(self, stored_hash: str, password: str) -> bool:
        try:
            algorithm, iterations, salt_hex, _ = stored_hash.split("$", 3)
            salt = bytes.fromhex(salt_hex)
            rounds = int(iterations)
        except ValueError:
            return False
        if algorithm != ALGORITHM:
            return False
        candidate = self._derive(password, salt, rounds)
        return hmac.compare_digest(candidate, stored_hash)

    @staticmethod
    def _derive(password: str, salt: bytes, iterations: int) -> str:
        derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
        return f"{ALGORITHM}${iterations}${salt.hex()}${derived.hex()}"
